"""Tests for the count command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from timewizard.cli import cli


class TestCountCommand:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "count", "banana", "a"])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "count", "2021-06-01", "-"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["data"]["count"] == 2
        assert data["warnings"] == []

    def test_multi_character_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count", "aaaa", "aa"])
        assert result.exit_code == 0
        assert "count: 0" in result.output
        assert "WARNING" in result.output
