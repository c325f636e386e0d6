"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from timewizard.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["annotate", "--examples"], ["timewizard annotate page.html", "--in-place"]),
    (["parse", "--examples"], ["timewizard parse 2021-W01"]),
    (["week", "--examples"], ["timewizard week 2021 1"]),
    (["relative", "--examples"], ["relative -- -45"]),
    (["count", "--examples"], ["timewizard count"]),
]


@pytest.mark.parametrize(
    "args,keywords",
    EXAMPLES_COMMANDS,
    ids=[args[0] for args, _ in EXAMPLES_COMMANDS],
)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_skip_required_arguments(cli_runner: CliRunner) -> None:
    """--examples is eager, so missing positional arguments are not reported."""
    result = cli_runner.invoke(cli, ["week", "--examples"])
    assert result.exit_code == 0
    assert "Missing argument" not in result.output
