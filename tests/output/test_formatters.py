"""Tests for the format_result dispatcher and OutputSettings."""

import json

from timewizard.output.formatters import OutputSettings, format_result
from timewizard.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("week", monday="1969-12-29"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "week"
        assert data["data"]["monday"] == "1969-12-29"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        settings = OutputSettings(quiet=True)
        output = format_result(_ok("relative", phrase="1 week"), settings=settings)
        assert output == "1 week"

    def test_quiet_error(self) -> None:
        output = format_result(_err("parse", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultDefault:
    def test_default_success_contains_ok(self) -> None:
        output = format_result(_ok("week", monday="1969-12-29"))
        assert "OK" in output
        assert "week" in output
        assert "1969-12-29" in output

    def test_default_error_contains_error(self) -> None:
        output = format_result(_err("parse", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output
