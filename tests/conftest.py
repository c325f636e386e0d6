"""Shared pytest fixtures and test helpers for timewizard tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

from timewizard.config.settings import TimeWizardSettings
from timewizard.infrastructure.clock import FixedClock
from timewizard.services.telemetry import _current_span, disable_telemetry

# Fixed offset keeps results independent of the host timezone.
PARIS_SUMMER = timezone(timedelta(hours=2))


@pytest.fixture(autouse=True)
def _isolate_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Run every test from an empty directory with no config overrides.

    Also restores logging handlers and telemetry state, which the CLI
    reconfigures on every invocation.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("TIMEWIZARD_CONFIG", "TIMEWIZARD_CLOCK__TIMEZONE", "TIMEWIZARD_VERBOSE"):
        monkeypatch.delenv(var, raising=False)

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tw = logging.getLogger("timewizard")
    tw_level = tw.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tw.setLevel(tw_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now() -> datetime:
    """2021-06-01 10:00 in a UTC+2 zone (08:00Z)."""
    return datetime(2021, 6, 1, 10, 0, tzinfo=PARIS_SUMMER)


@pytest.fixture
def clock(fixed_now: datetime) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def settings(tmp_path: Path) -> TimeWizardSettings:
    """Settings with code defaults only."""
    return TimeWizardSettings.from_cli(start=tmp_path)
