"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the clock for each command and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timewizard.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from timewizard.config.settings import TimeWizardSettings
    from timewizard.infrastructure.clock import Clock
    from timewizard.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TimeWizardSettings) -> None:
        self.settings = settings

        from timewizard.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from timewizard.services.telemetry import enable_telemetry

            enable_telemetry()

    def clock(self, now: str | None = None) -> Clock:
        """Build the clock from ``[clock] timezone`` and an optional ``--now``."""
        from timewizard.infrastructure.clock import build_clock

        try:
            return build_clock(self.settings.clock.timezone, now)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
