"""Command: classify and resolve a single datetime value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timewizard.commands._base import TwCommand

if TYPE_CHECKING:
    from timewizard.commands._context import AppContext


@click.command(
    cls=TwCommand,
    examples="""\
  timewizard parse 2021-W01
  timewizard parse 14:30 --now 2021-06-01T08:00:00+00:00
  timewizard parse 06-01
  timewizard --json parse PT1H""",
)
@click.argument("value")
@click.option("--now", default=None, help="Pretend the current time is this ISO-8601 value.")
@click.pass_obj
def parse(app: AppContext, value: str, now: str | None) -> None:
    """Show how a datetime attribute VALUE is classified and resolved."""
    from timewizard.services.query import QueryService

    app.emit(QueryService(app.settings, app.clock(now)).parse_value(value))
