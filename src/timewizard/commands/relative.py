"""Command: describe a signed day count."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timewizard.commands._base import TwCommand

if TYPE_CHECKING:
    from timewizard.commands._context import AppContext


@click.command(
    cls=TwCommand,
    examples="""\
  timewizard relative 10
  timewizard relative -- -45
  timewizard -q relative 800""",
)
@click.argument("days", type=int)
@click.pass_obj
def relative(app: AppContext, days: int) -> None:
    """Describe DAYS as a coarse phrase ("today", "2 weeks", "1 year")."""
    from timewizard.services.query import QueryService

    app.emit(QueryService(app.settings, app.clock()).relative(days))
