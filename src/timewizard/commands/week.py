"""Command: resolve the Monday of a week."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timewizard.commands._base import TwCommand

if TYPE_CHECKING:
    from timewizard.commands._context import AppContext


@click.command(
    cls=TwCommand,
    examples="""\
  timewizard week 2021 1
  timewizard -q week 1970 1""",
)
@click.argument("year", type=int)
@click.argument("week_number", metavar="WEEK", type=int)
@click.pass_obj
def week(app: AppContext, year: int, week_number: int) -> None:
    """Print the Monday that starts WEEK of YEAR.

    Weeks count from the Monday on or before January 1st; week 0 and
    week 1 are the same Monday.
    """
    from timewizard.services.query import QueryService

    app.emit(QueryService(app.settings, app.clock()).week(year, week_number))
