"""Command: count a character in a string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timewizard.commands._base import TwCommand

if TYPE_CHECKING:
    from timewizard.commands._context import AppContext


@click.command(
    cls=TwCommand,
    examples="""\
  timewizard count 2021-06-01 -
  timewizard -q count banana a""",
)
@click.argument("text")
@click.argument("char")
@click.pass_obj
def count(app: AppContext, text: str, char: str) -> None:
    """Count how many characters of TEXT equal CHAR."""
    from timewizard.services.query import QueryService

    app.emit(QueryService(app.settings, app.clock()).count(text, char))
