"""Command: annotate <time> elements in an HTML file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from timewizard.commands._base import TwCommand

if TYPE_CHECKING:
    from timewizard.commands._context import AppContext


@click.command(
    cls=TwCommand,
    examples="""\
  timewizard annotate page.html
  timewizard annotate page.html -o page.annotated.html
  timewizard annotate page.html --in-place --now 2021-06-01T09:00:00+02:00
  timewizard --json annotate page.html""",
)
@click.argument("source", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write annotated HTML here.",
)
@click.option("--in-place", is_flag=True, help="Rewrite SOURCE with the annotations.")
@click.option("--now", default=None, help="Pretend the current time is this ISO-8601 value.")
@click.pass_obj
def annotate(
    app: AppContext,
    source: Path,
    output: Path | None,
    in_place: bool,
    now: str | None,
) -> None:
    """Annotate <time> elements with their resolved ISO-8601 instant.

    Without --output or --in-place nothing is written; the report shows
    what would change.
    """
    from timewizard.services.annotate import AnnotateService

    if output is not None and in_place:
        raise click.UsageError("--output and --in-place are mutually exclusive.")

    svc = AnnotateService(app.settings, app.clock(now))
    app.emit(svc.annotate_file(source, output=output, in_place=in_place))
