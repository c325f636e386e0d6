"""Subcommand modules for timewizard.

Provides register_commands() which uses deferred imports to keep
``timewizard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from timewizard.commands.annotate import annotate
    from timewizard.commands.count import count
    from timewizard.commands.parse import parse
    from timewizard.commands.relative import relative
    from timewizard.commands.week import week

    cli.add_command(annotate)
    cli.add_command(parse)
    cli.add_command(week)
    cli.add_command(relative)
    cli.add_command(count)
