"""Rich Console factory and theme for timewizard output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TW_THEME = Theme(
    {
        "tw.ok": "bold green",
        "tw.error": "bold red",
        "tw.op": "bold cyan",
        "tw.key": "dim",
        "tw.instant": "bold blue",
        "tw.raw": "bold",
        "tw.outcome.annotated": "green",
        "tw.outcome.duration": "cyan",
        "tw.outcome.invalid": "yellow",
        "tw.outcome.missing": "dim",
        "tw.outcome.failed": "red",
    }
)


def create_console(*, no_color: bool = False) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
    """
    return Console(
        file=StringIO(),
        theme=TW_THEME,
        no_color=no_color,
        highlight=False,
        width=120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_outcome(outcome: str) -> str:
    """Return the Rich style name for an annotation outcome."""
    return f"tw.outcome.{outcome}" if outcome else ""
