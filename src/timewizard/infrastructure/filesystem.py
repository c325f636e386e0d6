"""File I/O for HTML documents."""

from __future__ import annotations

from pathlib import Path


def read_html(path: Path) -> str:
    """Read an HTML file as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def write_html(path: Path, content: str) -> None:
    """Write HTML text to *path*.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
