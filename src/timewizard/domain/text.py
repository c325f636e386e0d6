"""Character counting used by the datetime classifier."""

from __future__ import annotations


def count(text: str, char: str) -> int:
    """Return the number of positions in *text* equal to *char*.

    This is a single-character counter, not a substring counter: a *char*
    that is empty or longer than one character never matches.

    Examples:
        >>> count("2021-06-01", "-")
        2
        >>> count("banana", "an")
        0
    """
    return sum(1 for c in text if c == char)
