"""Coarse relative-time phrases ("3 days", "2 weeks", "1 year").

Day counts are midnight-to-midnight: time of day is dropped before
subtracting, so 23:59 and 00:01 the next morning are one day apart.
"""

from __future__ import annotations

from datetime import datetime

# (exclusive upper bound, divisor, singular label, plural label)
_BANDS: tuple[tuple[int, int, str, str], ...] = (
    (7, 1, "day", "days"),
    (30, 7, "week", "weeks"),
    (365, 30, "month", "months"),
)


def describe(day_count: int) -> str:
    """Return a coarse phrase for a signed number of days.

    The sign is ignored: "3 days ago" and "in 3 days" both give ``"3 days"``.

    Examples:
        >>> describe(0)
        'today'
        >>> describe(-9)
        '1 week'
        >>> describe(800)
        '2 years'
    """
    days = abs(day_count)
    if days < 1:
        return "today"

    for upper, divisor, singular, plural in _BANDS:
        if days < upper:
            n = days // divisor
            return f"{n} {singular if n == 1 else plural}"

    n = days // 365
    return f"{n} {'year' if n == 1 else 'years'}"


def days_between(start: datetime, end: datetime) -> int:
    """Return the signed number of calendar days from *start* to *end*."""
    return (end.date() - start.date()).days


def describe_relative(instant: datetime, now: datetime) -> str:
    """Describe how far *instant* is from *now*, in *now*'s timezone."""
    local = instant.astimezone(now.tzinfo) if instant.tzinfo is not None else instant
    return describe(days_between(now, local))
