"""Week-of-year arithmetic.

Weeks are counted from the Monday on or before January 1st. Week 0 and
week 1 both land on that Monday; week N is that Monday plus N-1 weeks.
This deliberately differs from ISO-8601 week numbering (no "week 1
contains January 4th" rule).
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, tzinfo

from timewizard.domain.errors import InvalidArgumentError

MONDAY = 0


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be a positive number."
        raise InvalidArgumentError(msg)
    return value


def first_monday(year: int) -> date:
    """Return the Monday on or before January 1st of *year*."""
    day = date(year, 1, 1)
    while day.weekday() != MONDAY:
        day -= timedelta(days=1)
    return day


def get_week(year: int, week_number: int, *, tz: tzinfo | None = None) -> datetime:
    """Return midnight on the Monday of week *week_number* in *year*.

    Args:
        year: Calendar year, 1..9999.
        week_number: Week index. Values <= 0 behave like week 0.
        tz: Timezone attached to the result; naive local time when None.

    Raises:
        InvalidArgumentError: If either argument is not an integer, or the
            resulting Monday cannot be expressed in UTC.
    """
    year = _require_int("year", year)
    week_number = _require_int("weekNumber", week_number)

    try:
        monday = first_monday(year)
        if week_number > 0:
            monday += timedelta(weeks=week_number - 1)
    except (ValueError, OverflowError) as exc:
        msg = f"week {week_number} of year {year} is out of range"
        raise InvalidArgumentError(msg) from exc

    result = datetime(monday.year, monday.month, monday.day, tzinfo=tz)
    try:
        result.astimezone(UTC)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"week {week_number} of year {year} is out of range"
        raise InvalidArgumentError(msg) from exc
    return result
