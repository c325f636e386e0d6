"""Classification and resolution of ``datetime`` attribute values.

Recognized shapes, checked in order (first match wins):

- ``PT...``                       duration, not a point in time
- ``HH:MM[:SS]``                  time of day on today's date
- ``YYYY-Www``                    Monday of week ``ww``
- ``20YY-MM``                     year-month
- ``MM-DD``                       month-day in the current year
- anything else                   generic date/date-time grammar

Date-only forms resolve to UTC midnight; date-time forms without a ``Z``
suffix are local to the timezone of *now*. Numeric offsets and
fractional seconds beyond the canonical ``.sssZ`` rendering are rejected.
So are values near the ends of years 1 and 9999 that leave the datetime
range once shifted into UTC or the local timezone.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, tzinfo

from pydantic import BaseModel

from timewizard.domain.errors import InvalidArgumentError
from timewizard.domain.text import count
from timewizard.domain.types import DatetimeShape
from timewizard.domain.weeks import get_week

DURATION_PREFIX = "PT"
WEEK_MARKER = "-W"

_GENERIC = re.compile(
    r"""
    ^(?P<year>\d{4})
    (?:-(?P<month>\d{2})
        (?:-(?P<day>\d{2})
            (?:[T\ ](?P<hour>\d{2}):(?P<minute>\d{2})
                (?::(?P<second>\d{2})(?:\.(?P<millis>\d{3}))?)?
                (?P<utc>Z)?
            )?
        )?
    )?$
    """,
    re.VERBOSE | re.ASCII,
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


class Resolution(BaseModel):
    """Outcome of resolving a single raw ``datetime`` value.

    Attributes:
        raw: The attribute text as found.
        shape: Which branch of the grammar matched.
        instant: The resolved point in time, or None.
        valid: False when the value matched no parseable form.
    """

    model_config = {"frozen": True}

    raw: str
    shape: DatetimeShape
    instant: datetime | None = None
    valid: bool = True

    @property
    def is_point_in_time(self) -> bool:
        return self.instant is not None


def classify(raw: str) -> DatetimeShape:
    """Return the shape of *raw* without resolving it."""
    hyphens = count(raw, "-")

    if raw.startswith(DURATION_PREFIX):
        return DatetimeShape.DURATION
    if hyphens == 0 and ":" in raw:
        return DatetimeShape.TIME
    if hyphens == 1:
        if raw.find(WEEK_MARKER) > 0:
            return DatetimeShape.WEEK
        if raw.startswith("20"):
            return DatetimeShape.YEAR_MONTH
        return DatetimeShape.MONTH_DAY
    return DatetimeShape.GENERIC


def parse_generic(text: str, tz: tzinfo | None = None) -> datetime | None:
    """Parse *text* with the generic date/date-time grammar.

    Returns None when the text does not match or names an impossible
    calendar date.
    """
    match = _GENERIC.match(text)
    if match is None:
        return None
    parts = match.groupdict()
    if parts["millis"] and not parts["utc"]:
        return None

    if parts["hour"] is None:
        zone: tzinfo | None = UTC
    else:
        zone = UTC if parts["utc"] else tz

    try:
        return datetime(
            int(parts["year"]),
            int(parts["month"] or 1),
            int(parts["day"] or 1),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            int(parts["millis"] or 0) * 1000,
            tzinfo=zone,
        )
    except ValueError:
        return None


def leading_int(text: str) -> int | None:
    """Parse the leading integer of *text* (``"05x"`` -> 5), or None."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # More digits than int() converts from a string.
        return None


def _resolve_week(raw: str, tz: tzinfo | None) -> datetime:
    index = raw.find(WEEK_MARKER)
    year = leading_int(raw[:index])
    if year is None:
        msg = "year must be a positive number."
        raise InvalidArgumentError(msg)
    week_number = leading_int(raw[index + len(WEEK_MARKER) :])
    if week_number is None:
        msg = "weekNumber must be a positive number."
        raise InvalidArgumentError(msg)
    return get_week(year, week_number, tz=tz)


def _representable(instant: datetime, tz: tzinfo | None) -> bool:
    """Whether *instant* can be shown both in UTC and in *tz*."""
    try:
        instant.astimezone(UTC)
        instant.astimezone(tz)
    except (OverflowError, OSError, ValueError):
        return False
    return True


def resolve(raw: str, now: datetime) -> Resolution:
    """Classify *raw* and resolve it against *now*.

    Values that resolve to a date the UTC or *now* timezone cannot
    express come back with ``valid=False``.

    Raises:
        InvalidArgumentError: If a week-form value has a non-numeric year
            or week number, or its Monday is out of range.
    """
    shape = classify(raw)
    tz = now.tzinfo

    if shape is DatetimeShape.DURATION:
        return Resolution(raw=raw, shape=shape)

    if shape is DatetimeShape.WEEK:
        return Resolution(raw=raw, shape=shape, instant=_resolve_week(raw, tz))

    if shape is DatetimeShape.TIME:
        text = f"{now.date().isoformat()}T{raw}"
    elif shape is DatetimeShape.MONTH_DAY:
        text = f"{now.year:04d}-{raw}"
    else:
        text = raw

    instant = parse_generic(text, tz)
    if instant is not None and not _representable(instant, tz):
        instant = None
    return Resolution(raw=raw, shape=shape, instant=instant, valid=instant is not None)


def parse_datetime(raw: str, now: datetime) -> datetime | None:
    """Return the instant *raw* denotes, or None if it is not a point in time."""
    return resolve(raw, now).instant


def to_iso_instant(value: datetime) -> str:
    """Render *value* as a UTC instant: ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Naive values are taken as system local time.
    """
    utc = value.astimezone(UTC)
    return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
