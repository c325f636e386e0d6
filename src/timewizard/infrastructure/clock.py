"""Clock abstraction supplying "now" to the resolver.

Everything downstream derives today's date and the current year from the
datetime a clock returns, so the timezone it carries is the local zone
for that run.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from typing import Protocol


class LocalTimezone(tzinfo):
    """The system local timezone, with the offset looked up per datetime.

    ``datetime.now().astimezone()`` only carries the offset in effect right
    now. A value on the other side of a DST change needs the offset of its
    own date, which a naive ``astimezone()`` call provides.
    """

    def utcoffset(self, dt: datetime | None) -> timedelta | None:
        if dt is None:
            return None
        return self._fixed(dt).utcoffset()

    def dst(self, dt: datetime | None) -> timedelta | None:
        return None

    def tzname(self, dt: datetime | None) -> str | None:
        if dt is None:
            return None
        return self._fixed(dt).tzname()

    def fromutc(self, dt: datetime) -> datetime:
        local = dt.replace(tzinfo=UTC).astimezone()
        wall = local.replace(tzinfo=None)
        # Second pass through a repeated hour.
        fold = int(wall.astimezone().utcoffset() != local.utcoffset())
        return wall.replace(tzinfo=self, fold=fold)

    def __repr__(self) -> str:
        return "LocalTimezone()"

    @staticmethod
    def _fixed(dt: datetime) -> datetime:
        return dt.replace(tzinfo=None).astimezone()


LOCAL = LocalTimezone()


class Clock(Protocol):
    """Anything that can report the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in *tz*, or in the system local timezone when None."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz if self.tz is not None else LOCAL)


class FixedClock:
    """Clock frozen at a single instant (``--now`` overrides, tests)."""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def resolve_timezone(name: str) -> tzinfo | None:
    """Look up an IANA timezone name; empty means system local.

    Raises:
        ValueError: If *name* is not a known timezone.
    """
    if not name:
        return None
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone: {name!r}"
        raise ValueError(msg) from exc


def build_clock(timezone: str = "", now: str | None = None) -> Clock:
    """Construct the clock for a run.

    Args:
        timezone: IANA timezone name, or empty for system local.
        now: Optional ISO-8601 override. A value without an offset is
            taken in *timezone*, or in system local time. A value with an
            offset keeps that fixed offset unless *timezone* is set.

    Raises:
        ValueError: On an unknown timezone or unparseable *now*.
    """
    tz = resolve_timezone(timezone)
    if now is None:
        return SystemClock(tz)

    try:
        instant = datetime.fromisoformat(now)
    except ValueError as exc:
        msg = f"Invalid --now value: {now!r}"
        raise ValueError(msg) from exc
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=tz if tz is not None else LOCAL)
    elif tz is not None:
        instant = instant.astimezone(tz)
    return FixedClock(instant)
