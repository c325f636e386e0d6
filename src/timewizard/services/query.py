"""QueryService — one-off lookups over the datetime grammar.

Each method wraps a single domain function so the CLI can show how a
value would be classified and resolved without touching any document.
"""

from __future__ import annotations

from timewizard.domain.datetimes import resolve, to_iso_instant
from timewizard.domain.errors import InvalidArgumentError
from timewizard.domain.relative import describe, describe_relative
from timewizard.domain.text import count
from timewizard.domain.weeks import get_week
from timewizard.services.base import BaseService
from timewizard.services.result import ServiceResult, failure
from timewizard.services.telemetry import traced


class QueryService(BaseService):
    """Read-only inspection of datetime values, weeks and day counts."""

    @traced
    def parse_value(self, raw: str) -> ServiceResult:
        """Classify and resolve a raw ``datetime`` attribute value."""
        op = "parse"
        now = self._now()
        try:
            resolution = resolve(raw, now)
        except InvalidArgumentError as exc:
            return failure(op, "INVALID_ARGUMENT", str(exc), raw=raw)

        if not resolution.valid:
            return failure(
                op,
                "UNPARSEABLE",
                f"Not a recognized datetime value: {raw!r}",
                raw=raw,
                shape=resolution.shape.value,
            )

        instant = resolution.instant
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "raw": raw,
                "shape": resolution.shape.value,
                "point_in_time": resolution.is_point_in_time,
                "instant": to_iso_instant(instant) if instant else None,
                "local": instant.isoformat() if instant else None,
                "relative": describe_relative(instant, now) if instant else None,
                "now": to_iso_instant(now),
            },
        )

    @traced
    def week(self, year: int, week_number: int) -> ServiceResult:
        """Resolve the Monday of *week_number* in *year*."""
        op = "week"
        try:
            monday = get_week(year, week_number, tz=self._now().tzinfo)
        except InvalidArgumentError as exc:
            return failure(op, "INVALID_ARGUMENT", str(exc), year=year, week=week_number)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "year": year,
                "week": week_number,
                "monday": monday.date().isoformat(),
                "instant": to_iso_instant(monday),
            },
        )

    @traced
    def relative(self, day_count: int) -> ServiceResult:
        """Describe a signed day count."""
        return ServiceResult(
            ok=True,
            op="relative",
            data={"days": day_count, "phrase": describe(day_count)},
        )

    @traced
    def count(self, text: str, char: str) -> ServiceResult:
        """Count occurrences of a single character."""
        warnings: list[str] = []
        if len(char) != 1:
            warnings.append(f"Only single characters are counted; {char!r} never matches")
        return ServiceResult(
            ok=True,
            op="count",
            data={"text": text, "char": char, "count": count(text, char)},
            warnings=warnings,
        )
