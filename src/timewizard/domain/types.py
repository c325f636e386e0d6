"""Classification enums for datetime attribute values."""

from __future__ import annotations

from enum import StrEnum


class DatetimeShape(StrEnum):
    """Shapes a ``datetime`` attribute value can take."""

    DURATION = "duration"
    TIME = "time"
    WEEK = "week"
    YEAR_MONTH = "year-month"
    MONTH_DAY = "month-day"
    GENERIC = "generic"


class Outcome(StrEnum):
    """What the annotator did with a single element."""

    ANNOTATED = "annotated"
    DURATION = "duration"
    INVALID = "invalid"
    MISSING = "missing"
    FAILED = "failed"
