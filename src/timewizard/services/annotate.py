"""Annotation of ``<time>`` elements — the orchestration layer.

Pipeline per element: READ → RESOLVE → RENDER → WRITE BACK

A resolved instant is rendered as a UTC ISO-8601 string. The element's
title is set to it when the title is absent or empty, and
``" (<instant>)"`` is appended to the element text. Durations, invalid
values and elements without a datetime attribute are left untouched.

INVARIANT: Only this module mutates elements. Domain resolution is pure.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from timewizard.config.models import AnnotateConfig
from timewizard.domain.datetimes import classify, resolve, to_iso_instant
from timewizard.domain.errors import InvalidArgumentError
from timewizard.domain.relative import describe_relative
from timewizard.domain.types import DatetimeShape, Outcome
from timewizard.infrastructure.document import ElementLike, HtmlDocument
from timewizard.infrastructure.filesystem import read_html, write_html
from timewizard.services.base import BaseService
from timewizard.services.result import ServiceResult, failure
from timewizard.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ElementReport(BaseModel):
    """What happened to one element."""

    model_config = {"frozen": True}

    index: int
    outcome: Outcome
    raw: str | None = None
    shape: DatetimeShape | None = None
    instant: str | None = None
    relative: str | None = None
    error: str | None = None


class AnnotationReport(BaseModel):
    """Per-element reports for one pass over a document."""

    model_config = {"frozen": True}

    elements: list[ElementReport] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        tally = Counter(report.outcome for report in self.elements)
        return {outcome.value: tally.get(outcome, 0) for outcome in Outcome}

    @property
    def annotated(self) -> int:
        return sum(1 for report in self.elements if report.outcome is Outcome.ANNOTATED)


def annotate_element(
    element: ElementLike,
    now: datetime,
    config: AnnotateConfig,
    *,
    index: int = 0,
) -> ElementReport:
    """Resolve one element's datetime attribute and write the result back.

    Raises:
        InvalidArgumentError: If a week-form value is malformed.
    """
    raw = element.get_attribute(config.datetime_attribute)
    if raw is None:
        logger.debug("Element %d has no %s attribute", index, config.datetime_attribute)
        return ElementReport(index=index, outcome=Outcome.MISSING)

    resolution = resolve(raw, now)
    if resolution.instant is None:
        outcome = Outcome.DURATION if resolution.valid else Outcome.INVALID
        logger.debug("Element %d left untouched (%s): %r", index, outcome, raw)
        return ElementReport(index=index, outcome=outcome, raw=raw, shape=resolution.shape)

    rendered = to_iso_instant(resolution.instant)
    if config.set_title and not element.get_attribute(config.title_attribute):
        element.set_attribute(config.title_attribute, rendered)
    element.append_text(f" ({rendered})")

    return ElementReport(
        index=index,
        outcome=Outcome.ANNOTATED,
        raw=raw,
        shape=resolution.shape,
        instant=rendered,
        relative=describe_relative(resolution.instant, now),
    )


def annotate_elements(
    elements: Iterable[ElementLike],
    now: datetime,
    *,
    config: AnnotateConfig | None = None,
) -> AnnotationReport:
    """Annotate every element in *elements* against the same *now*.

    With ``config.isolate_failures`` a malformed week value is recorded as
    a failed element and processing continues; otherwise the
    :class:`InvalidArgumentError` propagates.
    """
    config = config or AnnotateConfig()
    reports: list[ElementReport] = []

    for index, element in enumerate(elements):
        try:
            report = annotate_element(element, now, config, index=index)
        except InvalidArgumentError as exc:
            if not config.isolate_failures:
                raise
            raw = element.get_attribute(config.datetime_attribute) or ""
            logger.warning("Element %d could not be resolved: %r (%s)", index, raw, exc)
            report = ElementReport(
                index=index,
                outcome=Outcome.FAILED,
                raw=raw,
                shape=classify(raw),
                error=str(exc),
            )
        reports.append(report)

    return AnnotationReport(elements=reports)


class AnnotateService(BaseService):
    """Annotates HTML documents and files."""

    def _annotate(self, source: str) -> tuple[HtmlDocument, AnnotationReport]:
        config = self._settings.annotate
        with trace_span("parse_html") as span:
            document = HtmlDocument.parse(source)
            elements = document.query_all(config.tag)
            if span:
                span.annotate("elements", len(elements))
        with trace_span("annotate_elements"):
            report = annotate_elements(elements, self._now(), config=config)
        return document, report

    @staticmethod
    def _summary(report: AnnotationReport) -> dict[str, Any]:
        return {
            "elements": [r.model_dump(mode="json") for r in report.elements],
            "counts": report.counts(),
        }

    @staticmethod
    def _warnings(report: AnnotationReport) -> list[str]:
        return [
            f"Element {r.index} ({r.raw!r}) skipped: {r.error}"
            for r in report.elements
            if r.outcome is Outcome.FAILED
        ]

    @traced
    def annotate_html(self, source: str) -> ServiceResult:
        """Annotate HTML text, returning the rewritten markup in ``data["html"]``."""
        op = "annotate"
        try:
            document, report = self._annotate(source)
        except InvalidArgumentError as exc:
            return failure(op, "INVALID_ARGUMENT", str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={"html": document.serialize(), **self._summary(report)},
            warnings=self._warnings(report),
        )

    @traced
    def annotate_file(
        self,
        source: Path,
        *,
        output: Path | None = None,
        in_place: bool = False,
    ) -> ServiceResult:
        """Annotate an HTML file.

        Writes to *output*, or back to *source* with *in_place*. With
        neither, nothing is written (dry run) and the result only reports
        what would change.
        """
        op = "annotate"
        if output is not None and in_place:
            return failure(
                op,
                "CONFLICTING_TARGETS",
                "Use either an output path or in-place mode, not both",
            )
        if not source.is_file():
            return failure(op, "FILE_NOT_FOUND", f"No such file: {source}", path=str(source))

        try:
            with trace_span("read_html"):
                text = read_html(source)
        except (OSError, UnicodeDecodeError) as exc:
            return failure(op, "READ_FAILED", f"Cannot read {source}: {exc}", path=str(source))

        try:
            document, report = self._annotate(text)
        except InvalidArgumentError as exc:
            return failure(op, "INVALID_ARGUMENT", str(exc), path=str(source))

        target = source if in_place else output
        written = False
        # An untouched document is not rewritten in place.
        if target is not None and (document.modified or target != source):
            try:
                with trace_span("write_html"):
                    write_html(target, document.serialize())
            except OSError as exc:
                msg = f"Cannot write {target}: {exc}"
                return failure(op, "WRITE_FAILED", msg, path=str(target))
            written = True
            logger.debug("Wrote annotated HTML to %s", target)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": str(source),
                "target": str(target) if target is not None else None,
                "written": written,
                **self._summary(report),
            },
            warnings=self._warnings(report),
        )
