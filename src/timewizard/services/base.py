"""BaseService — shared foundation for timewizard services.

Every service receives the run's settings and a :class:`Clock`. Nothing
else is shared between calls, so services are cheap to construct per
command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from timewizard.config.settings import TimeWizardSettings
    from timewizard.infrastructure.clock import Clock


class BaseService:
    """Base for service-layer classes.

    Usage::

        class QueryService(BaseService):
            def parse_value(self, raw: str) -> ServiceResult:
                now = self._now()
                ...
    """

    def __init__(self, settings: TimeWizardSettings, clock: Clock) -> None:
        self._settings = settings
        self._clock = clock

    def _now(self) -> datetime:
        return self._clock.now()
