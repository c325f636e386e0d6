"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timewizard.toml only contains
overrides. No file at all is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- timewizard.toml sections ---


class AnnotateConfig(BaseModel):
    """[annotate] section."""

    model_config = {"frozen": True}

    tag: str = "time"
    datetime_attribute: str = "datetime"
    title_attribute: str = "title"
    set_title: bool = True
    isolate_failures: bool = True


class ClockConfig(BaseModel):
    """[clock] section.

    An empty timezone means the system local timezone.
    """

    model_config = {"frozen": True}

    timezone: str = ""
