"""Domain exceptions."""

from __future__ import annotations


class InvalidArgumentError(TypeError):
    """An argument has the wrong type or lies outside the supported range."""
