"""Staging layer exceptions."""

from __future__ import annotations


class StagingError(Exception):
    """Base class for beacon staging errors."""


class ConfigurationError(StagingError):
    """Raised when staging configuration is invalid."""
    def __init__(self, message: str, field_name: str | None = None):
        super().__init__(message)
        self.field_name = field_name
