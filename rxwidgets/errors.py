"""Exceptions raised by the rxwidgets package."""

from __future__ import annotations


class RxWidgetsError(Exception):
    """Base class for every error raised by rxwidgets."""


class StreamClosedError(RxWidgetsError, RuntimeError):
    """Raised when an event is added to a controller that was already closed."""


class ConfigError(RxWidgetsError, ValueError):
    """Raised when a spinner configuration fails validation."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []
