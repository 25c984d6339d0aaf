"""\
Error and warnings
==================

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module provides the error classes that are raised throughout the
drills package.
"""

from __future__ import annotations


__all__: tuple[str, ...] = (
    "BaseError",
    "ConfigValidationError",
    "ExerciseError",
    "ValidationError",
)

Error = Exception


class BaseError(Error):
    """Base error class for all exceptions."""

    def __init__(self, message: str, *args: object) -> None:
        """Initialise the error with a message and optional args."""
        super().__init__(message, *args)
        self.message = message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return f"<{type(self).__name__}(message={self.message!r})>"


class ExerciseError(BaseError):
    """Errors related to building, registering or running exercises."""


class ValidationError(BaseError):
    """Errors related to validation check failure."""


class ConfigValidationError(ValidationError):
    """Errors related to configuration validation failure."""
