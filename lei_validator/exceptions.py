"""
Custom exception hierarchy for LEI argument errors.

Only misuse of the API raises. Format and checksum problems are never
raised; they are accumulated in ValidationResult.errors instead.
"""

from __future__ import annotations


class LEIError(Exception):
    """Base exception for all LEI argument failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class LEITypeError(LEIError, TypeError):
    """The value handed to the validator is not a string."""

    def __init__(self, message: str = "LEI must be a string", details: dict | None = None):
        super().__init__("LEI_TYPE_INVALID", message, details)


class PartialLEIError(LEIError, ValueError):
    """The partial LEI given to the check-digit generator is unusable."""

    def __init__(
        self,
        message: str = "Partial LEI must be a string of 18 characters",
        details: dict | None = None,
    ):
        super().__init__("PARTIAL_LEI_INVALID", message, details)
