# ============================================================================
# NoteCI - Error Classes
#
# Purpose: Custom exception hierarchy for the package
# Inputs: Error messages and context
# Outputs: Structured exceptions
# Dependencies: None
# Usage: raise DeserializationError("Note is not a JSON object")
#
# Changelog:
#   2026-10-02: Initial error classes
#   2026-10-09: Added SourceError for note sources
# ============================================================================

from typing import Optional


class NoteCIError(Exception):
    """Base exception for all NoteCI errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error information
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(NoteCIError):
    """Raised when configuration is invalid or missing."""

    pass


class DeserializationError(NoteCIError):
    """Raised when a note is not a well-formed CI report document."""

    pass


class ParseError(NoteCIError):
    """Raised when a report timestamp is not a valid integer string."""

    def __init__(self, message: str, value: str, details: Optional[str] = None):
        super().__init__(message, details=details)
        self.value = value


class ValidationError(NoteCIError):
    """Raised when report values fall outside the recognized vocabulary."""

    pass


class SourceError(NoteCIError):
    """Raised when a note source cannot be read."""

    pass
