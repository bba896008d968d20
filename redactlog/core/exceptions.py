"""
Exceptions raised by redactlog.

Redaction itself never fails; the only error surfaced to callers comes from
message formatting and is raised unchanged through the logger.
"""

from typing import Any


class RedactLogError(Exception):
    """
    Base exception for redactlog errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details (optional)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured logs."""
        result = {"error": type(self).__name__, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class LogFormatError(RedactLogError, ValueError):
    """A format placeholder could not convert its argument."""

    def __init__(self, placeholder: str, value: Any):
        super().__init__(
            f"Cannot format {type(value).__name__} value with %{placeholder}",
            details={"placeholder": f"%{placeholder}", "value_type": type(value).__name__},
        )
        self.placeholder = placeholder
        self.value = value
