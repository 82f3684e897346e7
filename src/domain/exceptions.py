"""
Domain exceptions for the hash service.

These exceptions carry an internal diagnostic message for operators and a
machine-readable error code. The text that reaches callers is never taken
from the exception message; it comes from the error code's default message.
"""

from typing import Any

from src.domain.enums import ErrorCode


class HashServiceException(Exception):
    """
    Base exception for all hash service errors.

    Attributes:
        message: Internal error description (logged, never returned to callers)
        error_code: Machine-readable error code
        details: Additional error context for logs
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for internal logging."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class HashingException(HashServiceException):
    """Raised when a hash request fails at any pipeline stage."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        super().__init__(message or code.default_message, code.value, details)

    @property
    def user_message(self) -> str:
        """Message that is safe to show outside the service."""
        return self.code.default_message

    @property
    def http_status(self) -> int:
        return self.code.http_status


class ConfigurationException(HashingException):
    """Raised at startup when the service cannot be configured safely."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(ErrorCode.CONFIGURATION_ERROR, message, details)
