"""Domain enumerations for the hash service."""

from enum import Enum


class PerformanceRating(str, Enum):
    """Relative throughput of a digest algorithm"""

    FAST = "FAST"
    MEDIUM = "MEDIUM"
    SLOW = "SLOW"

    @property
    def description(self) -> str:
        return _PERFORMANCE_DESCRIPTIONS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [rating.value for rating in cls]


_PERFORMANCE_DESCRIPTIONS = {
    PerformanceRating.FAST: "Fast - Excellent performance for high-throughput scenarios",
    PerformanceRating.MEDIUM: "Medium - Good balance of performance and security",
    PerformanceRating.SLOW: "Slow - Maximum security, suitable for high-security scenarios",
}


class ErrorCode(str, Enum):
    """
    Closed set of failure categories for hash operations.

    Every code carries a default message that is safe to return to callers
    and the HTTP status bucket it is reported under.
    """

    ALGORITHM_NOT_SUPPORTED = "ALGORITHM_NOT_SUPPORTED"
    ALGORITHM_INSECURE = "ALGORITHM_INSECURE"
    COMPUTATION_FAILED = "COMPUTATION_FAILED"
    INPUT_VALIDATION_FAILED = "INPUT_VALIDATION_FAILED"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    @property
    def default_message(self) -> str:
        return _ERROR_MESSAGES[self]

    @property
    def http_status(self) -> int:
        return _ERROR_STATUSES[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [code.value for code in cls]


_ERROR_MESSAGES = {
    ErrorCode.ALGORITHM_NOT_SUPPORTED: "The specified algorithm is not supported",
    ErrorCode.ALGORITHM_INSECURE: "The specified algorithm is not secure and cannot be used",
    ErrorCode.COMPUTATION_FAILED: "Hash computation failed",
    ErrorCode.INPUT_VALIDATION_FAILED: "Input validation failed",
    ErrorCode.CONFIGURATION_ERROR: "System configuration error",
}

_ERROR_STATUSES = {
    ErrorCode.ALGORITHM_NOT_SUPPORTED: 400,
    ErrorCode.INPUT_VALIDATION_FAILED: 400,
    ErrorCode.ALGORITHM_INSECURE: 403,
    ErrorCode.COMPUTATION_FAILED: 500,
    ErrorCode.CONFIGURATION_ERROR: 500,
}
