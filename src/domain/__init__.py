"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
and domain exceptions. It has no dependencies on other layers.
"""

from src.domain.entities import AlgorithmInfo, HashResult
from src.domain.enums import ErrorCode, PerformanceRating
from src.domain.exceptions import (ConfigurationException, HashingException,
                                   HashServiceException)
from src.domain.value_objects import ErrorResponse, ValidationResult

__all__ = [
    # Entities
    "AlgorithmInfo",
    "HashResult",
    # Value Objects
    "ValidationResult",
    "ErrorResponse",
    # Enums
    "ErrorCode",
    "PerformanceRating",
    # Exceptions
    "HashServiceException",
    "HashingException",
    "ConfigurationException",
]
