"""Domain value objects."""

from src.domain.value_objects.core import ErrorResponse, ValidationResult

__all__ = [
    "ValidationResult",
    "ErrorResponse",
]
