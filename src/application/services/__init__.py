"""Application services."""

from src.application.services.error_handler import SecureErrorHandler
from src.application.services.hash_service import HashService, PipelineStage
from src.application.services.input_validator import SecurityInputValidator

__all__ = [
    "HashService",
    "PipelineStage",
    "SecurityInputValidator",
    "SecureErrorHandler",
]
