"""
Dependency providers for the hash API.

The registry, validator, pipeline and error handler are built once from
settings and shared by every request; none of them hold request state.
Tests replace them through ``app.dependency_overrides``.
"""

from functools import lru_cache

from src.application.interfaces import IErrorHandler, IHashService
from src.application.services.error_handler import SecureErrorHandler
from src.application.services.hash_service import HashService
from src.application.services.input_validator import SecurityInputValidator
from src.infrastructure.config.settings import get_settings
from src.infrastructure.crypto.algorithm_registry import AlgorithmRegistry


@lru_cache
def get_algorithm_registry() -> AlgorithmRegistry:
    """Algorithm registry dependency (singleton)"""
    settings = get_settings()
    return AlgorithmRegistry(enabled=settings.secure_algorithm_list)


@lru_cache
def get_input_validator() -> SecurityInputValidator:
    """Input validator dependency (singleton)"""
    settings = get_settings()
    return SecurityInputValidator(
        get_algorithm_registry(),
        max_input_length=settings.hash_max_input_length,
        min_input_length=settings.hash_min_input_length,
    )


@lru_cache
def get_hash_service() -> IHashService:
    """Hash pipeline dependency (singleton)"""
    settings = get_settings()
    return HashService(
        get_algorithm_registry(),
        get_input_validator(),
        default_algorithm=settings.hash_default_algorithm,
    )


@lru_cache
def get_error_handler() -> IErrorHandler:
    """Secure error handler dependency (singleton)"""
    return SecureErrorHandler()
