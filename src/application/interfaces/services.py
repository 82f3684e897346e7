"""
Service interfaces (ports) for the application layer.

These protocols define the contracts for application services.
Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.domain.entities import AlgorithmInfo, HashResult
    from src.domain.value_objects import ErrorResponse, ValidationResult


class ICryptographicProvider(Protocol):
    """Protocol for the digest algorithm registry (DIP)"""

    def resolve(self, name: str) -> str | None:
        """Canonical name for an algorithm name or alias"""
        ...

    def is_deprecated(self, name: str) -> bool:
        ...

    def is_secure(self, name: str) -> bool:
        ...

    def is_available(self, name: str) -> bool:
        ...

    def compute_digest(self, name: str, text: str) -> bytes:
        """Digest the UTF-8 encoding of text"""
        ...

    def to_hex(self, data: bytes) -> str:
        ...

    def list_secure_algorithms(self) -> frozenset[str]:
        ...

    def list_algorithm_info(self) -> list[AlgorithmInfo]:
        ...


class IInputValidator(Protocol):
    """Protocol for input validation and sanitization (DIP)"""

    max_input_length: int
    min_input_length: int

    def validate_algorithm(self, name: str | None) -> ValidationResult:
        ...

    def validate_and_sanitize(self, text: str | None) -> ValidationResult:
        ...


class IHashService(Protocol):
    """Protocol for the hash computation pipeline (DIP)"""

    @property
    def default_algorithm(self) -> str:
        ...

    def compute_hash(self, raw_text: str, algorithm: str | None = None) -> HashResult:
        """Validate, sanitize and digest raw_text"""
        ...

    def list_supported_algorithms(self) -> list[AlgorithmInfo]:
        ...

    def is_algorithm_secure(self, name: str | None) -> bool:
        ...


class IErrorHandler(Protocol):
    """Protocol for converting failures into externally safe responses (DIP)"""

    def handle(self, failure: BaseException) -> ErrorResponse:
        ...

    def handle_validation_failure(self, result: ValidationResult) -> ErrorResponse:
        """Report a failed validation without echoing the rejected input"""
        ...

    def generate_correlation_id(self) -> str:
        ...
