from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class ValidationResult:
    """
    Value object for the outcome of validating one input (SRP)

    Invariants:
    - a valid result has no errors
    - sanitized_data is set only on a valid result
    - an invalid result carries at least one error

    Build instances through the named factories rather than the constructor.
    """

    valid: bool
    sanitized_data: str | None = None
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "warnings", tuple(self.warnings))

        if self.valid and self.errors:
            raise ValueError("A valid result cannot carry errors")
        if not self.valid and self.sanitized_data is not None:
            raise ValueError("An invalid result cannot carry sanitized data")
        if not self.valid and not self.errors:
            raise ValueError("An invalid result must carry at least one error")

    @classmethod
    def success(cls, sanitized_data: str) -> "ValidationResult":
        return cls(valid=True, sanitized_data=sanitized_data)

    @classmethod
    def success_with_warnings(
        cls, sanitized_data: str, warnings: list[str] | tuple[str, ...]
    ) -> "ValidationResult":
        return cls(valid=True, sanitized_data=sanitized_data, warnings=tuple(warnings))

    @classmethod
    def failure(cls, errors: str | list[str] | tuple[str, ...]) -> "ValidationResult":
        if isinstance(errors, str):
            errors = (errors,)
        return cls(valid=False, errors=tuple(errors))

    @classmethod
    def failure_with_warnings(
        cls,
        errors: list[str] | tuple[str, ...],
        warnings: list[str] | tuple[str, ...],
    ) -> "ValidationResult":
        return cls(valid=False, errors=tuple(errors), warnings=tuple(warnings))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class ErrorResponse:
    """Value object for a failure that is safe to disclose externally"""

    status: int
    message: str
    correlation_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self):
        if not isinstance(self.status, int) or not 100 <= self.status <= 599:
            raise ValueError(f"Status code must be between 100-599: {self.status}")
        if not isinstance(self.message, str) or not self.message.strip():
            raise ValueError("Message must be a non-empty string")
        if not isinstance(self.correlation_id, str) or not self.correlation_id.strip():
            raise ValueError("Correlation ID must be a non-empty string")
        if self.timestamp is None:
            raise ValueError("Timestamp cannot be None")

        object.__setattr__(self, "message", self.message.strip())
        object.__setattr__(self, "correlation_id", self.correlation_id.strip())
