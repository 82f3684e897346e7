"""
Security input validation for hash requests.

Validates the requested algorithm name and the free text to be hashed, and
produces a sanitized version of the text. Failures are returned as
ValidationResult values, never raised, and error strings describe only
which rule failed. The rejected input itself is never echoed back.
"""

import logging

from src.application.interfaces.services import ICryptographicProvider
from src.domain.value_objects import ValidationResult
from src.shared.utils.sanitization import InputSanitizer

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_LENGTH = 10_000
DEFAULT_MIN_INPUT_LENGTH = 1


class SecurityInputValidator:
    """Validate and sanitize algorithm names and text input"""

    def __init__(
        self,
        provider: ICryptographicProvider,
        max_input_length: int = DEFAULT_MAX_INPUT_LENGTH,
        min_input_length: int = DEFAULT_MIN_INPUT_LENGTH,
    ):
        if provider is None:
            raise ValueError("Cryptographic provider cannot be None")
        if min_input_length < 0 or min_input_length > max_input_length:
            raise ValueError("Input length bounds are inconsistent")

        self.provider = provider
        self.max_input_length = max_input_length
        self.min_input_length = min_input_length

    def validate_algorithm(self, name: str | None) -> ValidationResult:
        """
        Validate a requested algorithm name.

        On success sanitized_data holds the canonical algorithm name.
        """
        if name is None or not name.strip():
            return ValidationResult.failure("Algorithm name cannot be empty")

        trimmed = name.strip()
        if not InputSanitizer.is_identifier(trimmed):
            return ValidationResult.failure(
                "Algorithm name contains invalid characters. "
                "Only letters, numbers and hyphens are allowed"
            )

        if self.provider.is_deprecated(trimmed):
            return ValidationResult.failure(
                "Requested algorithm is deprecated and insecure. Use SHA-256 or newer"
            )

        if not self.provider.is_secure(trimmed):
            supported = ", ".join(sorted(self.provider.list_secure_algorithms()))
            return ValidationResult.failure(
                f"Requested algorithm is not secure or not supported. Supported algorithms: {supported}"
            )

        return ValidationResult.success(self.provider.resolve(trimmed))

    def validate_input_length(self, text: str | None) -> ValidationResult:
        if text is None:
            return ValidationResult.failure("Input cannot be null")

        if len(text) > self.max_input_length:
            return ValidationResult.failure(
                f"Input length ({len(text)}) exceeds maximum allowed length ({self.max_input_length})"
            )

        trimmed_length = len(text.strip())
        if trimmed_length < self.min_input_length:
            return ValidationResult.failure(
                f"Input length ({trimmed_length}) is below minimum required length "
                f"({self.min_input_length})"
            )

        return ValidationResult.success(text)

    def validate_input_content(self, text: str | None) -> ValidationResult:
        if text is None:
            return ValidationResult.failure("Input cannot be null")

        errors: list[str] = []
        warnings: list[str] = []

        if "\0" in text:
            errors.append("Input contains null bytes which are not allowed")
        elif InputSanitizer.find_control_characters(text):
            errors.append("Input contains unsafe characters or control sequences")

        if InputSanitizer.find_injection(text):
            errors.append("Input contains a disallowed markup or query pattern")

        if text and len(text.strip()) < len(text) * 0.5:
            warnings.append("Input contains excessive whitespace which will be normalized")

        if InputSanitizer.needs_unicode_normalization(text):
            warnings.append("Input contains Unicode characters that will be normalized")

        if errors:
            return ValidationResult.failure_with_warnings(errors, warnings)
        if warnings:
            return ValidationResult.success_with_warnings(text, warnings)
        return ValidationResult.success(text)

    def validate_and_sanitize(self, text: str | None) -> ValidationResult:
        """Validate text for hashing and return its sanitized form"""
        if text is None:
            return ValidationResult.failure("Input cannot be null")

        errors: list[str] = []
        warnings: list[str] = []

        length_result = self.validate_input_length(text)
        errors.extend(length_result.errors)

        # Skip the content scan on oversized input
        if len(text) <= self.max_input_length:
            content_result = self.validate_input_content(text)
            errors.extend(content_result.errors)
            warnings.extend(content_result.warnings)

        if errors:
            logger.debug(f"Input rejected: {len(errors)} rule(s) failed, length={len(text)}")
            return ValidationResult.failure_with_warnings(errors, warnings)

        sanitized = InputSanitizer.sanitize_text(text)
        if len(sanitized) < self.min_input_length:
            return ValidationResult.failure_with_warnings(
                ["Input is empty after sanitization"], warnings
            )

        if warnings:
            return ValidationResult.success_with_warnings(sanitized, warnings)
        return ValidationResult.success(sanitized)
