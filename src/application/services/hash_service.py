"""
Hash service for computing cryptographic digests of caller text.

Orchestrates one request through algorithm validation, input validation,
digest computation and result assembly. Each stage short-circuits to
FAILED on error; nothing is retried because every failure here reflects
caller input or configuration, not a transient fault.
"""

import logging
import secrets
import time
from datetime import UTC, datetime
from enum import Enum

from src.application.interfaces.services import (ICryptographicProvider,
                                                  IInputValidator)
from src.domain.entities import AlgorithmInfo, HashResult
from src.domain.enums import ErrorCode
from src.domain.exceptions import ConfigurationException, HashingException

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    """Per-request pipeline states"""

    START = "start"
    VALIDATING_ALGORITHM = "validating_algorithm"
    VALIDATING_INPUT = "validating_input"
    COMPUTING = "computing"
    DONE = "done"
    FAILED = "failed"


class HashService:
    """
    Hash pipeline. Stateless per request and safe to share across threads.

    Collaborators are injected so tests can run the pipeline against a
    registry with a different algorithm set.
    """

    def __init__(
        self,
        provider: ICryptographicProvider,
        validator: IInputValidator,
        default_algorithm: str = "SHA-256",
    ):
        if provider is None:
            raise ValueError("Cryptographic provider cannot be None")
        if validator is None:
            raise ValueError("Input validator cannot be None")

        if not provider.is_secure(default_algorithm):
            raise ConfigurationException(
                f"Default algorithm '{default_algorithm}' is not a secure, available algorithm",
                {"algorithm": default_algorithm},
            )

        self.provider = provider
        self.validator = validator
        self._default_algorithm = provider.resolve(default_algorithm)

    @property
    def default_algorithm(self) -> str:
        return self._default_algorithm

    def compute_hash(self, raw_text: str, algorithm: str | None = None) -> HashResult:
        """
        Compute the digest of raw_text.

        The result carries the sanitized text, never the raw input, and the
        canonical algorithm name.

        Raises:
            HashingException: ALGORITHM_INSECURE, ALGORITHM_NOT_SUPPORTED,
                INPUT_VALIDATION_FAILED or COMPUTATION_FAILED
        """
        operation_id = secrets.token_hex(4)
        requested = self._default_algorithm if algorithm is None else algorithm
        stage = PipelineStage.START
        logger.info(
            f"Starting hash computation [{operation_id}] - input length: "
            f"{len(raw_text) if raw_text is not None else 'none'}"
        )

        try:
            stage = PipelineStage.VALIDATING_ALGORITHM
            algorithm_result = self.validator.validate_algorithm(requested)
            if not algorithm_result.valid:
                code = (
                    ErrorCode.ALGORITHM_INSECURE
                    if requested is not None and self.provider.is_deprecated(requested)
                    else ErrorCode.ALGORITHM_NOT_SUPPORTED
                )
                raise HashingException(
                    code,
                    "Algorithm validation failed: " + "; ".join(algorithm_result.errors),
                    {"stage": stage.value},
                )
            canonical = algorithm_result.sanitized_data

            stage = PipelineStage.VALIDATING_INPUT
            input_result = self.validator.validate_and_sanitize(raw_text)
            if not input_result.valid:
                raise HashingException(
                    ErrorCode.INPUT_VALIDATION_FAILED,
                    "Input validation failed: " + "; ".join(input_result.errors),
                    {"stage": stage.value, "errors": list(input_result.errors)},
                )
            if input_result.has_warnings:
                logger.info(
                    f"Input validation warnings [{operation_id}]: "
                    + "; ".join(input_result.warnings)
                )
            sanitized = input_result.sanitized_data

            stage = PipelineStage.COMPUTING
            started = time.perf_counter()
            digest = self.provider.compute_digest(canonical, sanitized)
            hex_hash = self.provider.to_hex(digest)
            elapsed_ms = max(0, int((time.perf_counter() - started) * 1000))

            result = HashResult(
                original_data=sanitized,
                algorithm=canonical,
                hex_hash=hex_hash,
                timestamp=datetime.now(UTC),
                computation_time_ms=elapsed_ms,
            )
        except HashingException as e:
            logger.warning(
                f"Hash computation failed [{operation_id}] at {stage.value} -> "
                f"{PipelineStage.FAILED.value}: {e.error_code}"
            )
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error during hash computation [{operation_id}] at {stage.value}",
                exc_info=True,
            )
            raise HashingException(
                ErrorCode.COMPUTATION_FAILED,
                f"Hash computation failed due to unexpected error: {type(e).__name__}",
                {"stage": stage.value},
            ) from e

        logger.info(
            f"Hash computation completed [{operation_id}] -> {PipelineStage.DONE.value} - "
            f"algorithm: {result.algorithm}, computation time: {result.computation_time_ms}ms"
        )
        return result

    def list_supported_algorithms(self) -> list[AlgorithmInfo]:
        """Metadata for every secure, available algorithm, sorted by name"""
        return sorted(self.provider.list_algorithm_info(), key=lambda info: info.name)

    def is_algorithm_secure(self, name: str | None) -> bool:
        if name is None:
            return False
        return self.provider.is_secure(name)
