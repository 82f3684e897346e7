"""
Secure error handling.

Turns any failure into an ErrorResponse that is safe to return to a
caller. The caller gets a status, a fixed generic message and a fresh
correlation ID; the real failure detail goes to the internal log under the
same correlation ID so operators can match the two.
"""

import logging
import secrets
from datetime import UTC, datetime

from src.domain.enums import ErrorCode
from src.domain.exceptions import HashingException
from src.domain.value_objects import ErrorResponse, ValidationResult
from src.shared.context import get_request_context

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"
GENERIC_SERVICE_ERROR = "Service temporarily unavailable"

# Faults that mean a downstream resource is unreachable rather than a bad request
SERVICE_UNAVAILABLE_ERRORS: tuple[type[BaseException], ...] = (ConnectionError, TimeoutError)

CORRELATION_ID_BYTES = 12


def _request_tags() -> str:
    """Request ID and client address of the request being served, "-" outside one"""
    context = get_request_context()
    return f"[requestId={context.correlation_id or '-'}] [client={context.client_address or '-'}]"


class SecureErrorHandler:
    """The single place that decides what failure text crosses the trust boundary"""

    @staticmethod
    def generate_correlation_id() -> str:
        """24 hex characters from the OS CSPRNG"""
        return secrets.token_hex(CORRELATION_ID_BYTES)

    def handle(self, failure: BaseException) -> ErrorResponse:
        """Classify a failure, log its detail internally and return a safe response"""
        correlation_id = self.generate_correlation_id()

        if isinstance(failure, HashingException):
            status = failure.http_status
            message = failure.user_message
            self._log(
                f"Hash request failed: {failure.error_code}",
                correlation_id,
                failure,
                with_traceback=status >= 500,
                details=failure.to_dict(),
            )
        elif isinstance(failure, SERVICE_UNAVAILABLE_ERRORS):
            status = 503
            message = GENERIC_SERVICE_ERROR
            self._log("Service temporarily unavailable", correlation_id, failure, with_traceback=True)
        else:
            status = 500
            message = GENERIC_ERROR_MESSAGE
            self._log(
                f"Unexpected service error: {type(failure).__name__}",
                correlation_id,
                failure,
                with_traceback=True,
            )

        return ErrorResponse(
            status=status,
            message=message,
            correlation_id=correlation_id,
            timestamp=datetime.now(UTC),
        )

    def handle_validation_failure(self, result: ValidationResult) -> ErrorResponse:
        """Report a failed ValidationResult without echoing the rejected input"""
        correlation_id = self.generate_correlation_id()
        logger.warning(
            f"Validation failed [correlationId={correlation_id}] {_request_tags()}: "
            + "; ".join(result.errors)
        )
        return ErrorResponse(
            status=ErrorCode.INPUT_VALIDATION_FAILED.http_status,
            message=ErrorCode.INPUT_VALIDATION_FAILED.default_message,
            correlation_id=correlation_id,
            timestamp=datetime.now(UTC),
        )

    @staticmethod
    def _log(
        message: str,
        correlation_id: str,
        failure: BaseException,
        *,
        with_traceback: bool,
        details: dict | None = None,
    ) -> None:
        detail = details if details is not None else str(failure)
        line = f"{message} [correlationId={correlation_id}] {_request_tags()}: {detail}"
        if with_traceback:
            logger.error(
                line, exc_info=(type(failure), failure, failure.__traceback__)
            )
        else:
            logger.warning(line)
