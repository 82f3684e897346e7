"""
Application-level exception handlers.

Every failure that escapes a route ends up here and is converted by
SecureErrorHandler, so no exception text or stack trace reaches a caller.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.domain.exceptions import HashServiceException
from src.domain.value_objects import ErrorResponse, ValidationResult
from src.presentation.api.dependencies import get_error_handler
from src.presentation.api.v1.renderers import error_response

logger = logging.getLogger(__name__)

_HTTP_MESSAGES = {
    404: "The requested resource was not found",
    405: "The requested method is not allowed",
    429: "Too many requests",
}


def _accept(request: Request) -> str | None:
    return request.headers.get("accept")


async def hash_service_exception_handler(request: Request, exc: HashServiceException) -> Response:
    handler = get_error_handler()
    return error_response(handler.handle(exc), _accept(request))


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    handler = get_error_handler()
    errors = [f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('type')}" for err in exc.errors()]
    result = ValidationResult.failure(errors or ["Request parameters are invalid"])
    return error_response(handler.handle_validation_failure(result), _accept(request))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    handler = get_error_handler()
    correlation_id = handler.generate_correlation_id()
    logger.info(
        f"HTTP {exc.status_code} on {request.url.path} [correlationId={correlation_id}]"
    )
    error = ErrorResponse(
        status=exc.status_code,
        message=_HTTP_MESSAGES.get(exc.status_code, "The request could not be completed"),
        correlation_id=correlation_id,
    )
    return error_response(error, _accept(request))


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> Response:
    handler = get_error_handler()
    correlation_id = handler.generate_correlation_id()
    logger.warning(f"Rate limit exceeded on {request.url.path} [correlationId={correlation_id}]")
    error = ErrorResponse(
        status=429, message=_HTTP_MESSAGES[429], correlation_id=correlation_id
    )
    return error_response(error, _accept(request))


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    handler = get_error_handler()
    return error_response(handler.handle(exc), _accept(request))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the secure handlers to an application"""
    app.add_exception_handler(HashServiceException, hash_service_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
