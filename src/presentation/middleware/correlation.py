"""Correlation ID middleware for request tracing"""
import re
import secrets

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from src.shared.context import (reset_client_address, reset_correlation_id,
                                set_client_address, set_correlation_id)

CORRELATION_HEADER = "X-Correlation-ID"

# Inbound IDs are echoed into logs and headers, so only a safe shape is accepted
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9-]{1,64}$")


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Add correlation IDs to all requests for tracing.

    Features:
    - Generates a correlation ID for each request
    - Accepts a well-formed X-Correlation-ID header from clients
    - Adds the correlation ID to response headers, unless an error
      response already carries its own failure ID
    - Makes the correlation ID available to the logging system

    Usage in logs:
        from src.shared.context import get_correlation_id
        logger.info(f"[{get_correlation_id()}] Processing request")
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER)

        if not correlation_id or not _VALID_CORRELATION_ID.match(correlation_id):
            correlation_id = secrets.token_hex(12)

        token = set_correlation_id(correlation_id)
        client_token = set_client_address(request.client.host if request.client else None)
        try:
            response = await call_next(request)
        finally:
            reset_client_address(client_token)
            reset_correlation_id(token)

        response.headers.setdefault(CORRELATION_HEADER, correlation_id)

        return response
