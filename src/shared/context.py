"""
Request context management using contextvars.

Provides thread-safe, async-safe storage for request-scoped data such as
the correlation ID and client address of the request being served.
SecureErrorHandler reads both through get_request_context() when it logs.

Usage:
    # In middleware:
    token = set_correlation_id("3f2a9c...")

    # In any code that runs for that request:
    correlation_id = get_correlation_id()  # Returns "3f2a9c..." or ""

    # Context is automatically reset per request due to contextvars
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

# Context variables for request-scoped data
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_client_address: ContextVar[str | None] = ContextVar("client_address", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request context."""

    correlation_id: str
    client_address: str | None = None


def set_correlation_id(correlation_id: str) -> Token[str]:
    """Set the correlation ID for this request and return the reset token."""
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def get_correlation_id() -> str:
    """Get the correlation ID for the current request, or "" outside a request."""
    return _correlation_id.get()


def set_client_address(address: str | None) -> Token[str | None]:
    return _client_address.set(address)


def reset_client_address(token: Token[str | None]) -> None:
    _client_address.reset(token)


def get_request_context() -> RequestContext:
    """Get a snapshot of the current request context."""
    return RequestContext(
        correlation_id=_correlation_id.get(),
        client_address=_client_address.get(),
    )
