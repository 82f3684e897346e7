"""
Middleware layer for the hash service.

This package contains middleware components for request processing,
correlation IDs, security headers, and other cross-cutting concerns.
"""

from src.presentation.middleware.correlation import CorrelationIDMiddleware
from src.presentation.middleware.security import SecurityHeadersMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "SecurityHeadersMiddleware",
]
