"""Security headers for every hash service response"""
from collections.abc import Callable

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from src.infrastructure.config.settings import get_settings

DOCS_PATHS = frozenset({"/docs", "/redoc", "/openapi.json"})

HSTS_VALUE = "max-age=63072000; includeSubDomains; preload"  # 2 years

STATIC_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Permissions-Policy": ", ".join(
        f"{feature}=()"
        for feature in (
            "accelerometer", "camera", "geolocation", "gyroscope",
            "magnetometer", "microphone", "payment", "usb",
        )
    ),
}

# Rendered hash pages carry inline styles and nothing else
PAGE_CSP = (
    ("default-src", "'none'"),
    ("style-src", "'unsafe-inline'"),
    ("img-src", "'self'"),
    ("frame-ancestors", "'none'"),
    ("form-action", "'self'"),
    ("base-uri", "'none'"),
)

# Swagger UI and ReDoc pull their bundles from jsDelivr
DOCS_CSP = (
    ("default-src", "'self'"),
    ("script-src", "'self' 'unsafe-inline' https://cdn.jsdelivr.net"),
    ("style-src", "'self' 'unsafe-inline' https://cdn.jsdelivr.net"),
    ("img-src", "'self' data: https:"),
    ("frame-ancestors", "'none'"),
    ("base-uri", "'self'"),
)


def build_csp(directives: tuple[tuple[str, str], ...]) -> str:
    return "; ".join(f"{name} {value}" for name, value in directives) + ";"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to all HTTP responses, including error pages.

    - Frame, MIME-sniffing, referrer and browser-feature restrictions
    - Content-Security-Policy (a looser policy on the API docs pages)
    - Strict-Transport-Security on https requests or in production
    - Cache-Control: no-store outside the docs, since digests and error
      reference IDs are per request
    """

    def __init__(self, app, page_csp: str | None = None, docs_csp: str | None = None):
        super().__init__(app)
        self.page_csp = page_csp or build_csp(PAGE_CSP)
        self.docs_csp = docs_csp or build_csp(DOCS_CSP)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        headers = response.headers

        headers.update(STATIC_HEADERS)

        if request.url.scheme == "https" or get_settings().environment == "production":
            headers["Strict-Transport-Security"] = HSTS_VALUE

        if request.url.path in DOCS_PATHS:
            headers["Content-Security-Policy"] = self.docs_csp
        else:
            headers["Content-Security-Policy"] = self.page_csp
            headers["Cache-Control"] = "no-store"

        # Information disclosure
        if "server" in headers:
            del headers["server"]

        return response
