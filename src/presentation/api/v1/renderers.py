"""
Content negotiation and HTML rendering for hash responses.

Every value interpolated into HTML goes through escape_html, including
values the service produced itself.
"""

from enum import Enum
from http import HTTPStatus

from fastapi.responses import HTMLResponse, JSONResponse, Response

from src.domain.entities import AlgorithmInfo, HashResult
from src.domain.value_objects import ErrorResponse
from src.presentation.api.v1.schemas.hash import (AlgorithmResponse,
                                                  ErrorResponseSchema,
                                                  HashResponse)
from src.shared.utils.sanitization import escape_html

CORRELATION_HEADER = "X-Correlation-ID"


class MediaType(str, Enum):
    JSON = "application/json"
    HTML = "text/html"


def negotiate(accept_header: str | None) -> MediaType:
    """
    Pick JSON or HTML from an Accept header.

    Entries are considered in descending quality order (stable for ties).
    A missing or unparseable header selects HTML.
    """
    if not accept_header or not accept_header.strip():
        return MediaType.HTML

    entries: list[tuple[float, str]] = []
    for part in accept_header.split(","):
        media, _, params = part.strip().partition(";")
        media = media.strip().lower()
        if not media:
            continue
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            entries.append((quality, media))

    entries.sort(key=lambda entry: entry[0], reverse=True)
    for _, media in entries:
        if media in ("application/json", "*/*", "application/*") or media.endswith("+json"):
            return MediaType.JSON
        if media in ("text/html", "text/*", "application/xhtml+xml"):
            return MediaType.HTML
    return MediaType.HTML


_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{ font-family: 'Segoe UI', Arial, sans-serif; margin: 0; padding: 20px; background: #f5f6fa; }}
        .container {{ max-width: 760px; margin: 40px auto; background: white; border-radius: 12px; padding: 2rem; }}
        .hash {{ font-family: monospace; word-break: break-all; background: #f0f0f0; padding: 0.75rem; border-radius: 6px; }}
        .card {{ border: 1px solid #ddd; border-radius: 8px; padding: 1rem; margin-bottom: 1rem; }}
        .error {{ border-left: 4px solid #f56565; padding-left: 1rem; }}
        .correlation-id {{ font-size: 0.9rem; color: #666; font-family: monospace; }}
    </style>
</head>
<body>
    <div class="container">
{body}
    </div>
</body>
</html>"""


def _page(title: str, body: str) -> str:
    return _PAGE.format(title=escape_html(title), body=body)


def render_hash_html(result: HashResult) -> str:
    body = f"""        <h1>Checksum Verification</h1>
        <p><strong>Data:</strong> {escape_html(result.original_data)}</p>
        <p><strong>Algorithm:</strong> {escape_html(result.algorithm)}</p>
        <p><strong>Checksum:</strong></p>
        <p class="hash">{escape_html(result.hex_hash)}</p>
        <p><strong>Computed:</strong> {escape_html(result.timestamp.isoformat())}
           ({escape_html(str(result.computation_time_ms))} ms)</p>"""
    return _page("Checksum Verification", body)


def render_algorithms_html(algorithms: list[AlgorithmInfo]) -> str:
    cards = []
    for info in algorithms:
        aliases = ", ".join(sorted(info.aliases)) or "none"
        cards.append(
            f"""        <div class="card">
            <h2>{escape_html(info.name)}</h2>
            <p>{escape_html(info.description)}</p>
            <p><strong>Performance:</strong> {escape_html(info.performance_rating.description)}</p>
            <p><strong>Aliases:</strong> {escape_html(aliases)}</p>
        </div>"""
        )
    body = "        <h1>Supported Algorithms</h1>\n" + "\n".join(cards)
    return _page("Supported Algorithms", body)


def render_error_html(error: ErrorResponse) -> str:
    try:
        reason = HTTPStatus(error.status).phrase
    except ValueError:
        reason = "Error"
    body = f"""        <div class="error">
            <h1>{escape_html(str(error.status))} {escape_html(reason)}</h1>
            <p>{escape_html(error.message)}</p>
            <p class="correlation-id">Reference ID: {escape_html(error.correlation_id)}</p>
        </div>
        <a href="/api/v1/hash">&larr; Back to Hash Generator</a>"""
    return _page("Error - Checksum Verification", body)


def hash_response(result: HashResult, accept: str | None) -> Response:
    if negotiate(accept) is MediaType.JSON:
        return JSONResponse(content=HashResponse.from_entity(result).to_json())
    return HTMLResponse(content=render_hash_html(result))


def algorithms_response(algorithms: list[AlgorithmInfo], accept: str | None) -> Response:
    if negotiate(accept) is MediaType.JSON:
        return JSONResponse(
            content=[AlgorithmResponse.from_entity(info).to_json() for info in algorithms]
        )
    return HTMLResponse(content=render_algorithms_html(algorithms))


def error_response(error: ErrorResponse, accept: str | None) -> Response:
    headers = {CORRELATION_HEADER: error.correlation_id}
    if negotiate(accept) is MediaType.JSON:
        return JSONResponse(
            status_code=error.status,
            content=ErrorResponseSchema.from_entity(error).to_json(),
            headers=headers,
        )
    return HTMLResponse(
        status_code=error.status, content=render_error_html(error), headers=headers
    )
