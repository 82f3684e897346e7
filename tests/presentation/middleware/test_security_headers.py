"""Test security header and correlation middleware"""

import pytest

from src.infrastructure.config.settings import get_settings


@pytest.mark.asyncio
async def test_security_headers_on_success(client):
    response = await client.get("/api/v1/hash", headers={"Accept": "application/json"})

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
    assert "default-src 'none'" in response.headers["Content-Security-Policy"]
    assert response.headers["Cache-Control"] == "no-store"
    assert "server" not in response.headers


@pytest.mark.asyncio
async def test_security_headers_on_errors(client):
    response = await client.get("/api/v1/hash", params={"algorithm": "MD5"})

    assert response.status_code == 403
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_no_hsts_on_plain_http_outside_production(client):
    assert get_settings().environment != "production"

    response = await client.get("/health")

    assert "Strict-Transport-Security" not in response.headers


@pytest.mark.asyncio
async def test_hsts_on_https(client):
    response = await client.get("https://test/health")

    assert "max-age=63072000" in response.headers["Strict-Transport-Security"]


@pytest.mark.asyncio
async def test_docs_csp_allows_swagger_assets(client):
    response = await client.get("/docs")

    assert "cdn.jsdelivr.net" in response.headers["Content-Security-Policy"]


@pytest.mark.asyncio
async def test_every_response_has_a_correlation_id(client):
    response = await client.get("/health")

    assert len(response.headers["X-Correlation-ID"]) == 24
