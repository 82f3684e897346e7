"""Test health check endpoint"""

import logging

import pytest
from fastapi.testclient import TestClient

from main import app
from src.infrastructure.crypto.algorithm_registry import AlgorithmRegistry
from src.presentation.api.dependencies import get_algorithm_registry


class _EmptyRegistry:
    def list_secure_algorithms(self):
        return frozenset()


@pytest.mark.asyncio
async def test_health_check_healthy(client):
    """Test health check returns healthy status"""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"]["api"] is True
    assert data["checks"]["algorithms"] == len(AlgorithmRegistry().list_secure_algorithms())


@pytest.mark.asyncio
async def test_health_check_unhealthy_without_algorithms(client):
    """Test health check reports 503 when no algorithm is usable"""
    app.dependency_overrides[get_algorithm_registry] = _EmptyRegistry

    response = await client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


@pytest.mark.asyncio
async def test_root_endpoint(client):
    """Test root endpoint returns app info"""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Secure Hash Service"
    assert "version" in data
    assert data["status"] == "running"


def test_startup_runs_lifespan_and_serves_requests(caplog):
    """
    GIVEN the application started through its lifespan
    WHEN /health and a hash request are served
    THEN startup completes, logs the ready algorithms and requests succeed.
    """
    with caplog.at_level(logging.INFO, logger="main"):
        with TestClient(app) as test_client:
            health = test_client.get("/health")
            hashed = test_client.get("/api/v1/hash", headers={"Accept": "application/json"})

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert hashed.status_code == 200
    assert "Hash service ready: default=SHA-256" in caplog.text
    assert "SHA3-512" in caplog.text
