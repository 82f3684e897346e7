"""Shared test fixtures for pytest"""
import os
import sys
from pathlib import Path

# Rate limiting would make request-heavy tests order dependent
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from main import app  # noqa: E402
from src.application.services.error_handler import SecureErrorHandler  # noqa: E402
from src.application.services.hash_service import HashService  # noqa: E402
from src.application.services.input_validator import SecurityInputValidator  # noqa: E402
from src.infrastructure.crypto.algorithm_registry import AlgorithmRegistry  # noqa: E402


@pytest.fixture
async def client():
    """HTTP client for API testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def registry() -> AlgorithmRegistry:
    """Registry with the default algorithm table"""
    return AlgorithmRegistry()


@pytest.fixture
def validator(registry: AlgorithmRegistry) -> SecurityInputValidator:
    return SecurityInputValidator(registry, max_input_length=10_000, min_input_length=1)


@pytest.fixture
def hash_service(registry: AlgorithmRegistry, validator: SecurityInputValidator) -> HashService:
    """Provides a default HashService instance for tests."""
    return HashService(registry, validator)


@pytest.fixture
def error_handler() -> SecureErrorHandler:
    return SecureErrorHandler()
