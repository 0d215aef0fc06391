"""
Health Check Service — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── app:          Fresh FastAPI instance from create_app()
    ├── test_client:  HTTPX AsyncClient talking to `app` in-process
    └── repo_root:    Path to the repository root (deployment artifacts)
"""

import os
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ.pop("PORT", None)


@pytest.fixture
def app():
    """A freshly built application, so tests can't leak routes into each other."""
    from healthsvc.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app without a
    server. raise_app_exceptions=False so responses produced by the
    fallback exception handler are returned rather than re-raised.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parents[2]
