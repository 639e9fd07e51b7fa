"""
Users API Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, created fresh for each test):
    ├── store:         UserStore holding the two seed records
    ├── empty_store:   UserStore with no records
    ├── api_app:       FastAPI app built around `store`
    ├── test_client:   HTTPX AsyncClient talking to `api_app`
    └── error_client:  Same, but returns 500 responses instead of re-raising
"""

import os

# Set before any app import so the Settings singleton sees them
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["SECURITY_HEADERS"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import create_app
from app.store import UserStore


@pytest.fixture
def store():
    """Seeded store: John Doe (1) and Jane Smith (2)."""
    return UserStore.seeded()


@pytest.fixture
def empty_store():
    return UserStore()


@pytest.fixture
def api_app(store):
    """
    A fresh application instance per test.

    Every test gets its own store, so mutations never leak between tests.
    """
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(api_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def error_client(api_app):
    """
    Client for exercising the catch-all 500 handler.

    Starlette re-raises unhandled exceptions after sending the 500 response;
    raise_app_exceptions=False hands the response back to the test instead.
    """
    transport = ASGITransport(app=api_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
