"""
tests/conftest.py -- Shared test fixtures for Developers API tests.

This module provides:
  - client: TestClient running the real lifespan (fresh empty registry)
  - auth_headers: Authorization header carrying a valid admin token
  - registry: a standalone DeveloperRegistry for unit tests

The DEBUG env var must be set before any auth/core import so get_settings()
auto-generates SECRET_KEY in dev mode rather than raising ValueError.
"""

from __future__ import annotations

import os
from collections.abc import Generator

# CRITICAL: Set DEBUG before any auth/core import so get_settings() can
# auto-generate SECRET_KEY in dev mode instead of raising ValueError.
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from api.limiter import limiter
from api.main import app
from auth.tokens import create_access_token
from registry.store import DeveloperRegistry


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> Generator[None, None, None]:
    """Clear the shared in-memory limiter so login counts never leak between tests."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Yield a TestClient whose lifespan builds a fresh, empty registry.

    Entering the client context runs startup; leaving it runs shutdown, so
    every test sees its own registry.
    """
    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = create_access_token("admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def registry() -> DeveloperRegistry:
    return DeveloperRegistry()
