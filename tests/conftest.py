"""
Pytest configuration and shared fixtures for comment client tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides the fixture API app, an in-process client and a requester wired to it
3. Configures pytest markers
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fastapi.testclient import TestClient

from api.app import create_app
from core.http import HttpRequester, HttpxTransport


# Base URL the in-process TestClient answers on
FIXTURE_BASE_URL = "http://testserver/"


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def fixture_app():
    """Provide a fresh fixture API application."""
    return create_app()


@pytest.fixture
def api_client(fixture_app):
    """Provide a TestClient bound to the fixture API."""
    with TestClient(fixture_app) as client:
        yield client


@pytest.fixture
def base_url() -> str:
    """URL of the in-process fixture API."""
    return FIXTURE_BASE_URL


@pytest.fixture
def requester(api_client):
    """Provide an HttpRequester that talks to the fixture API in-process."""
    return HttpRequester(transport=HttpxTransport(api_client))


@pytest.fixture
def live_url() -> str:
    """URL of a running comment API; skips the test when none is configured."""
    url = os.getenv("COMMENT_API_URL") or os.getenv("UrlForTesting")
    if not url:
        pytest.skip("Set COMMENT_API_URL to run tests against a live server")
    return url


@pytest.fixture
def clean_env(monkeypatch):
    """Remove COMMENT_* variables so config tests start from defaults."""
    for name in list(os.environ):
        if name.startswith("COMMENT_") or name == "UrlForTesting":
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "live: marks tests that need a running comment API (COMMENT_API_URL)"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
