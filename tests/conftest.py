# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an HTTP test client for the FastAPI app
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CREATE_LOOP_COUNT", "1000")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """HTTP client bound to the FastAPI app (runs the lifespan handler)."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def controller():
    """A fresh users controller with the default loop count."""
    from app.routers.users import UserController

    return UserController()


@pytest.fixture
def injection_ids():
    """Ids a reviewer would expect to see flagged as injection payloads."""
    return [
        "1 OR 1=1",
        "1; DROP TABLE users; --",
        "' UNION SELECT password FROM users --",
    ]
