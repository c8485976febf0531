"""
Test configuration and fixtures for the Shorten service.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from main import app
from shorten_app.dependencies import get_shortener
from shorten_app.services.shortener import Shortener

DOMAIN = "http://localhost:8080"


@pytest.fixture(scope="function")
def shortener():
    """
    Create a fresh, empty store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return Shortener(domain=DOMAIN)


@pytest.fixture(scope="function")
def client(shortener):
    """
    Create a test client with the store dependency overridden.
    This is the main fixture that HTTP tests will use.
    """
    app.dependency_overrides[get_shortener] = lambda: shortener

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
