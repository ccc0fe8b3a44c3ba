"""Global pytest configuration and fixtures for all tests."""

import os

import pytest
from fastapi.testclient import TestClient

from hello_api.application import create_app
from hello_api.config import Settings


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Keeps the process environment predictable for tests that build
    Settings from the environment.
    """
    original_env = {}

    test_env_vars = {
        "ENVIRONMENT": "test",
        "ENABLE_DOCS": "false",
        "LOG_LEVEL": "WARNING",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture
def settings() -> Settings:
    """Settings independent of any .env file on the machine running the tests."""
    return Settings(_env_file=None, environment="test", log_level="WARNING")


@pytest.fixture
def app(settings):
    """Create a fresh application."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as test_client:
        yield test_client
