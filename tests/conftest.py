"""
Pytest fixtures for gateway tests
"""

import pytest
from fastapi.testclient import TestClient

from aimcs_backend.config import Settings
from aimcs_backend.main import create_app


def make_settings(**overrides) -> Settings:
    """Settings isolated from the process environment's .env file"""
    values = {"node_env": "development", "log_format": "json"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client for the gateway"""
    return TestClient(app)

