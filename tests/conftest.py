"""
Shared fixtures for the catalog test suite.

Every test gets a fresh application with its own in-memory storage
and rate limiting switched off unless a test overrides ``settings``.
"""

import pytest
from fastapi.testclient import TestClient

from ticket_catalog.core.config import Settings
from ticket_catalog.main import create_app
from tests.factories import make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
