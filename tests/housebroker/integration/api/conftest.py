"""Pytest fixtures for API integration tests.

Each test gets its own SQLite database file. The application creates the
schema and seeds roles and the default commission tiers on startup.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from housebroker.presentation.api.app import API_V1_PREFIX
from housebroker_config.settings import Settings
from tests.shared.api_helpers import (
    BROKER_EMAIL,
    SEEKER_EMAIL,
    build_test_client,
    login_headers,
    make_settings,
    register,
)


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(sqlite_url) -> Settings:
    """Test API settings against the per-test SQLite database."""
    return make_settings(sqlite_url)


@pytest.fixture
def test_client(api_settings) -> Iterator[TestClient]:
    with build_test_client(api_settings) as client:
        yield client


@pytest.fixture
def broker_headers(test_client) -> dict:
    """Auth headers for a registered Broker."""
    response = register(test_client, BROKER_EMAIL, "Broker", first_name="Anna")
    assert response.status_code == 201, response.text
    return login_headers(test_client, BROKER_EMAIL)


@pytest.fixture
def seeker_headers(test_client) -> dict:
    """Auth headers for a registered Seeker."""
    response = register(test_client, SEEKER_EMAIL, "Seeker")
    assert response.status_code == 201, response.text
    return login_headers(test_client, SEEKER_EMAIL)
