"""Helpers for driving the HTTP API from tests."""

from contextlib import contextmanager
from typing import Iterator

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from housebroker.presentation.api.app import API_V1_PREFIX, create_app
from housebroker_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"  # NOQA: S105
TEST_PASSWORD = "secret1"  # NOQA: S105

BROKER_EMAIL = "broker@example.com"
SEEKER_EMAIL = "seeker@example.com"


def make_settings(database_url: str, **overrides) -> Settings:
    """Test settings against ``database_url``, ignoring any .env file."""
    values = {
        "jwt_secret_key": SecretStr(TEST_JWT_SECRET),
        "postgres_password": SecretStr("test-password"),
        "database_url_override": database_url,
        "api_cors_origins": "http://localhost:3000",
        "debug": True,
        # Cheapest bcrypt work factor keeps the suite fast
        "password_hash_rounds": 4,
        "commission_cache_ttl_seconds": 0,
        "seed_default_commission_rates": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@contextmanager
def build_test_client(settings: Settings) -> Iterator[TestClient]:
    """Run the app against the settings' database, lifespan included."""
    engine = create_async_engine(settings.database_url, poolclass=NullPool)
    app = create_app(settings=settings, engine=engine)

    with TestClient(app) as client:
        yield client


def register(
    client: TestClient,
    email: str,
    role: str,
    password: str = TEST_PASSWORD,
    **extra: str,
):
    return client.post(
        f"{API_V1_PREFIX}/auth/register",
        json={"email": email, "password": password, "role": role, **extra},
    )


def login(client: TestClient, email: str, password: str = TEST_PASSWORD):
    return client.post(
        f"{API_V1_PREFIX}/auth/login",
        json={"email": email, "password": password},
    )


def login_headers(client: TestClient, email: str, password: str = TEST_PASSWORD) -> dict:
    response = login(client, email, password)
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
