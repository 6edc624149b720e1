"""Tests for application startup and per-application wiring."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from housebroker.presentation.api.app import API_V1_PREFIX, create_app, lifespan
from housebroker_identity import (
    InvalidTokenError,
    JWTConfig,
    JWTService,
    SigningKeyMisconfiguredError,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from tests.shared.api_helpers import (
    BROKER_EMAIL,
    TEST_JWT_SECRET,
    login,
    make_settings,
    register,
)

OTHER_JWT_SECRET = "another-jwt-secret-for-testing-0123456789"  # NOQA: S105


async def _count_users(database_url: str) -> int:
    engine = create_async_engine(database_url, poolclass=NullPool)
    try:
        async with AsyncSession(engine) as session:
            return await session.scalar(select(func.count()).select_from(UserModel))
    finally:
        await engine.dispose()


class TestLifespan:
    @pytest.mark.asyncio
    async def test_short_signing_key_is_fatal(self, sqlite_url):
        settings = make_settings(sqlite_url, jwt_secret_key=SecretStr("too-short"))
        app = create_app(settings=settings)

        with pytest.raises(SigningKeyMisconfiguredError):
            async with lifespan(app):
                pass

    @pytest.mark.asyncio
    async def test_empty_signing_key_is_fatal(self, sqlite_url):
        settings = make_settings(sqlite_url, jwt_secret_key=SecretStr(""))
        app = create_app(settings=settings)

        with pytest.raises(SigningKeyMisconfiguredError):
            async with lifespan(app):
                pass

    def test_docs_hidden_outside_debug(self, sqlite_url):
        app = create_app(settings=make_settings(sqlite_url, debug=False))

        assert app.docs_url is None
        assert app.openapi_url is None


@pytest.mark.integration
class TestCreateAppWiring:
    """Requests use the settings and database the app was created with."""

    def test_requests_use_given_settings_and_database(self, sqlite_url):
        settings = make_settings(sqlite_url)
        app = create_app(settings=settings)
        assert app.dependency_overrides == {}

        with TestClient(app) as client:
            assert register(client, BROKER_EMAIL, "Broker").status_code == 201
            response = login(client, BROKER_EMAIL)

        assert response.status_code == 200
        token = response.json()["token"]
        payload = JWTService(JWTConfig(TEST_JWT_SECRET)).verify_token(token)
        assert payload.email == BROKER_EMAIL
        with pytest.raises(InvalidTokenError):
            JWTService(JWTConfig(OTHER_JWT_SECRET)).verify_token(token)

        assert asyncio.run(_count_users(sqlite_url)) == 1

    def test_apps_do_not_share_keys_or_databases(self, tmp_path):
        first_settings = make_settings(f"sqlite+aiosqlite:///{tmp_path / 'first.db'}")
        second_settings = make_settings(
            f"sqlite+aiosqlite:///{tmp_path / 'second.db'}",
            jwt_secret_key=SecretStr(OTHER_JWT_SECRET),
        )
        first = create_app(settings=first_settings)
        second = create_app(settings=second_settings)

        with TestClient(first) as first_client, TestClient(second) as second_client:
            register(first_client, BROKER_EMAIL, "Broker")
            token = login(first_client, BROKER_EMAIL).json()["token"]

            me = second_client.get(
                f"{API_V1_PREFIX}/auth/me",
                headers={"Authorization": f"Bearer {token}"},
            )
            second_login = login(second_client, BROKER_EMAIL)

        assert me.status_code == 401
        assert second_login.status_code == 401
