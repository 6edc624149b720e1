"""Integration tests for the role and credential repositories."""

from uuid import UUID, uuid4

import pytest
import pytest_asyncio

from housebroker_identity import User, UserRole
from housebroker_identity.infrastructure.persistence.sqlalchemy import (
    RoleRepositorySQLAlchemy,
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
)


@pytest_asyncio.fixture
async def user_id(db_session) -> UUID:
    user = User.create("owner@example.com")
    await UserRepositorySQLAlchemy(db_session).save(user)
    return user.id


@pytest.mark.integration
class TestRoleRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_create_and_exists(self, db_session):
        repo = RoleRepositorySQLAlchemy(db_session)

        assert not await repo.exists(UserRole.BROKER)
        await repo.create(UserRole.BROKER)

        assert await repo.exists(UserRole.BROKER)
        assert not await repo.exists(UserRole.SEEKER)
        assert await repo.list_all() == [UserRole.BROKER]


@pytest.mark.integration
class TestUserCredentialRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_save_and_find(self, db_session, user_id):
        repo = UserCredentialRepositorySQLAlchemy(db_session)

        await repo.save(user_id=user_id, password_hash="$2b$04$hash")
        found = await repo.find_by_user_id(user_id)

        assert found is not None
        assert found.user_id == user_id
        assert isinstance(found.user_id, UUID)
        assert found.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_save_replaces_hash(self, db_session, user_id):
        repo = UserCredentialRepositorySQLAlchemy(db_session)

        await repo.save(user_id=user_id, password_hash="first")
        await repo.save(user_id=user_id, password_hash="second")

        found = await repo.find_by_user_id(user_id)
        assert found is not None
        assert found.password_hash == "second"

    @pytest.mark.asyncio
    async def test_missing(self, db_session):
        repo = UserCredentialRepositorySQLAlchemy(db_session)

        assert await repo.find_by_user_id(uuid4()) is None

    def test_user_id_references_users(self):
        column = UserCredentialModel.__table__.c.user_id

        targets = {fk.target_fullname for fk in column.foreign_keys}
        assert targets == {"users.id"}
