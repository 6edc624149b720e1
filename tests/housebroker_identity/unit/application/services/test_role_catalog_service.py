"""Unit tests for RoleCatalogService."""

from unittest.mock import AsyncMock

import pytest

from housebroker_identity import RoleCatalogService, UserRole


class TestRoleCatalogService:
    def setup_method(self):
        self.role_repo = AsyncMock()
        self.service = RoleCatalogService(self.role_repo)

    @pytest.mark.asyncio
    async def test_seeds_missing_roles(self):
        self.role_repo.exists.return_value = False

        created = await self.service.ensure_seeded()

        assert created == [UserRole.BROKER, UserRole.SEEKER]
        assert self.role_repo.create.await_count == 2

    @pytest.mark.asyncio
    async def test_existing_roles_untouched(self):
        self.role_repo.exists.return_value = True

        created = await self.service.ensure_seeded()

        assert created == []
        self.role_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_seeded_role_is_available(self):
        self.role_repo.exists.return_value = True

        assert await self.service.is_available(UserRole.BROKER)
        self.role_repo.exists.assert_awaited_once_with(UserRole.BROKER)

    @pytest.mark.asyncio
    async def test_role_name_is_case_insensitive(self):
        self.role_repo.exists.return_value = True

        assert await self.service.is_available("seeker")
        self.role_repo.exists.assert_awaited_once_with(UserRole.SEEKER)

    @pytest.mark.asyncio
    async def test_unseeded_role_is_unavailable(self):
        self.role_repo.exists.return_value = False

        assert not await self.service.is_available(UserRole.BROKER)

    @pytest.mark.asyncio
    async def test_unknown_name_is_unavailable(self):
        assert not await self.service.is_available("Admin")
        self.role_repo.exists.assert_not_called()
