"""Role catalog seeding and lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from housebroker_identity.domain.user import UserRole

if TYPE_CHECKING:
    from housebroker_identity.domain.user import RoleRepository

logger = logging.getLogger(__name__)


class RoleCatalogService:
    """Keeps the role table in line with the ``UserRole`` enum."""

    def __init__(self, role_repository: RoleRepository):
        self._role_repo = role_repository

    async def ensure_seeded(self) -> list[UserRole]:
        """Create every missing role. Returns the roles that were added."""
        created: list[UserRole] = []
        for role in UserRole:
            if not await self._role_repo.exists(role):
                await self._role_repo.create(role)
                created.append(role)

        if created:
            logger.info("Seeded roles: %s", ", ".join(r.value for r in created))
        return created

    async def is_available(self, role: UserRole | str) -> bool:
        """Whether ``role`` (or a role name, case-insensitive) is known and seeded."""
        if not isinstance(role, UserRole):
            role = UserRole.from_name(role)
            if role is None:
                return False
        return await self._role_repo.exists(role)
