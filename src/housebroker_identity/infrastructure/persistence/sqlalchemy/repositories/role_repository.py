"""SQLAlchemy implementation of RoleRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from housebroker_identity.domain.user import RoleRepository, UserRole
from housebroker_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
)

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository):
    """SQLAlchemy implementation of the RoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, role: UserRole) -> bool:
        stmt = select(RoleModel.id).where(RoleModel.name == role.value)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, role: UserRole) -> None:
        self._session.add(RoleModel(name=role.value))
        await self._session.flush()
        logger.info("Created role: %s", role.value)

    async def list_all(self) -> list[UserRole]:
        stmt = select(RoleModel.name).order_by(RoleModel.id)
        result = await self._session.execute(stmt)
        roles = (UserRole.from_name(name) for name in result.scalars().all())
        return [role for role in roles if role is not None]
