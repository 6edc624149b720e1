"""SQLAlchemy implementation of UserCredentialRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from housebroker_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
)
from housebroker_identity.repositories import (
    UserCredentialData,
    UserCredentialRepository,
)

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    """SQLAlchemy implementation of UserCredentialRepository."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    def _to_data(self, model: UserCredentialModel) -> UserCredentialData:
        """Map SQLAlchemy model to data transfer object."""
        return UserCredentialData(
            user_id=model.user_id,
            password_hash=model.password_hash,
        )

    async def _find_model_by_user_id(self, user_id: UUID) -> UserCredentialModel | None:
        stmt = select(UserCredentialModel).where(
            UserCredentialModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(
        self,
        user_id: UUID,
        password_hash: str,
    ) -> UserCredentialData:
        existing = await self._find_model_by_user_id(user_id)

        if existing:
            existing.password_hash = password_hash
            model = existing
            logger.debug("Updated credentials for user: %s", user_id)
        else:
            model = UserCredentialModel(
                user_id=user_id,
                password_hash=password_hash,
            )
            self._session.add(model)
            logger.debug("Created credentials for user: %s", user_id)

        await self._session.flush()
        return self._to_data(model)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        model = await self._find_model_by_user_id(user_id)
        if model is None:
            return None
        return self._to_data(model)
