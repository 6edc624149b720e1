"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from housebroker_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
    UserRole,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
    UserRoleModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def add_to_role(self, user_id: UUID, role: UserRole) -> None:
        role_stmt = select(RoleModel).where(RoleModel.name == role.value)
        role_model = (await self._session.execute(role_stmt)).scalar_one_or_none()
        if role_model is None:
            msg = f"Role is not in the catalog: {role.value}"
            raise ValueError(msg)

        link_stmt = select(UserRoleModel).where(
            UserRoleModel.user_id == user_id,
            UserRoleModel.role_id == role_model.id,
        )
        if (await self._session.execute(link_stmt)).scalar_one_or_none() is not None:
            return

        self._session.add(UserRoleModel(user_id=user_id, role_id=role_model.id))
        await self._session.flush()
        logger.debug("Assigned role %s to user %s", role.value, user_id)

    async def get_roles(self, user_id: UUID) -> list[UserRole]:
        stmt = (
            select(RoleModel.name)
            .join(UserRoleModel, UserRoleModel.role_id == RoleModel.id)
            .where(UserRoleModel.user_id == user_id)
            .order_by(UserRoleModel.assigned_at, UserRoleModel.id)
        )
        result = await self._session.execute(stmt)

        roles: list[UserRole] = []
        for name in result.scalars().all():
            role = UserRole.from_name(name)
            if role is None:
                logger.warning("Ignoring unknown role %r for user %s", name, user_id)
                continue
            roles.append(role)
        return roles

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            phone_number=model.phone_number,
            bio=model.bio,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone_number=user.phone_number,
            bio=user.bio,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.phone_number = user.phone_number
        model.bio = user.bio
        model.is_active = user.is_active
        model.updated_at = user.updated_at
