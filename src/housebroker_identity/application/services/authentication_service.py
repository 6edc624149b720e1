"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from housebroker_identity.application.services.role_catalog_service import (
    RoleCatalogService,
)
from housebroker_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRole,
)
from housebroker_identity.exceptions import (
    InvalidCredentialsError,
    InvalidRoleError,
    ValidationFailedError,
)
from housebroker_identity.schemas import IdentityError, TokenPayload

if TYPE_CHECKING:
    from housebroker_identity.domain.user import RoleRepository, UserRepository
    from housebroker_identity.repositories import UserCredentialRepository
    from housebroker_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


def _invalid_email(email: str) -> IdentityError:
    return IdentityError("InvalidEmail", f"Email '{email}' is invalid.")


def _duplicate_email(email: str) -> IdentityError:
    return IdentityError("DuplicateEmail", f"Email '{email}' is already taken.")


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and JWT tokens with the User domain
    to provide:
    - User registration with a requested role
    - Login with password
    - Token verification

    The service never commits; the caller owns the unit of work so that a
    new user, its credential and its role link are stored together.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._role_catalog = RoleCatalogService(role_repository)
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def _resolve_role(self, role_name: str) -> UserRole:
        role = UserRole.from_name(role_name)
        if role is None or not await self._role_catalog.is_available(role):
            logger.info("Registration rejected, unavailable role: %r", role_name)
            raise InvalidRoleError(role_name)
        return role

    async def _collect_errors(self, email: str, password: str) -> list[IdentityError]:
        errors: list[IdentityError] = []

        if not Email.is_valid(email):
            errors.append(_invalid_email(email))
        elif await self._user_repo.exists_by_email(email):
            errors.append(_duplicate_email(email))

        errors.extend(self._password_service.check_strength(password))
        return errors

    async def register(  # NOQA: PLR0913
        self,
        email: str,
        password: str,
        role: str,
        first_name: str = "",
        last_name: str = "",
        phone_number: str | None = None,
        bio: str | None = None,
    ) -> User:
        """Create an active user holding exactly ``role``.

        Raises
        ------
        InvalidRoleError
            If the role is unknown or not seeded.
        ValidationFailedError
            Listing every violated rule (email format, duplicate email,
            password policy).
        """
        user_role = await self._resolve_role(role)

        errors = await self._collect_errors(email, password)
        if errors:
            logger.info(
                "Registration rejected for %s: %s",
                email,
                ", ".join(e.code for e in errors),
            )
            raise ValidationFailedError(errors)

        password_hash = self._password_service.hash(password)
        user = User.create(
            email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            bio=bio,
        )

        try:
            await self._user_repo.save(user)
        except EmailAlreadyExistsError as e:
            # Lost a race with a concurrent registration
            raise ValidationFailedError([_duplicate_email(email)]) from e

        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)
        await self._user_repo.add_to_role(user.id, user_role)

        logger.info("User registered: %s (role: %s)", user.email, user_role.value)
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Authenticate and issue a session token.

        Raises
        ------
        InvalidCredentialsError
            For unknown email, inactive user or wrong password alike.
        """
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            user = None

        credential = None
        if user is not None and user.is_active:
            credential = await self._credential_repo.find_by_user_id(user.id)

        if credential is None:
            # Same bcrypt cost as a wrong password
            self._password_service.verify_dummy(password)
            logger.info("Login failed for %s", email)
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            logger.info("Login failed for %s", email)
            raise InvalidCredentialsError

        roles = await self._user_repo.get_roles(user.id)
        role = UserRole.first_or_default(roles)
        if len(roles) > 1:
            logger.warning(
                "User %s holds %d roles; token carries %s",
                user.id,
                len(roles),
                role.value,
            )

        token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            name=user.display_name,
            role=role,
        )

        logger.info("User logged in: %s (role: %s)", user.email, role.value)
        return user, token

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
