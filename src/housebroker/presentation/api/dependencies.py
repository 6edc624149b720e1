"""FastAPI dependency injection for the HouseBroker API.

Provides dependencies for:
- Database sessions
- Authentication (verified token principal, role checks)
- Service instances
"""

import logging
from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from housebroker.application.services import CommissionRateCache, CommissionService
from housebroker.infrastructure.persistence.sqlalchemy.repositories import (
    CommissionRateRepositorySQLAlchemy,
)
from housebroker.presentation.api.config import get_api_settings
from housebroker_config.settings import Settings
from housebroker_identity import (
    AuthenticationService,
    InvalidTokenError,
    JWTConfig,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    UserRole,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy import (
    RoleRepositorySQLAlchemy,
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (per application)
# -----------------------------------------------------------------------------


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the application's engine/pool."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def get_session_maker(request: Request) -> async_sessionmaker[AsyncSession]:
    """The session factory owned by the running application."""
    return request.app.state.session_maker


async def get_db_session(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the application's
    engine/pool. Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def build_jwt_config(settings: Settings) -> JWTConfig:
    """Signing configuration from settings.

    Raises
    ------
    SigningKeyMisconfiguredError
        If the configured secret is empty or too short.
    """
    return JWTConfig(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(build_jwt_config(settings))


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service bound to the request session."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        role_repository=RoleRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Principal (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenPayload:
    """
    FastAPI dependency returning the claims of the presented bearer token.

    Authorization relies on the token alone; the user store is not consulted.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        return jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e.message)
        raise _unauthorized("Invalid or expired token") from e


# Type alias for injected principal
CurrentPrincipal = Annotated[TokenPayload, Depends(get_current_principal)]


def require_role(role: UserRole) -> Callable[..., Awaitable[TokenPayload]]:
    """Dependency factory admitting only principals whose role claim is ``role``."""

    async def role_checker(principal: CurrentPrincipal) -> TokenPayload:
        if not principal.has_role(role):
            logger.info(
                "Denied %s access to user %s (role: %s)",
                role.value,
                principal.user_id,
                principal.role.value,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return principal

    return role_checker


BrokerPrincipal = Annotated[TokenPayload, Depends(require_role(UserRole.BROKER))]


# -----------------------------------------------------------------------------
# Commission Services
# -----------------------------------------------------------------------------


def get_commission_cache(request: Request) -> CommissionRateCache:
    """The tier cache owned by the running application."""
    return request.app.state.commission_cache


async def get_commission_service(
    session: DBSession,
    cache: CommissionRateCache = Depends(get_commission_cache),
) -> CommissionService:
    return CommissionService(
        repository=CommissionRateRepositorySQLAlchemy(session),
        cache=cache,
    )


CommissionServiceDep = Annotated[CommissionService, Depends(get_commission_service)]
