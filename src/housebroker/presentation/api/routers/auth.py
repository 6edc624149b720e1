"""Authentication router for registration, login and token inspection."""

from fastapi import APIRouter, status

from housebroker.presentation.api.dependencies import (
    AuthService,
    CurrentPrincipal,
    DBSession,
    JWTServiceDep,
)
from housebroker.presentation.api.schemas.auth import (
    LoginRequest,
    MessageResponse,
    PrincipalResponse,
    RegisterRequest,
    RolesResponse,
    TokenResponse,
)
from housebroker_identity import InvalidRoleError, ValidationFailedError
from housebroker_identity.infrastructure.persistence.sqlalchemy import (
    RoleRepositorySQLAlchemy,
)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered"},
        400: {"description": "Invalid role or validation failed"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    """
    Create an account holding exactly one role (`Broker` or `Seeker`).

    Every violated rule (email format, duplicate email, password policy)
    is listed in the error response.
    """
    try:
        await auth_service.register(
            email=request.email,
            password=request.password,
            role=request.role,
            first_name=request.first_name,
            last_name=request.last_name,
            phone_number=request.phone_number,
            bio=request.bio,
        )
        await session.commit()
    except (InvalidRoleError, ValidationFailedError):
        await session.rollback()
        raise

    return MessageResponse(message="Registration successful.")


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
) -> TokenResponse:
    """Exchange email and password for a signed session token."""
    _, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return TokenResponse(
        token=token,
        expires_in=jwt_service.expires_in_seconds,
    )


@router.get("/me", summary="Inspect the presented token")
async def me(principal: CurrentPrincipal) -> PrincipalResponse:
    return PrincipalResponse(
        user_id=principal.user_id,
        email=principal.email,
        name=principal.name,
        role=principal.role.value,
        issued_at=principal.issued_at,
        expires_at=principal.expires_at,
    )


@router.get("/roles", summary="List roles open for registration")
async def list_roles(session: DBSession) -> RolesResponse:
    roles = await RoleRepositorySQLAlchemy(session).list_all()
    return RolesResponse(roles=[role.value for role in roles])
