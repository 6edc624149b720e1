"""HouseBroker Identity - users, roles and session tokens.

This package handles all identity-related concerns:
- User registration with a Broker or Seeker role
- Login and signed session token issuance
- Password policy and hashing (bcrypt)
- Role catalog seeding

The commission domain only sees the role claim of a verified token.
"""

from housebroker_identity.application.services import (
    AuthenticationService,
    RoleCatalogService,
)
from housebroker_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    RoleRepository,
    User,
    UserRepository,
    UserRole,
)
from housebroker_identity.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidRoleError,
    InvalidTokenError,
    SigningKeyMisconfiguredError,
    ValidationFailedError,
)
from housebroker_identity.repositories import (
    UserCredentialData,
    UserCredentialRepository,
)
from housebroker_identity.schemas import IdentityError, TokenPayload
from housebroker_identity.services import (
    JWTConfig,
    JWTService,
    PasswordHashingService,
    PasswordPolicy,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "RoleRepository",
    "User",
    "UserRepository",
    "UserRole",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidRoleError",
    "InvalidTokenError",
    "SigningKeyMisconfiguredError",
    "ValidationFailedError",
    # Repositories
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "IdentityError",
    "TokenPayload",
    # Services
    "JWTConfig",
    "JWTService",
    "PasswordHashingService",
    "PasswordPolicy",
    # Application Services
    "AuthenticationService",
    "RoleCatalogService",
]
