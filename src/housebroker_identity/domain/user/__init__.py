"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, email, profile, activation)
- Roles (closed set: Broker, Seeker)
- Repository interfaces for users and the role catalog
"""

from housebroker_identity.domain.user.aggregates import User
from housebroker_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from housebroker_identity.domain.user.repositories import (
    RoleRepository,
    UserRepository,
)
from housebroker_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "RoleRepository",
    "User",
    "UserRepository",
    "UserRole",
]
