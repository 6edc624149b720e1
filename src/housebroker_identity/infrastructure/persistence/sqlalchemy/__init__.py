"""SQLAlchemy implementation for housebroker_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel, RoleModel, UserRoleModel, UserCredentialModel
- Repository implementations for users, roles and credentials
"""

from housebroker_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserCredentialModel,
    UserModel,
    UserRoleModel,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.repositories import (
    RoleRepositorySQLAlchemy,
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "RoleModel",
    "RoleRepositorySQLAlchemy",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "UserRoleModel",
]
