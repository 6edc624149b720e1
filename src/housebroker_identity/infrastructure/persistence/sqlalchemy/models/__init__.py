# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from housebroker_identity.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
    UserRoleModel,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "RoleModel",
    "UserCredentialModel",
    "UserModel",
    "UserRoleModel",
]
