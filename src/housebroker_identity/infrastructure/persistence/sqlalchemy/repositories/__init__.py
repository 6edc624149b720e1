# ruff: noqa: E501 - Long import paths in __init__.py re-exports
from housebroker_identity.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepositorySQLAlchemy,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.repositories.user_credential_repository import (
    UserCredentialRepositorySQLAlchemy,
)
from housebroker_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "RoleRepositorySQLAlchemy",
    "UserCredentialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
