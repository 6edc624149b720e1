"""Abstract repository interfaces owned by the identity package."""

from housebroker_identity.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = [
    "UserCredentialData",
    "UserCredentialRepository",
]
