"""Abstract repository interface for user credentials.

This interface defines the contract for credential persistence.
Implementations can use SQLAlchemy, MongoDB, or any other storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    """Immutable credential data returned by repository."""

    user_id: UUID
    password_hash: str


class UserCredentialRepository(ABC):
    """
    Abstract repository interface for user authentication credentials.

    Only bcrypt hashes are ever handed to an implementation.
    """

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """
        Create or update credentials for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        password_hash
            The bcrypt password hash

        Returns
        -------
        The saved credential data
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        """
        Find credentials by user ID.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        Credential data if found, None otherwise
        """
