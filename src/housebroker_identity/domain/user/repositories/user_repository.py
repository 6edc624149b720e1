"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from housebroker_identity.domain.user.aggregates.user import User
from housebroker_identity.domain.user.value_objects import Email, UserRole


class UserRepository(ABC):
    """Repository interface for User aggregates and their role assignments."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address (case-insensitive)."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user.

        Raises EmailAlreadyExistsError when the email is taken.
        """

    @abstractmethod
    async def add_to_role(self, user_id: UUID, role: UserRole) -> None:
        """Link a user to a role. Linking an already held role is a no-op."""

    @abstractmethod
    async def get_roles(self, user_id: UUID) -> list[UserRole]:
        """Roles held by the user, in assignment order."""
