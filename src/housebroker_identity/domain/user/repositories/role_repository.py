"""Role catalog repository interface."""

from abc import ABC, abstractmethod

from housebroker_identity.domain.user.value_objects import UserRole


class RoleRepository(ABC):
    """Repository interface for the seeded role catalog."""

    @abstractmethod
    async def exists(self, role: UserRole) -> bool:
        """Check whether the role is present in the catalog."""

    @abstractmethod
    async def create(self, role: UserRole) -> None:
        """Add a role to the catalog."""

    @abstractmethod
    async def list_all(self) -> list[UserRole]:
        """List catalog roles known to the application."""
