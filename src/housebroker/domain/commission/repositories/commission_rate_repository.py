"""Commission rate repository interface."""

from abc import ABC, abstractmethod

from housebroker.domain.commission.entities import CommissionRate


class CommissionRateRepository(ABC):
    """Read access to the commission tier table.

    The table is administered externally; ``save`` and ``count`` only exist
    for seeding a fresh database.
    """

    @abstractmethod
    async def list_all(self) -> list[CommissionRate]:
        """List all tiers ordered by ``min_price`` then id."""

    @abstractmethod
    async def save(self, rate: CommissionRate) -> CommissionRate:
        """Persist a tier and return it with its assigned id."""

    @abstractmethod
    async def count(self) -> int:
        """Count stored tiers."""
