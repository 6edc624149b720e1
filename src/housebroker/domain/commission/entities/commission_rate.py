"""Commission rate tier entity."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from housebroker.domain.commission.exceptions import InvalidRateError
from housebroker.domain.commission.value_objects.price_range import (
    PriceRange,
    price_range,
)

MAX_RATE_PERCENTAGE = Decimal(100)


@dataclass(frozen=True)
class CommissionRate:
    """A tier of the commission table.

    Tiers are administered outside the application and are read-only here.
    ``id`` is ``None`` for tiers that have not been persisted yet.
    """

    price_range: PriceRange
    rate_percentage: Decimal
    description: str
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rate_percentage, Decimal):
            object.__setattr__(
                self,
                "rate_percentage",
                Decimal(str(self.rate_percentage)),
            )
        if not Decimal(0) <= self.rate_percentage <= MAX_RATE_PERCENTAGE:
            raise InvalidRateError(self.rate_percentage)

    @property
    def min_price(self) -> Decimal:
        return self.price_range.min_price

    @property
    def max_price(self) -> Decimal | None:
        return self.price_range.upper_bound

    def covers(self, price: Decimal) -> bool:
        return self.price_range.contains(price)

    @classmethod
    def create(
        cls,
        min_price: Decimal,
        max_price: Decimal | None,
        rate_percentage: Decimal,
        description: str,
        id: int | None = None,
    ) -> CommissionRate:
        return cls(
            price_range=price_range(min_price, max_price),
            rate_percentage=rate_percentage,
            description=description,
            id=id,
        )
