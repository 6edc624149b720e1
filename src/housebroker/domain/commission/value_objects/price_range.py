"""Price ranges covered by commission tiers.

A tier either covers a bounded interval ``[min_price, max_price]`` or an
open-ended interval ``[min_price, +inf)``. Both bounds are inclusive.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from housebroker.domain.commission.exceptions import InvalidPriceRangeError


def _check_floor(min_price: Decimal) -> None:
    if not isinstance(min_price, Decimal):
        msg = f"min_price must be a Decimal, got {type(min_price).__name__}"
        raise InvalidPriceRangeError(msg)
    if min_price < 0:
        msg = f"min_price must not be negative, got {min_price}"
        raise InvalidPriceRangeError(msg)


@dataclass(frozen=True)
class BoundedPriceRange:
    """Closed interval ``[min_price, max_price]``."""

    min_price: Decimal
    max_price: Decimal

    def __post_init__(self) -> None:
        _check_floor(self.min_price)
        if not isinstance(self.max_price, Decimal):
            msg = f"max_price must be a Decimal, got {type(self.max_price).__name__}"
            raise InvalidPriceRangeError(msg)
        if self.max_price < self.min_price:
            msg = (
                f"max_price ({self.max_price}) must not be lower than "
                f"min_price ({self.min_price})"
            )
            raise InvalidPriceRangeError(msg)

    @property
    def upper_bound(self) -> Decimal:
        return self.max_price

    @property
    def is_open_ended(self) -> bool:
        return False

    def contains(self, price: Decimal) -> bool:
        return self.min_price <= price <= self.max_price

    def __str__(self) -> str:
        return f"[{self.min_price}, {self.max_price}]"


@dataclass(frozen=True)
class OpenEndedPriceRange:
    """Half-line ``[min_price, +inf)`` with no upper bound."""

    min_price: Decimal

    def __post_init__(self) -> None:
        _check_floor(self.min_price)

    @property
    def upper_bound(self) -> None:
        return None

    @property
    def is_open_ended(self) -> bool:
        return True

    def contains(self, price: Decimal) -> bool:
        return price >= self.min_price

    def __str__(self) -> str:
        return f"[{self.min_price}, inf)"


PriceRange = Union[BoundedPriceRange, OpenEndedPriceRange]


def price_range(min_price: Decimal, max_price: Decimal | None = None) -> PriceRange:
    """Build the matching range variant from a nullable upper bound."""
    if max_price is None:
        return OpenEndedPriceRange(min_price)
    return BoundedPriceRange(min_price, max_price)
