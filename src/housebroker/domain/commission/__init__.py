"""Commission domain.

Resolves the broker commission owed on a transaction price from a table
of price tiers.
"""

from housebroker.domain.commission.entities import CommissionRate
from housebroker.domain.commission.exceptions import (
    InvalidPriceError,
    InvalidPriceRangeError,
    InvalidRateError,
    NoMatchingTierError,
)
from housebroker.domain.commission.repositories import CommissionRateRepository
from housebroker.domain.commission.services import CommissionResolver
from housebroker.domain.commission.value_objects import (
    BoundedPriceRange,
    CommissionQuote,
    OpenEndedPriceRange,
    PriceRange,
    parse_price,
    price_range,
)

__all__ = [
    "BoundedPriceRange",
    "CommissionQuote",
    "CommissionRate",
    "CommissionRateRepository",
    "CommissionResolver",
    "InvalidPriceError",
    "InvalidPriceRangeError",
    "InvalidRateError",
    "NoMatchingTierError",
    "OpenEndedPriceRange",
    "PriceRange",
    "parse_price",
    "price_range",
]
