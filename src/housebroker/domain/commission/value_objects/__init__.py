"""Value objects for the commission domain."""

from housebroker.domain.commission.value_objects.commission_quote import (
    CommissionQuote,
)
from housebroker.domain.commission.value_objects.price import parse_price
from housebroker.domain.commission.value_objects.price_range import (
    BoundedPriceRange,
    OpenEndedPriceRange,
    PriceRange,
    price_range,
)

__all__ = [
    "BoundedPriceRange",
    "CommissionQuote",
    "OpenEndedPriceRange",
    "PriceRange",
    "parse_price",
    "price_range",
]
