"""Result of resolving a commission for a price."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CommissionQuote:
    """Commission computed for a single transaction price."""

    price: Decimal
    rate_percentage: Decimal
    amount: Decimal
    tier_description: str
    tier_id: int | None = None
