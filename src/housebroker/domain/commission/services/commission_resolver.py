"""Tiered commission resolution."""

from __future__ import annotations

import logging
import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, Iterable

from housebroker.domain.commission.exceptions import NoMatchingTierError
from housebroker.domain.commission.value_objects import (
    CommissionQuote,
    parse_price,
)

if TYPE_CHECKING:
    from housebroker.domain.commission.entities import CommissionRate

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal(100)


class CommissionResolver:
    """Maps a transaction price to a commission through a tier table.

    A tier matches when ``min_price <= price`` and the tier is open-ended or
    ``price <= max_price``. The tier table is expected to partition the price
    axis; when it does not and several tiers match, the tightest one wins:

    1. highest ``min_price``
    2. bounded before open-ended
    3. lowest ``max_price``
    4. lowest id
    """

    @staticmethod
    def matching_tiers(
        price: Decimal,
        tiers: Iterable[CommissionRate],
    ) -> list[CommissionRate]:
        return [tier for tier in tiers if tier.covers(price)]

    @staticmethod
    def _specificity(tier: CommissionRate) -> tuple[Any, ...]:
        upper = tier.max_price if tier.max_price is not None else Decimal(0)
        tier_id = tier.id if tier.id is not None else sys.maxsize
        return (-tier.min_price, tier.price_range.is_open_ended, upper, tier_id)

    def select_tier(
        self,
        price: Decimal,
        tiers: Iterable[CommissionRate],
    ) -> CommissionRate:
        """Pick the tier applying to ``price``.

        Raises
        ------
        NoMatchingTierError
            If no tier covers the price.
        """
        matches = self.matching_tiers(price, tiers)
        if not matches:
            raise NoMatchingTierError(price)

        selected = min(matches, key=self._specificity)
        if len(matches) > 1:
            logger.warning(
                "Overlapping commission tiers for price %s: %s; using tier %s",
                price,
                ", ".join(str(t.id) for t in matches),
                selected.id,
            )
        return selected

    @staticmethod
    def compute_amount(price: Decimal, rate_percentage: Decimal) -> Decimal:
        """``price * rate / 100`` rounded half-up to cents."""
        return (price * rate_percentage / HUNDRED).quantize(
            CENT,
            rounding=ROUND_HALF_UP,
        )

    def resolve(
        self,
        price: Decimal | int | str,
        tiers: Iterable[CommissionRate],
    ) -> CommissionQuote:
        """Resolve the commission for ``price``.

        Raises
        ------
        InvalidPriceError
            If ``price`` is not a non-negative decimal amount.
        NoMatchingTierError
            If no tier covers the price.
        """
        value = parse_price(price)
        tier = self.select_tier(value, tiers)

        return CommissionQuote(
            price=value,
            rate_percentage=tier.rate_percentage,
            amount=self.compute_amount(value, tier.rate_percentage),
            tier_description=tier.description,
            tier_id=tier.id,
        )
