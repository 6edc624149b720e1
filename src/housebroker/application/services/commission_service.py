"""Application service for commission lookups."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from housebroker.domain.commission import CommissionResolver, parse_price

if TYPE_CHECKING:
    from housebroker.application.services.commission_rate_cache import (
        CommissionRateCache,
    )
    from housebroker.domain.commission import (
        CommissionQuote,
        CommissionRate,
        CommissionRateRepository,
    )

logger = logging.getLogger(__name__)


class CommissionService:
    """Resolves broker commissions against the stored tier table."""

    def __init__(
        self,
        repository: CommissionRateRepository,
        cache: CommissionRateCache | None = None,
        resolver: CommissionResolver | None = None,
    ):
        self._repository = repository
        self._cache = cache
        self._resolver = resolver or CommissionResolver()

    async def list_rates(self) -> list[CommissionRate]:
        if self._cache is None:
            return await self._repository.list_all()
        return await self._cache.get_or_load(self._repository.list_all)

    async def resolve(self, price: Decimal | int | str) -> CommissionQuote:
        """Compute the commission for ``price``.

        Raises
        ------
        InvalidPriceError
            If ``price`` is negative or not a decimal amount.
        NoMatchingTierError
            If no tier covers the price.
        """
        value = parse_price(price)
        tiers = await self.list_rates()
        quote = self._resolver.resolve(value, tiers)
        logger.debug(
            "Commission for %s: %s%% = %s (%s)",
            quote.price,
            quote.rate_percentage,
            quote.amount,
            quote.tier_description,
        )
        return quote
