"""In-process cache for the commission tier table."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Awaitable, Callable

if TYPE_CHECKING:
    from housebroker.domain.commission import CommissionRate

logger = logging.getLogger(__name__)


class CommissionRateCache:
    """Memoizes the tier list for a bounded time.

    Tiers change rarely but are edited outside the application, so an entry
    is only served for ``ttl_seconds`` before the store is asked again.
    A TTL of 0 disables caching.

    No lock is held while loading; concurrent misses may each hit the
    store once.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds < 0:
            msg = "ttl_seconds cannot be negative"
            raise ValueError(msg)
        self._ttl = ttl_seconds
        self._clock = clock
        self._tiers: tuple[CommissionRate, ...] | None = None
        self._loaded_at = 0.0

    @property
    def enabled(self) -> bool:
        return self._ttl > 0

    def get(self) -> list[CommissionRate] | None:
        """Cached tiers, or None when empty, expired or disabled."""
        if not self.enabled or self._tiers is None:
            return None
        if self._clock() - self._loaded_at >= self._ttl:
            return None
        return list(self._tiers)

    def put(self, tiers: list[CommissionRate]) -> None:
        if not self.enabled:
            return
        self._tiers = tuple(tiers)
        self._loaded_at = self._clock()

    def invalidate(self) -> None:
        self._tiers = None
        logger.debug("Commission tier cache invalidated")

    async def get_or_load(
        self,
        loader: Callable[[], Awaitable[list[CommissionRate]]],
    ) -> list[CommissionRate]:
        cached = self.get()
        if cached is not None:
            return cached

        tiers = await loader()
        self.put(tiers)
        logger.debug("Loaded %d commission tiers from store", len(tiers))
        return tiers
