"""Unit tests for CommissionRateCache."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from housebroker.application.services import CommissionRateCache
from housebroker.domain.commission import CommissionRate

TIERS = [CommissionRate.create(Decimal("0"), None, Decimal("2"), "Flat", id=1)]


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestCommissionRateCache:
    """Tests for CommissionRateCache."""

    def setup_method(self):
        self.clock = FakeClock()
        self.cache = CommissionRateCache(ttl_seconds=300, clock=self.clock)

    def test_empty_cache_misses(self):
        assert self.cache.get() is None

    def test_hit_within_ttl(self):
        self.cache.put(TIERS)
        self.clock.advance(299)

        assert self.cache.get() == TIERS

    def test_expires_at_ttl(self):
        self.cache.put(TIERS)
        self.clock.advance(300)

        assert self.cache.get() is None

    def test_invalidate(self):
        self.cache.put(TIERS)
        self.cache.invalidate()

        assert self.cache.get() is None

    def test_zero_ttl_disables_cache(self):
        cache = CommissionRateCache(ttl_seconds=0, clock=self.clock)
        cache.put(TIERS)

        assert cache.enabled is False
        assert cache.get() is None

    def test_negative_ttl_rejected(self):
        with pytest.raises(ValueError):
            CommissionRateCache(ttl_seconds=-1)

    def test_returned_list_is_a_copy(self):
        self.cache.put(TIERS)
        self.cache.get().clear()

        assert self.cache.get() == TIERS

    @pytest.mark.asyncio
    async def test_get_or_load_calls_loader_once_within_ttl(self):
        loader = AsyncMock(return_value=TIERS)

        first = await self.cache.get_or_load(loader)
        second = await self.cache.get_or_load(loader)

        assert first == second == TIERS
        loader.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_or_load_reloads_after_expiry(self):
        loader = AsyncMock(return_value=TIERS)

        await self.cache.get_or_load(loader)
        self.clock.advance(301)
        await self.cache.get_or_load(loader)

        assert loader.await_count == 2
