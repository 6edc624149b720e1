"""Integration tests for CommissionRateRepositorySQLAlchemy."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from housebroker.application.services import CommissionService
from housebroker.domain.commission import CommissionRate, OpenEndedPriceRange
from housebroker.infrastructure.persistence.sqlalchemy.repositories import (
    CommissionRateRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import TEST_COMMISSION_RATES


@pytest.fixture
def rate_repo(db_session):
    return CommissionRateRepositorySQLAlchemy(db_session)


@pytest.mark.integration
class TestCommissionRateRepositorySQLAlchemy:
    """Integration tests for CommissionRateRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_empty_table(self, rate_repo):
        assert await rate_repo.list_all() == []
        assert await rate_repo.count() == 0

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, rate_repo):
        saved = await rate_repo.save(TEST_COMMISSION_RATES[0])

        assert saved.id is not None
        assert saved.rate_percentage == Decimal("2.00")

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_min_price(self, rate_repo):
        for rate in reversed(TEST_COMMISSION_RATES):
            await rate_repo.save(rate)

        rates = await rate_repo.list_all()

        assert [r.min_price for r in rates] == [
            Decimal("0.00"),
            Decimal("50000.01"),
            Decimal("200000.01"),
        ]
        assert await rate_repo.count() == 3

    @pytest.mark.asyncio
    async def test_open_ended_round_trip(self, rate_repo, async_engine, db_session):
        await rate_repo.save(TEST_COMMISSION_RATES[2])
        await db_session.commit()

        async with AsyncSession(async_engine) as other_session:
            rates = await CommissionRateRepositorySQLAlchemy(other_session).list_all()

        assert len(rates) == 1
        assert isinstance(rates[0].price_range, OpenEndedPriceRange)
        assert rates[0].max_price is None
        assert rates[0].min_price == Decimal("200000.01")

    @pytest.mark.asyncio
    async def test_resolves_against_stored_tiers(self, rate_repo, async_engine, db_session):
        for rate in TEST_COMMISSION_RATES:
            await rate_repo.save(rate)
        await db_session.commit()

        async with AsyncSession(async_engine) as other_session:
            service = CommissionService(CommissionRateRepositorySQLAlchemy(other_session))
            low = await service.resolve("30000")
            mid = await service.resolve("200000")
            high = await service.resolve("500000")

        assert low.amount == Decimal("600.00")
        assert mid.amount == Decimal("6000.00")
        assert high.amount == Decimal("20000.00")

    @pytest.mark.asyncio
    async def test_save_keeps_description(self, rate_repo):
        rate = CommissionRate.create(
            Decimal("1"), Decimal("2"), Decimal("5.5"), "x" * 100
        )

        saved = await rate_repo.save(rate)

        assert saved.description == "x" * 100
