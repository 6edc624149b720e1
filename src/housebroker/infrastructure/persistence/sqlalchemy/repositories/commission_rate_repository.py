"""SQLAlchemy implementation of CommissionRateRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from housebroker.domain.commission import CommissionRate, CommissionRateRepository
from housebroker.infrastructure.persistence.sqlalchemy.models import (
    CommissionRateModel,
)

logger = logging.getLogger(__name__)


class CommissionRateRepositorySQLAlchemy(CommissionRateRepository):
    """SQLAlchemy implementation of the CommissionRateRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[CommissionRate]:
        stmt = select(CommissionRateModel).order_by(
            CommissionRateModel.min_price,
            CommissionRateModel.id,
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def save(self, rate: CommissionRate) -> CommissionRate:
        model = CommissionRateModel(
            id=rate.id,
            min_price=rate.min_price,
            max_price=rate.max_price,
            rate_percentage=rate.rate_percentage,
            description=rate.description,
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Stored commission tier %s: %s", model.id, rate.description)
        return self._map_to_domain(model)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(CommissionRateModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _map_to_domain(self, model: CommissionRateModel) -> CommissionRate:
        return CommissionRate.create(
            min_price=model.min_price,
            max_price=model.max_price,
            rate_percentage=model.rate_percentage,
            description=model.description,
            id=model.id,
        )
