"""Database initialization utilities."""

import logging
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

# Import models to register with Base.metadata
import housebroker.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import housebroker_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from housebroker.domain.commission import CommissionRate
from housebroker.infrastructure.persistence.sqlalchemy.models.base import Base
from housebroker.infrastructure.persistence.sqlalchemy.repositories import (
    CommissionRateRepositorySQLAlchemy,
)
from housebroker_config.settings import Settings, get_settings
from housebroker_identity.application.services import RoleCatalogService
from housebroker_identity.infrastructure.persistence.sqlalchemy import (
    RoleRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

DEFAULT_COMMISSION_RATES = [
    CommissionRate.create(
        min_price=Decimal("0.00"),
        max_price=Decimal("50000.00"),
        rate_percentage=Decimal("2.00"),
        description="Up to 50,000",
    ),
    CommissionRate.create(
        min_price=Decimal("50000.01"),
        max_price=Decimal("200000.00"),
        rate_percentage=Decimal("3.00"),
        description="50,000.01 to 200,000",
    ),
    CommissionRate.create(
        min_price=Decimal("200000.01"),
        max_price=None,
        rate_percentage=Decimal("4.00"),
        description="Above 200,000",
    ),
]


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create a database engine from ``settings`` (the global settings by default)."""
    settings = settings or get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def seed_reference_data(session: AsyncSession, seed_rates: bool = False) -> None:
    """Seed the role catalog and, optionally, the default commission tiers.

    Tiers are only seeded into an empty table. The caller commits.
    """
    await RoleCatalogService(RoleRepositorySQLAlchemy(session)).ensure_seeded()

    if not seed_rates:
        return

    repository = CommissionRateRepositorySQLAlchemy(session)
    if await repository.count() > 0:
        logger.info("Commission tiers already present, skipping seed")
        return

    for rate in DEFAULT_COMMISSION_RATES:
        await repository.save(rate)
    logger.info("Seeded %d default commission tiers", len(DEFAULT_COMMISSION_RATES))
