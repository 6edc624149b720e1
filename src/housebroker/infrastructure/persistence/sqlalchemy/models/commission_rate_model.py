"""SQLAlchemy model for commission rate tiers."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from housebroker.infrastructure.persistence.sqlalchemy.models.base import Base


class CommissionRateModel(Base):
    """A row of the commission tier table. ``max_price`` NULL means open-ended."""

    __tablename__ = "commission_rates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    min_price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    max_price: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    rate_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)
    description: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<CommissionRateModel(id={self.id}, min={self.min_price}, "
            f"max={self.max_price}, rate={self.rate_percentage})>"
        )
