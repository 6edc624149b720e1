"""SQLAlchemy models for the housebroker package."""

from housebroker.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from housebroker.infrastructure.persistence.sqlalchemy.models.commission_rate_model import (  # NOQA: E501
    CommissionRateModel,
)

__all__ = [
    "Base",
    "CommissionRateModel",
    "TimestampMixin",
]
