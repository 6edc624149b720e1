"""Application services for HouseBroker."""

from housebroker.application.services.commission_rate_cache import (
    CommissionRateCache,
)
from housebroker.application.services.commission_service import CommissionService

__all__ = [
    "CommissionRateCache",
    "CommissionService",
]
