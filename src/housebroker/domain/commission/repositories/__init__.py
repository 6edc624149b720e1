"""Repository interfaces for the commission domain."""

from housebroker.domain.commission.repositories.commission_rate_repository import (
    CommissionRateRepository,
)

__all__ = ["CommissionRateRepository"]
