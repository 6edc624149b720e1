"""Domain services for the commission domain."""

from housebroker.domain.commission.services.commission_resolver import (
    CommissionResolver,
)

__all__ = ["CommissionResolver"]
