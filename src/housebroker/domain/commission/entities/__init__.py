"""Entities for the commission domain."""

from housebroker.domain.commission.entities.commission_rate import CommissionRate

__all__ = ["CommissionRate"]
