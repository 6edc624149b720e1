from housebroker.infrastructure.persistence.sqlalchemy.repositories.commission_rate_repository import (  # NOQA: E501
    CommissionRateRepositorySQLAlchemy,
)

__all__ = ["CommissionRateRepositorySQLAlchemy"]
