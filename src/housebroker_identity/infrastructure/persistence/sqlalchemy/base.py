"""SQLAlchemy declarative base for housebroker_identity models.

Uses the same metadata as housebroker's Base so both packages share one
schema.
"""

from housebroker.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
