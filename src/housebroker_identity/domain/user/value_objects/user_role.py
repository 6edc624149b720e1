from __future__ import annotations

from enum import Enum
from typing import Iterable


class UserRole(str, Enum):
    """Roles a platform user can hold.

    The set is closed; the role catalog table only records which of these
    are available.
    """

    BROKER = "Broker"
    SEEKER = "Seeker"

    @classmethod
    def default(cls) -> UserRole:
        return cls.SEEKER

    @classmethod
    def from_name(cls, name: str) -> UserRole | None:
        """Look up a role by name, ignoring case. Returns None if unknown."""
        normalized = (name or "").strip().lower()
        for role in cls:
            if role.value.lower() == normalized:
                return role
        return None

    @classmethod
    def first_or_default(cls, roles: Iterable[UserRole]) -> UserRole:
        """First role in assignment order, or the default role."""
        return next(iter(roles), cls.default())
