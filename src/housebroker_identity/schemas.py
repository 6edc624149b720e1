"""Data classes shared across the identity package."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from housebroker_identity.domain.user.value_objects import UserRole


@dataclass(frozen=True)
class IdentityError:
    """A single violated identity rule (e.g. ``PasswordRequiresDigit``)."""

    code: str
    description: str


@dataclass(frozen=True)
class TokenPayload:
    """Claims carried by a verified session token."""

    user_id: UUID
    email: str
    name: str
    role: UserRole
    issued_at: datetime
    expires_at: datetime

    def has_role(self, role: UserRole) -> bool:
        return self.role == role
