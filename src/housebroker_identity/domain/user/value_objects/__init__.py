"""Value objects for the user domain having identity concerns only."""

from housebroker_identity.domain.user.value_objects.email import Email
from housebroker_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "UserRole",
]
