"""Authentication services.

Provides password hashing and JWT token management.
"""

from housebroker_identity.services.jwt_service import JWTConfig, JWTService
from housebroker_identity.services.password_service import (
    PasswordHashingService,
    PasswordPolicy,
)

__all__ = [
    "JWTConfig",
    "JWTService",
    "PasswordHashingService",
    "PasswordPolicy",
]
