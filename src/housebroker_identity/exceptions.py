"""Identity and authentication exceptions.

These exceptions are raised by the housebroker_identity package and should
be caught and handled by the presentation layer.
"""

from __future__ import annotations

from typing import Iterable

from housebroker_identity.schemas import IdentityError


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised for any failed login.

    Unknown email, inactive account and wrong password all produce this
    same error with the same message.
    """

    def __init__(self, message: str = "Invalid credentials."):
        super().__init__(message)


class InvalidRoleError(AuthError):
    """Raised when a registration names a role that is not available."""

    def __init__(self, role: str):
        self.role = role
        super().__init__("Invalid role.")


class ValidationFailedError(AuthError):
    """Raised when identity creation rejects the input.

    Carries every violated rule, not only the first one.
    """

    def __init__(self, errors: Iterable[IdentityError]):
        self.errors = list(errors)
        codes = ", ".join(e.code for e in self.errors)
        super().__init__(f"Validation failed: {codes}")

    @property
    def codes(self) -> list[str]:
        return [e.code for e in self.errors]


class SigningKeyMisconfiguredError(AuthError):
    """Raised at startup when the token signing secret is missing or too short."""

    def __init__(self, message: str = "JWT signing key is not configured"):
        super().__init__(message)
