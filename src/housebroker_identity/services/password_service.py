"""Password hashing service using bcrypt.

Provides secure password hashing and verification with a configurable
password policy.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from functools import lru_cache

import bcrypt

from housebroker_identity.exceptions import ValidationFailedError
from housebroker_identity.schemas import IdentityError

# bcrypt hard limit
MAX_BCRYPT_BYTES = 72

_DUMMY_PASSWORD = b"housebroker-no-such-account"


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(_DUMMY_PASSWORD, bcrypt.gensalt(rounds=rounds)).decode(
        "utf-8",
    )


@dataclass(frozen=True)
class PasswordPolicy:
    """Rules a password must satisfy.

    Defaults: at least 6 characters with a digit and a lowercase letter.
    Uppercase letters and symbols are not required.
    """

    required_length: int = 6
    require_digit: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = False
    require_non_alphanumeric: bool = False


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also checks passwords against a ``PasswordPolicy``.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("secret1")
    >>> service.verify("secret1", hash)
    True
    >>> service.verify("wrong1", hash)
    False
    """

    def __init__(self, rounds: int = 12, policy: PasswordPolicy | None = None):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
        policy
            Password rules; defaults to ``PasswordPolicy()``.
        """
        self._rounds = rounds
        self._policy = policy or PasswordPolicy()

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        ValidationFailedError
            If password doesn't satisfy the policy
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns False for a mismatch and for malformed hashes.
        """
        if len(password.encode("utf-8")) > MAX_BCRYPT_BYTES:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend the cost of one ``verify`` without a stored hash.

        Used when there is no account to check against, so that failed logins
        take the same time whatever their cause. Always returns False.
        """
        self.verify(password, _dummy_hash(self._rounds))
        return False

    def check_strength(self, password: str) -> list[IdentityError]:
        """Return every policy rule the password violates."""
        password = password or ""
        policy = self._policy
        errors: list[IdentityError] = []

        if len(password) < policy.required_length:
            errors.append(
                IdentityError(
                    "PasswordTooShort",
                    f"Passwords must be at least {policy.required_length} "
                    "characters.",
                ),
            )
        if len(password.encode("utf-8")) > MAX_BCRYPT_BYTES:
            errors.append(
                IdentityError(
                    "PasswordTooLong",
                    f"Passwords cannot exceed {MAX_BCRYPT_BYTES} bytes.",
                ),
            )
        if policy.require_digit and not any(c in string.digits for c in password):
            errors.append(
                IdentityError(
                    "PasswordRequiresDigit",
                    "Passwords must have at least one digit ('0'-'9').",
                ),
            )
        if policy.require_lowercase and not any(
            c in string.ascii_lowercase for c in password
        ):
            errors.append(
                IdentityError(
                    "PasswordRequiresLower",
                    "Passwords must have at least one lowercase ('a'-'z').",
                ),
            )
        if policy.require_uppercase and not any(
            c in string.ascii_uppercase for c in password
        ):
            errors.append(
                IdentityError(
                    "PasswordRequiresUpper",
                    "Passwords must have at least one uppercase ('A'-'Z').",
                ),
            )
        if policy.require_non_alphanumeric and all(
            c in string.ascii_letters + string.digits for c in password
        ):
            errors.append(
                IdentityError(
                    "PasswordRequiresNonAlphanumeric",
                    "Passwords must have at least one non alphanumeric character.",
                ),
            )
        return errors

    def validate_strength(self, password: str) -> None:
        """Validate that a password satisfies the policy.

        Raises
        ------
        ValidationFailedError
            Listing every violated rule
        """
        errors = self.check_strength(password)
        if errors:
            raise ValidationFailedError(errors)
