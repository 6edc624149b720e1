"""JWT token service.

Provides session token creation and verification for authentication.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable
from uuid import UUID

import jwt

from housebroker.domain.shared.time import utc_now
from housebroker_identity.domain.user.value_objects import UserRole
from housebroker_identity.exceptions import (
    InvalidTokenError,
    SigningKeyMisconfiguredError,
)
from housebroker_identity.schemas import TokenPayload

MIN_SECRET_BYTES = 32
REQUIRED_CLAIMS = ["sub", "email", "name", "role", "iat", "exp"]


@dataclass(frozen=True)
class JWTConfig:
    """Signing configuration handed to ``JWTService``.

    Raises
    ------
    SigningKeyMisconfiguredError
        If the secret is empty or shorter than 32 bytes (UTF-8).
    """

    secret_key: str
    expire_hours: int = 12
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        if not self.secret_key:
            msg = "JWT secret key cannot be empty"
            raise SigningKeyMisconfiguredError(msg)
        if len(self.secret_key.encode("utf-8")) < MIN_SECRET_BYTES:
            msg = f"JWT secret key must be at least {MIN_SECRET_BYTES} bytes"
            raise SigningKeyMisconfiguredError(msg)
        if self.expire_hours <= 0:
            msg = "JWT expiry must be a positive number of hours"
            raise ValueError(msg)

    @property
    def expires_delta(self) -> timedelta:
        return timedelta(hours=self.expire_hours)


class JWTService:
    """Service for session token creation and verification.

    Tokens carry ``sub``, ``email``, ``name`` and a single ``role`` claim
    and expire a fixed time after issuance. Expiry is checked with zero
    tolerance: a token is rejected from the second its ``exp`` is reached.

    Issuer and audience are neither set nor validated.

    Examples
    --------
    >>> service = JWTService(JWTConfig(secret_key="x" * 32))
    >>> token = service.create_access_token(user_id, "a@b.com", "Ann", UserRole.BROKER)
    >>> payload = service.verify_token(token)
    >>> print(payload.role)
    """

    def __init__(
        self,
        config: JWTConfig,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        config
            Signing secret, algorithm and token lifetime.
        clock
            Returns the current UTC time; used for ``iat``/``exp`` and for
            the expiry check.
        """
        self._config = config
        self._clock = clock

    @property
    def expires_in_seconds(self) -> int:
        return int(self._config.expires_delta.total_seconds())

    def _now(self) -> datetime:
        # Claims are whole seconds
        return self._clock().astimezone(timezone.utc).replace(microsecond=0)

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        name: str,
        role: UserRole,
    ) -> str:
        """Create a signed session token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        name
            Display name
        role
            The single role claim

        Returns
        -------
        The encoded JWT token string
        """
        now = self._now()
        payload = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "role": role.value,
            "iat": now,
            "exp": now + self._config.expires_delta,
        }
        return jwt.encode(
            payload,
            self._config.secret_key,
            algorithm=self._config.algorithm,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a session token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                options={
                    "require": REQUIRED_CLAIMS,
                    # Expiry is checked below against the injected clock
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_aud": False,
                    "verify_iss": False,
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
            user_id = UUID(payload["sub"])
            role = UserRole(payload["role"])
            email = str(payload["email"])
            name = str(payload["name"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        if self._now() >= expires_at:
            raise InvalidTokenError("Token has expired")

        return TokenPayload(
            user_id=user_id,
            email=email,
            name=name,
            role=role,
            issued_at=issued_at,
            expires_at=expires_at,
        )
