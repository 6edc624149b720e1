"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from housebroker.domain.shared.time import ensure_tz_aware, utc_now
from housebroker_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds profile and activation state. Password credentials and role
    assignments are stored separately and reached through their own
    repositories.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        first_name: str = "",
        last_name: str = "",
        phone_number: str | None = None,
        bio: str | None = None,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._first_name = first_name
        self._last_name = last_name
        self._phone_number = phone_number
        self._bio = bio
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def phone_number(self) -> str | None:
        return self._phone_number

    @property
    def bio(self) -> str | None:
        return self._bio

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def display_name(self) -> str:
        """Full name, falling back to the email address when no name is set."""
        full_name = f"{self._first_name} {self._last_name}".strip()
        return full_name or self.email

    def deactivate(self) -> None:
        self._is_active = False
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._is_active = True
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        first_name: str = "",
        last_name: str = "",
        phone_number: str | None = None,
        bio: str | None = None,
    ) -> "User":
        return cls(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            bio=bio,
            is_active=True,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone_number: str | None,
        bio: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            bio=bio,
            is_active=is_active,
            created_at=ensure_tz_aware(created_at),
            updated_at=ensure_tz_aware(updated_at),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
