"""User aggregate."""

from __future__ import annotations

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from warden_auth.exceptions import InvalidInputError
from warden_auth.time import utc_now
from warden_identity.domain.user.value_objects import UserPatch, UserRole


class User:
    """
    User aggregate root.

    Holds identity, credentials and profile fields. The password hash is
    an opaque bcrypt byte string; the plaintext never reaches this object.
    """

    def __init__(  # noqa: PLR0913
        self,
        username: str,
        email: str,
        password_hash: bytes,
        role: Union[str, UserRole] = UserRole.USER,
        id: UUID | None = None,
        name: str = "",
        surname: str = "",
        phone_number: str = "",
        is_blocked: bool = False,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._username = username
        self._email = email
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._name = name
        self._surname = surname
        self._phone_number = phone_number
        self._is_blocked = is_blocked
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> bytes:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def name(self) -> str:
        return self._name

    @property
    def surname(self) -> str:
        return self._surname

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @property
    def is_blocked(self) -> bool:
        return self._is_blocked

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply_patch(self, patch: UserPatch) -> bool:
        """Apply profile changes in place; returns False if nothing changed."""
        changed = False
        for field_name, value in patch.changes().items():
            if getattr(self, f"_{field_name}") != value:
                setattr(self, f"_{field_name}", value)
                changed = True
        if changed:
            self._updated_at = utc_now()
        return changed

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        password_hash: bytes,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a new user, validating the registration fields.

        Raises
        ------
        InvalidInputError
            If a field is empty or the email has no ``@``
        """
        if not username or not username.strip():
            msg = "Username cannot be empty"
            raise InvalidInputError(msg)
        if not email or "@" not in email:
            msg = "Email address is invalid"
            raise InvalidInputError(msg)
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise InvalidInputError(msg)
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
        )

    @classmethod
    def reconstitute(cls, **fields) -> User:
        """Rebuild a user from persisted state without validation."""
        return cls(**fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
