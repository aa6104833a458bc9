"""User profile schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from warden_api.schemas.common import CamelModel
from warden_identity.domain.user import User, UserPatch


class UserResponse(CamelModel):
    """Response schema for user data. Never includes the password hash."""

    id: UUID
    username: str
    email: str
    role: str
    name: str
    surname: str
    phone_number: str
    is_blocked: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role.value,
            name=user.name,
            surname=user.surname,
            phone_number=user.phone_number,
            is_blocked=user.is_blocked,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserPatchRequest(CamelModel):
    """Profile fields to change; omitted or empty fields are kept."""

    name: str | None = None
    surname: str | None = None
    username: str | None = None
    phone_number: str | None = None

    def to_patch(self) -> UserPatch:
        return UserPatch(
            name=self.name,
            surname=self.surname,
            username=self.username,
            phone_number=self.phone_number,
        )
