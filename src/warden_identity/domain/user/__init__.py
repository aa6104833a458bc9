"""User domain: aggregate, value objects and repository port."""

from warden_auth.exceptions import (
    EmailNotFoundError,
    NoFieldsToUpdateError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from warden_identity.domain.user.aggregates import User
from warden_identity.domain.user.repositories import UserRepository
from warden_identity.domain.user.value_objects import UserPatch, UserRole

__all__ = [
    "User",
    "UserPatch",
    "UserRepository",
    "UserRole",
    "EmailNotFoundError",
    "NoFieldsToUpdateError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
