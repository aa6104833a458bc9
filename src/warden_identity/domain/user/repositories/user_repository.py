"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from warden_identity.domain.user.aggregates.user import User
from warden_identity.domain.user.value_objects import UserPatch


class UserRepository(ABC):
    """Repository interface for the durable user store.

    Infrastructure failures surface as ``DependencyUnavailableError``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_username(self, username: str) -> User | None:
        """Find a user by their username."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def create(self, user: User) -> None:
        """Insert a new user atomically.

        Raises ``UserAlreadyExistsError`` when the username or email is taken.
        """

    @abstractmethod
    async def patch(self, user_id: UUID, patch: UserPatch) -> User:
        """Apply a partial profile update and return the updated user.

        Raises ``NoFieldsToUpdateError`` when the patch changes nothing and
        ``UserNotFoundError`` when the user does not exist.
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID (no-op if absent)."""
