"""Profile lookup, partial update and deletion of users."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from warden_auth import UserNotFoundError
from warden_identity.application.deadline import run_operation

if TYPE_CHECKING:
    from warden_identity.domain.user import User, UserPatch, UserRepository

logger = logging.getLogger(__name__)


class UserProfileService:
    """Application service for the authenticated user's own profile."""

    def __init__(
        self,
        user_repository: UserRepository,
        default_timeout: float | None = None,
    ):
        self._user_repo = user_repository
        self._default_timeout = default_timeout

    def _deadline(self, timeout: float | None) -> float | None:
        return timeout if timeout is not None else self._default_timeout

    async def get_user(self, user_id: UUID, *, timeout: float | None = None) -> User:
        return await run_operation(
            "user.get_user",
            self._get_user(user_id),
            self._deadline(timeout),
        )

    async def _get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            msg = f"User not found: {user_id}"
            raise UserNotFoundError(msg)
        return user

    async def patch_user(
        self,
        user_id: UUID,
        patch: UserPatch,
        *,
        timeout: float | None = None,
    ) -> User:
        """Change profile fields.

        Raises
        ------
        NoFieldsToUpdateError
            If the patch is empty or matches the stored values
        UserAlreadyExistsError
            If the new username is taken
        """
        return await run_operation(
            "user.patch_user",
            self._user_repo.patch(user_id, patch),
            self._deadline(timeout),
        )

    async def delete_user(self, user_id: UUID, *, timeout: float | None = None) -> None:
        await run_operation(
            "user.delete_user",
            self._user_repo.delete(user_id),
            self._deadline(timeout),
        )
        logger.info("User deleted: %s", user_id)
