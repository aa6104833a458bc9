"""Unit tests for UserProfileService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from warden_auth import ErrorKind, NoFieldsToUpdateError, UserNotFoundError
from warden_identity.application.services import UserProfileService
from warden_identity.domain.user import UserPatch, UserRepository


class TestUserProfileService:
    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock(spec=UserRepository)
        self.service = UserProfileService(user_repository=self.user_repo)

    @pytest.mark.asyncio
    async def test_get_user(self, test_user):
        self.user_repo.find_by_id.return_value = test_user

        user = await self.service.get_user(test_user.id)

        assert user is test_user

    @pytest.mark.asyncio
    async def test_get_missing_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await self.service.get_user(uuid4())

        assert exc_info.value.ops == ["user.get_user"]

    @pytest.mark.asyncio
    async def test_patch_user_delegates_to_store(self, test_user):
        patch = UserPatch(name="Alice")
        self.user_repo.patch.return_value = test_user

        user = await self.service.patch_user(test_user.id, patch)

        assert user is test_user
        self.user_repo.patch.assert_awaited_once_with(test_user.id, patch)

    @pytest.mark.asyncio
    async def test_patch_user_without_changes(self):
        self.user_repo.patch.side_effect = NoFieldsToUpdateError

        with pytest.raises(NoFieldsToUpdateError) as exc_info:
            await self.service.patch_user(uuid4(), UserPatch())

        assert exc_info.value.kind == ErrorKind.NO_FIELDS_TO_UPDATE
        assert exc_info.value.ops == ["user.patch_user"]

    @pytest.mark.asyncio
    async def test_delete_user(self):
        user_id = uuid4()

        await self.service.delete_user(user_id)

        self.user_repo.delete.assert_awaited_once_with(user_id)
