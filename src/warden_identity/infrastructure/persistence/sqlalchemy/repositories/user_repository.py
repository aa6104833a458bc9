"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import Select, exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from warden_auth.exceptions import DependencyUnavailableError
from warden_auth.time import ensure_tz_aware
from warden_identity.domain.user import (
    NoFieldsToUpdateError,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserPatch,
    UserRepository,
)
from warden_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    The repository only flushes; committing or rolling back the session is
    the caller's unit of work.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        model = await self._scalar_one_or_none(stmt)
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(UserModel.email == email))
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise DependencyUnavailableError(f"User store query failed: {e}") from e
        return bool(result.scalar())

    async def create(self, user: User) -> None:
        self._session.add(self._map_to_model(user))
        await self._flush(user.username)
        logger.info("Created user: %s (username: %s)", user.id, user.username)

    async def patch(self, user_id: UUID, patch: UserPatch) -> User:
        if patch.is_empty():
            raise NoFieldsToUpdateError

        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(f"User not found: {user_id}")

        user = self._map_to_domain(model)
        if not user.apply_patch(patch):
            raise NoFieldsToUpdateError

        self._update_model(model, user)
        await self._flush(user.username)
        logger.debug("Patched user %s: %s", user_id, sorted(patch.changes()))
        return user

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return

        try:
            await self._session.delete(model)
            await self._session.flush()
        except (SQLAlchemyError, OSError) as e:
            raise DependencyUnavailableError(f"User store delete failed: {e}") from e
        logger.info("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        return await self._scalar_one_or_none(stmt)

    async def _scalar_one_or_none(self, stmt: Select[Any]) -> UserModel | None:
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise DependencyUnavailableError(f"User store query failed: {e}") from e
        return result.scalar_one_or_none()

    async def _flush(self, username: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            # username and email carry the only unique constraints
            raise UserAlreadyExistsError(
                f"User already exists: {username}",
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise DependencyUnavailableError(f"User store write failed: {e}") from e

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            role=model.role,
            name=model.name,
            surname=model.surname,
            phone_number=model.phone_number,
            is_blocked=model.is_blocked,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role.value,
            password_hash=user.password_hash,
            name=user.name,
            surname=user.surname,
            phone_number=user.phone_number,
            is_blocked=user.is_blocked,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.username = user.username
        model.name = user.name
        model.surname = user.surname
        model.phone_number = user.phone_number
        model.updated_at = user.updated_at
