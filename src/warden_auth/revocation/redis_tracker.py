"""Redis implementation of the revocation tracker."""

import logging
from datetime import timedelta

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from warden_auth.exceptions import DependencyUnavailableError
from warden_auth.revocation.base import RevocationTracker

logger = logging.getLogger(__name__)


class RedisRevocationTracker(RevocationTracker):
    """Keeps one key per consumed token, expiring with the token.

    ``SET NX`` makes the insert atomic, so of two concurrent exchanges of
    the same token exactly one sees ``mark_consumed`` return True.
    """

    DEFAULT_KEY_PREFIX = "auth:refresh:consumed:"

    def __init__(
        self,
        client: aioredis.Redis,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._client = client
        self._key_prefix = key_prefix

    async def is_consumed(self, token: str) -> bool:
        try:
            return bool(await self._client.exists(self._key(token)))
        except RedisError as e:
            msg = f"Revocation cache lookup failed: {e}"
            raise DependencyUnavailableError(msg) from e

    async def mark_consumed(self, token: str, ttl: timedelta | None = None) -> bool:
        # Redis rejects a zero expiry
        expire_seconds = None
        if ttl is not None:
            expire_seconds = max(1, int(ttl.total_seconds()))

        try:
            inserted = await self._client.set(
                self._key(token),
                "1",
                nx=True,
                ex=expire_seconds,
            )
        except RedisError as e:
            msg = f"Revocation cache insert failed: {e}"
            raise DependencyUnavailableError(msg) from e

        if inserted:
            logger.debug("Refresh token marked consumed (ttl=%ss)", expire_seconds)
        return bool(inserted)

    def _key(self, token: str) -> str:
        return f"{self._key_prefix}{token}"
