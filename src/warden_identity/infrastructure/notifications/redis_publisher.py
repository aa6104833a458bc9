"""Redis list implementation of the password reset channel."""

import logging

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from warden_auth.exceptions import DependencyUnavailableError
from warden_identity.infrastructure.notifications.base import PasswordResetNotifier

logger = logging.getLogger(__name__)


class RedisPasswordResetPublisher(PasswordResetNotifier):
    """Pushes the raw email string onto a Redis list used as a work queue.

    Consumers pop from the other end (``BLPOP``), so messages are handled
    in publish order.
    """

    DEFAULT_QUEUE = "password_reset"

    def __init__(
        self,
        client: aioredis.Redis,
        queue_name: str = DEFAULT_QUEUE,
    ) -> None:
        self._client = client
        self._queue_name = queue_name

    async def publish_password_reset(self, email: str) -> None:
        try:
            await self._client.rpush(self._queue_name, email)
        except RedisError as e:
            msg = f"Failed to publish password reset: {e}"
            raise DependencyUnavailableError(msg) from e
        logger.info("Password reset queued on '%s'", self._queue_name)
