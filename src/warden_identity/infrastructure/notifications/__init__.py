from warden_identity.infrastructure.notifications.base import PasswordResetNotifier
from warden_identity.infrastructure.notifications.redis_publisher import (
    RedisPasswordResetPublisher,
)

__all__ = ["PasswordResetNotifier", "RedisPasswordResetPublisher"]
