"""Tracking of consumed refresh tokens."""

from warden_auth.revocation.base import RevocationTracker
from warden_auth.revocation.memory_tracker import InMemoryRevocationTracker
from warden_auth.revocation.redis_tracker import RedisRevocationTracker

__all__ = [
    "RevocationTracker",
    "InMemoryRevocationTracker",
    "RedisRevocationTracker",
]
