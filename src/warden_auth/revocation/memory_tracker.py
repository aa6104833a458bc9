"""In-process revocation tracker for development and tests."""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta

from warden_auth.revocation.base import RevocationTracker
from warden_auth.time import utc_now


class InMemoryRevocationTracker(RevocationTracker):
    """Dict-backed tracker; entries are pruned lazily once their TTL passes.

    Only safe within one process. Each instance owns its own state.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._entries: dict[str, datetime | None] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def is_consumed(self, token: str) -> bool:
        async with self._lock:
            return self._is_live(token)

    async def mark_consumed(self, token: str, ttl: timedelta | None = None) -> bool:
        async with self._lock:
            if self._is_live(token):
                return False
            self._entries[token] = self._clock() + ttl if ttl is not None else None
            return True

    def __len__(self) -> int:
        return sum(1 for token in list(self._entries) if self._is_live(token))

    def _is_live(self, token: str) -> bool:
        if token not in self._entries:
            return False
        expires_at = self._entries[token]
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[token]
            return False
        return True
