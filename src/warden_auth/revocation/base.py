"""Revocation tracker interface."""

from abc import ABC, abstractmethod
from datetime import timedelta


class RevocationTracker(ABC):
    """Records refresh tokens that have already been exchanged.

    Implementations raise ``DependencyUnavailableError`` when the backing
    cache cannot be reached. "Not consumed" is never an error.
    """

    @abstractmethod
    async def is_consumed(self, token: str) -> bool:
        """Return True if the token was already marked consumed."""

    @abstractmethod
    async def mark_consumed(self, token: str, ttl: timedelta | None = None) -> bool:
        """Mark the token consumed.

        Marking an already consumed token is not an error. The return value
        tells whether this call was the one that inserted it, so callers can
        detect a concurrent exchange of the same token.

        Parameters
        ----------
        token
            The raw refresh token string
        ttl
            How long the entry must be kept; ``None`` keeps it forever.
            Entries may be dropped once the token itself has expired.
        """
