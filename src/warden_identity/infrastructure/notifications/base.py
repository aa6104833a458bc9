"""Notification channel interface."""

from abc import ABC, abstractmethod


class PasswordResetNotifier(ABC):
    """Fire-and-forget channel that triggers password reset emails.

    The core's responsibility ends once the message is enqueued; delivery
    is handled by a separate consumer.
    """

    @abstractmethod
    async def publish_password_reset(self, email: str) -> None:
        """Enqueue a reset request for ``email``.

        Raises ``DependencyUnavailableError`` if the message cannot be enqueued.
        """
