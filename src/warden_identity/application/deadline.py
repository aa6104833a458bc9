"""Deadline handling for service operations."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from warden_auth.exceptions import OperationTimeoutError, operation

T = TypeVar("T")


async def run_operation(op: str, awaitable: Awaitable[T], timeout: float | None) -> T:
    """Await ``awaitable`` under ``timeout`` seconds, tagging errors with ``op``.

    On expiry the pending work is cancelled, which propagates into every
    store, cache and channel call still in flight.
    """
    with operation(op):
        try:
            return await asyncio.wait_for(awaitable, timeout)
        except asyncio.TimeoutError as e:
            msg = f"Timed out after {timeout}s"
            raise OperationTimeoutError(msg) from e
