"""
Deadline guard around a single model call.

Coroutine calls are cancelled when the deadline passes. Calls running in a
worker thread cannot be interrupted; they are abandoned and whatever they
eventually return is dropped with the cancelled task.
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

from itinerary.generation.errors import ModelTimeoutError


T = TypeVar("T")


async def run_with_timeout(
    call: Callable[[], Awaitable[T]],
    timeout_seconds: float,
) -> T:
    """
    Await ``call()`` for at most ``timeout_seconds``.

    Failures raised by the call itself propagate unchanged, including a
    ``TimeoutError`` of its own.

    Raises:
        ModelTimeoutError: If the deadline passes first
    """
    task = asyncio.ensure_future(call())
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_seconds)
    except asyncio.CancelledError:
        task.cancel()
        raise

    if not done:
        task.cancel()
        raise ModelTimeoutError(f"Request timeout after {timeout_seconds:g}s")
    return task.result()
