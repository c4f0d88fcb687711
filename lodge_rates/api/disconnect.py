"""Run upstream calls only for as long as the caller is still connected."""

import asyncio
from typing import Awaitable, TypeVar

from fastapi import Request
from structlog import get_logger

from lodge_rates.clients import RateProviderCancelledError

logger = get_logger(__name__)

T = TypeVar("T")


async def call_while_connected(
    request: Request,
    awaitable: Awaitable[T],
    poll_interval: float,
) -> T:
    """Await an upstream call, cancelling it if the client disconnects.

    Args:
        request: Incoming request whose connection is watched
        awaitable: The upstream call
        poll_interval: Seconds between disconnect checks

    Returns:
        The awaitable's result

    Raises:
        RateProviderCancelledError: If the client went away first
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.warning("Client disconnected, cancelling upstream call")
                task.cancel()
                await asyncio.wait({task})
                raise RateProviderCancelledError(
                    "Client disconnected before the rates provider answered"
                )
    finally:
        if not task.done():
            task.cancel()
