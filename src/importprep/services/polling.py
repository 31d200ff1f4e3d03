"""Retry-until-ready polling over an async probe."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from importprep.errors import PollingCancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_INTERVAL_SECONDS = 1.0


class CancellationToken:
    """Signals a waiter that its caller is no longer interested."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise PollingCancelled()


async def wait_for(
    probe: Callable[[], Awaitable[T]],
    accept: Callable[[T], bool],
    *,
    interval: float = DEFAULT_INTERVAL_SECONDS,
    token: CancellationToken | None = None,
) -> T:
    """Call ``probe`` until ``accept`` approves its result.

    A probe failure propagates at once and is never retried. There is no
    attempt limit; pass a ``token`` to stop scheduling further probes.
    """
    attempt = 0
    while True:
        if token is not None:
            token.raise_if_cancelled()

        attempt += 1
        result = await probe()
        if accept(result):
            return result

        logger.debug("Probe result not ready (attempt %d), retrying in %.2fs", attempt, interval)
        await asyncio.sleep(interval)
