"""Bounded retry with exponential backoff for async HTTP calls."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, FrozenSet, Optional, TypeVar

import aiohttp

from hijri_calendar import LOGGER

T = TypeVar("T")

TRANSIENT_STATUS_CODES: FrozenSet[int] = frozenset({500, 502, 503, 504})

SleepFunc = Callable[[float], Awaitable[None]]


class TransientHTTPError(Exception):
    """Raised by an attempt when the upstream answered with a retryable status."""

    def __init__(self, status: int, url: str = "") -> None:
        self.status = status
        self.url = url
        super().__init__(f"Service unavailable: {status} for {url}")


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to retry and how long to wait between attempts.

    ``retries`` counts the extra attempts after the first one, so the default
    policy makes at most four calls and sleeps 1, 2 and 4 seconds.
    """

    retries: int = 3
    initial_delay: float = 1.0
    multiplier: float = 2.0

    def delays(self):
        delay = self.initial_delay
        for _ in range(self.retries):
            yield delay
            delay *= self.multiplier


def is_transient(error: BaseException) -> bool:
    return isinstance(
        error, (TransientHTTPError, aiohttp.ClientConnectionError, asyncio.TimeoutError)
    ) or (
        isinstance(error, aiohttp.ClientResponseError)
        and error.status in TRANSIENT_STATUS_CODES
    )


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: Optional[RetryPolicy] = None,
    sleep: SleepFunc = asyncio.sleep,
    description: str = "request",
) -> T:
    """Run ``operation`` until it succeeds or the retry budget is spent.

    Only transient failures are retried. Anything else propagates from the
    attempt that raised it. When the budget is spent the last transient error
    is re-raised.
    """
    policy = policy or RetryPolicy()
    delays = policy.delays()
    attempt = 0
    while True:
        attempt += 1
        try:
            return await operation()
        except Exception as e:
            if not is_transient(e):
                raise
            delay = next(delays, None)
            if delay is None:
                LOGGER.error(f"{description} failed after {attempt} attempts: {e}")
                raise
            LOGGER.warning(
                f"{description} attempt {attempt} failed ({e}); retrying in {delay:.0f}s"
            )
            await sleep(delay)
