"""Rate limit tracking based on GitHub's X-RateLimit-* response headers."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

logger = logging.getLogger(__name__)


class RateLimitMonitor:
    """Pause requests while the remaining API budget is exhausted."""

    def __init__(self, threshold: int = 5) -> None:
        self.threshold = threshold
        self._remaining: int | None = None
        self._reset_at: float | None = None

    def update(self, response: httpx.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        reset = response.headers.get("X-RateLimit-Reset")
        if remaining is not None:
            self._remaining = int(remaining)
        if reset is not None:
            self._reset_at = float(reset)

    async def wait_if_needed(self) -> None:
        if self._remaining is None or self._reset_at is None:
            return
        if self._remaining > self.threshold:
            return
        delay = max(0.0, self._reset_at - time.time()) + 1
        logger.warning(
            "Rate limit nearly exhausted (%d left), sleeping %.0fs", self._remaining, delay
        )
        await asyncio.sleep(delay)
        self._remaining = None
