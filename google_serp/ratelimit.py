"""Process-wide throttling of outbound search requests."""

import asyncio
import math
import threading
import time
from typing import Optional

from loguru import logger

from .context import CancelToken
from .errors import DeadlineExceeded

DEFAULT_RATE = 1.0
"""Requests per second allowed once the burst is spent."""

DEFAULT_BURST = 3
"""Requests that may be issued back to back."""


class RateLimiter:
    """Token bucket shared by every search issued through it.

    The bucket holds up to ``burst`` tokens and refills at ``rate`` tokens per
    second. Each request takes one token; when none is left the caller sleeps
    until its reservation matures. ``rate=math.inf`` disables throttling.

    One limiter may serve searches running on several threads, each with its
    own event loop. The token count is guarded by a lock that is only held
    for the arithmetic, never across an await.
    """

    def __init__(self, rate: float = DEFAULT_RATE, burst: int = DEFAULT_BURST) -> None:
        if rate <= 0:
            raise ValueError(f"rate must be > 0, got {rate}")
        if burst < 1:
            raise ValueError(f"burst must be >= 1, got {burst}")
        self.rate = rate
        self.burst = burst
        self._tokens = float(burst)
        self._last = time.monotonic()
        self._lock = threading.Lock()

    @property
    def tokens(self) -> float:
        """Tokens currently available; negative while reservations are pending."""
        with self._lock:
            self._advance(time.monotonic())
            return self._tokens

    def _advance(self, now: float) -> None:
        # Caller holds self._lock.
        elapsed = max(now - self._last, 0.0)
        self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
        self._last = max(now, self._last)

    def reserve(self) -> float:
        """Take one token and return how long to wait before using it."""
        if math.isinf(self.rate):
            return 0.0
        with self._lock:
            self._advance(time.monotonic())
            self._tokens -= 1
            tokens = self._tokens
        if tokens >= 0:
            return 0.0
        return -tokens / self.rate

    def release(self) -> None:
        """Give back a reservation that will not be used."""
        if math.isinf(self.rate):
            return
        with self._lock:
            self._advance(time.monotonic())
            self._tokens = min(float(self.burst), self._tokens + 1)

    async def wait(self, token: Optional[CancelToken] = None) -> None:
        """Wait for a request slot.

        Raises:
            Cancelled: If ``token`` is already cancelled or fires while waiting.
            DeadlineExceeded: If the slot would only open after the token's deadline.
        """
        if token is not None:
            token.raise_if_cancelled()

        delay = self.reserve()
        if delay <= 0:
            return

        if token is not None and token.deadline is not None:
            if time.monotonic() + delay > token.deadline:
                self.release()
                raise DeadlineExceeded("rate limit wait would exceed deadline")

        logger.debug("Rate limited, waiting {:.2f}s for a request slot", delay)

        if token is None:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.release()
                raise
            return

        waiter = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait({waiter}, timeout=delay)
        except asyncio.CancelledError:
            self.release()
            raise
        finally:
            waiter.cancel()

        if done:
            self.release()
            raise token.error() or DeadlineExceeded()


_default_limiter = RateLimiter()


def default_limiter() -> RateLimiter:
    """Return the limiter shared by all searches that do not supply one."""
    return _default_limiter
