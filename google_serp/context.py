"""Cancellation tokens threaded through a search call."""

import asyncio
import time
from typing import Optional

from .errors import Cancelled, DeadlineExceeded


class CancelToken:
    """Signals that a search should stop.

    A token is cancelled explicitly with :meth:`cancel`, or implicitly once
    its optional ``timeout`` (seconds from construction) has elapsed.

    Example::

        token = CancelToken(timeout=5)
        results = await search("python", token=token)
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._cancelled = False
        self._event: Optional[asyncio.Event] = None

    @classmethod
    def background(cls) -> "CancelToken":
        """A token that is never cancelled."""
        return cls()

    @property
    def deadline(self) -> Optional[float]:
        """Deadline on the ``time.monotonic()`` clock, if any."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self.error() is not None

    def cancel(self) -> None:
        self._cancelled = True
        if self._event is not None:
            self._event.set()

    def error(self) -> Optional[Cancelled]:
        """Return the exception describing why the token fired, or None."""
        if self._cancelled:
            return Cancelled()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded()
        return None

    def raise_if_cancelled(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    async def wait(self) -> None:
        """Block until the token is cancelled or its deadline passes."""
        if self.cancelled:
            return
        if self._event is None:
            self._event = asyncio.Event()
        if self._deadline is None:
            await self._event.wait()
            return
        remaining = self._deadline - time.monotonic()
        try:
            await asyncio.wait_for(self._event.wait(), timeout=max(remaining, 0))
        except asyncio.TimeoutError:
            pass
