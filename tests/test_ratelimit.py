"""Tests for the rate limiter and cancellation tokens."""

import asyncio
import threading
import time

import pytest

from google_serp import CancelToken, Cancelled, DeadlineExceeded, RateLimiter, default_limiter


class TestCancelToken:
    """Tests for CancelToken."""

    def test_background_is_never_cancelled(self):
        token = CancelToken.background()
        assert not token.cancelled
        assert token.error() is None
        token.raise_if_cancelled()

    def test_cancel(self):
        token = CancelToken()
        token.cancel()
        assert token.cancelled
        with pytest.raises(Cancelled):
            token.raise_if_cancelled()

    def test_expired_deadline(self):
        token = CancelToken(timeout=0)
        assert isinstance(token.error(), DeadlineExceeded)

    def test_deadline_exceeded_is_a_cancellation(self):
        assert issubclass(DeadlineExceeded, Cancelled)

    @pytest.mark.asyncio
    async def test_wait_returns_on_cancel(self):
        token = CancelToken()
        asyncio.get_running_loop().call_later(0.01, token.cancel)
        await asyncio.wait_for(token.wait(), timeout=1)
        assert token.cancelled

    @pytest.mark.asyncio
    async def test_wait_returns_at_deadline(self):
        token = CancelToken(timeout=0.02)
        await asyncio.wait_for(token.wait(), timeout=1)


class TestRateLimiter:
    """Tests for the token bucket."""

    def test_rejects_bad_configuration(self):
        with pytest.raises(ValueError):
            RateLimiter(rate=0)
        with pytest.raises(ValueError):
            RateLimiter(rate=1, burst=0)

    def test_burst_is_free(self):
        limiter = RateLimiter(rate=1, burst=3)
        assert [limiter.reserve() for _ in range(3)] == [0.0, 0.0, 0.0]
        assert limiter.reserve() > 0.9

    def test_infinite_rate_never_waits(self):
        limiter = RateLimiter(rate=float("inf"), burst=1)
        assert all(limiter.reserve() == 0.0 for _ in range(100))

    def test_release_returns_a_token(self):
        limiter = RateLimiter(rate=0.01, burst=1)
        limiter.reserve()
        limiter.reserve()
        limiter.release()
        assert limiter.tokens == pytest.approx(0.0, abs=0.01)

    @pytest.mark.asyncio
    async def test_wait_within_burst_does_not_sleep(self):
        limiter = RateLimiter(rate=0.01, burst=2)
        started = time.monotonic()
        await limiter.wait()
        await limiter.wait()
        assert time.monotonic() - started < 0.5

    @pytest.mark.asyncio
    async def test_wait_sleeps_when_empty(self):
        limiter = RateLimiter(rate=20, burst=1)
        await limiter.wait()
        started = time.monotonic()
        await limiter.wait()
        assert time.monotonic() - started >= 0.03

    @pytest.mark.asyncio
    async def test_already_cancelled_token(self):
        limiter = RateLimiter(rate=1, burst=1)
        token = CancelToken()
        token.cancel()
        with pytest.raises(Cancelled):
            await limiter.wait(token)
        assert limiter.tokens == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_cancel_while_waiting_returns_reservation(self):
        limiter = RateLimiter(rate=0.01, burst=1)
        await limiter.wait()
        token = CancelToken()
        asyncio.get_running_loop().call_later(0.01, token.cancel)
        with pytest.raises(Cancelled):
            await limiter.wait(token)
        assert limiter.tokens == pytest.approx(0.0, abs=0.01)

    @pytest.mark.asyncio
    async def test_deadline_shorter_than_wait(self):
        limiter = RateLimiter(rate=0.01, burst=1)
        await limiter.wait()
        started = time.monotonic()
        with pytest.raises(DeadlineExceeded):
            await limiter.wait(CancelToken(timeout=1))
        assert time.monotonic() - started < 0.5

    @pytest.mark.asyncio
    async def test_task_cancellation_returns_reservation(self):
        limiter = RateLimiter(rate=0.01, burst=1)
        await limiter.wait()
        task = asyncio.ensure_future(limiter.wait())
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert limiter.tokens == pytest.approx(0.0, abs=0.01)

    @pytest.mark.asyncio
    async def test_concurrent_waiters_share_the_quota(self):
        limiter = RateLimiter(rate=50, burst=2)
        started = time.monotonic()
        await asyncio.gather(*(limiter.wait(CancelToken()) for _ in range(5)))
        # Two tokens up front, three more at 50/s.
        assert time.monotonic() - started >= 0.05
        assert limiter.tokens < 1

    @pytest.mark.asyncio
    async def test_cancelling_one_waiter_leaves_others(self):
        limiter = RateLimiter(rate=20, burst=1)
        await limiter.wait()
        cancelled = CancelToken()
        cancelled.cancel()
        results = await asyncio.gather(
            limiter.wait(cancelled),
            limiter.wait(CancelToken()),
            return_exceptions=True,
        )
        assert isinstance(results[0], Cancelled)
        assert results[1] is None


class TestRateLimiterThreads:
    """Tests for one limiter shared across threads."""

    def test_reservations_from_many_threads_are_all_counted(self):
        limiter = RateLimiter(rate=1e-9, burst=1_000_000)
        barrier = threading.Barrier(8)

        def take(count):
            barrier.wait()
            for _ in range(count):
                limiter.reserve()

        threads = [threading.Thread(target=take, args=(20_000,)) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert limiter.tokens == pytest.approx(1_000_000 - 8 * 20_000, abs=1)

    def test_event_loops_on_separate_threads_share_the_quota(self):
        limiter = RateLimiter(rate=1e-9, burst=40)
        errors = []

        def run():
            async def waits():
                for _ in range(10):
                    await limiter.wait(CancelToken())

            try:
                asyncio.run(waits())
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        threads = [threading.Thread(target=run) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert limiter.tokens == pytest.approx(0.0, abs=1e-3)


class TestDefaultLimiter:
    """Tests for the process-wide limiter."""

    def test_is_shared(self):
        assert default_limiter() is default_limiter()

    def test_is_a_rate_limiter(self):
        assert isinstance(default_limiter(), RateLimiter)

    def test_same_instance_from_every_thread(self):
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(default_limiter())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(seen) == 8
        assert all(limiter is default_limiter() for limiter in seen)
