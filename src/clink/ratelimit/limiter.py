"""
Token bucket rate limiter.

The bucket refills at ``limit`` tokens per second up to ``burst`` tokens.
Admission is a reservation: the token is taken under the lock (the count may
go negative) and the caller then sleeps off its share of the debt outside
the lock. Concurrent callers therefore queue in reservation order and the
aggregate rate never exceeds ``limit``.
"""

import asyncio
import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Admission gate bounding the rate of events.

    Safe to share between threads and between asyncio tasks: the same
    instance serves both ``wait`` and ``wait_async``.
    """

    def __init__(
        self,
        limit: float,
        burst: int = 1,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the limiter.

        Args:
            limit: Events per second
            burst: Maximum tokens held at once
            clock: Monotonic time source in seconds
        """
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        if burst < 1:
            raise ValueError(f"burst must be at least 1, got {burst}")
        self._limit = float(limit)
        self._burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()
        self._lock = threading.Lock()

    @classmethod
    def per_minute(cls, events: float, burst: int = 1) -> "RateLimiter":
        """Create a limiter admitting ``events`` per minute."""
        return cls(events / 60.0, burst=burst)

    @property
    def limit(self) -> float:
        """Refill rate in events per second."""
        return self._limit

    @property
    def burst(self) -> int:
        return self._burst

    @property
    def tokens(self) -> float:
        """Tokens available now; negative while callers are queued."""
        with self._lock:
            self._refill(self._clock())
            return self._tokens

    def _refill(self, now: float) -> None:
        elapsed = max(0.0, now - self._last)
        self._tokens = min(float(self._burst), self._tokens + elapsed * self._limit)
        self._last = now

    def reserve(self) -> float:
        """
        Take one token, possibly on credit.

        Returns:
            Seconds the caller must wait before acting (0.0 when a token was free)
        """
        with self._lock:
            self._refill(self._clock())
            self._tokens -= 1.0
            if self._tokens >= 0:
                return 0.0
            return -self._tokens / self._limit

    def allow(self) -> bool:
        """Take one token only if it is available right now."""
        with self._lock:
            self._refill(self._clock())
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False

    def wait(self) -> None:
        """Block the calling thread until one event is admitted."""
        delay = self.reserve()
        if delay > 0:
            logger.debug(f"Rate limit reached, waiting {delay:.2f}s")
            time.sleep(delay)

    async def wait_async(self) -> None:
        """Suspend the calling task until one event is admitted."""
        delay = self.reserve()
        if delay > 0:
            logger.debug(f"Rate limit reached, waiting {delay:.2f}s")
            await asyncio.sleep(delay)
