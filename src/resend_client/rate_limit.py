# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Sliding-window rate limiter shared by every facade of a client.

The limiter admits at most ``max_requests`` requests in any window of
``period`` seconds. Requests over budget are delayed, never rejected: the
caller sleeps until the oldest admission leaves the window, plus a small
random jitter so that many callers released at the same instant do not hit
the API in lockstep.

Admission bookkeeping is guarded by an ``asyncio.Lock`` and only an admitted
request is recorded. A caller cancelled while sleeping has consumed nothing,
so cancellation never skews the budget.

Example:
    Throttling concurrent calls::

        limiter = RateLimiter(max_requests=9, period=1.1)

        async def call():
            await limiter.acquire()
            return await session.get(url)

        await asyncio.gather(*(call() for _ in range(50)))
"""

from __future__ import annotations

import asyncio
import random
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from .logger import get_logger

logger = get_logger("rate_limit")


@dataclass(frozen=True)
class Jitter:
    """Random extra delay added to every rate-limit wait.

    Attributes:
        min_seconds: Lower bound of the extra delay.
        max_seconds: Upper bound of the extra delay.
    """

    min_seconds: float = 0.01
    max_seconds: float = 0.05

    def __post_init__(self) -> None:
        if self.min_seconds < 0 or self.max_seconds < self.min_seconds:
            raise ValueError(
                f"Invalid jitter bounds: {self.min_seconds}..{self.max_seconds}"
            )

    def sample(self) -> float:
        """Return a delay uniformly drawn from the configured bounds."""
        if self.max_seconds == 0:
            return 0.0
        return random.uniform(self.min_seconds, self.max_seconds)


NO_JITTER = Jitter(0.0, 0.0)


class RateLimiter:
    """Async sliding-window limiter.

    Attributes:
        max_requests: Burst capacity, requests admitted per window.
        period: Window length in seconds.
        jitter: Extra delay policy applied to each wait.
    """

    def __init__(
        self,
        max_requests: int,
        period: float,
        jitter: Jitter | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the limiter.

        Args:
            max_requests: Requests admitted per window, at least 1.
            period: Window length in seconds, positive.
            jitter: Wait jitter; defaults to 10-50 ms.
            clock: Monotonic clock returning seconds.

        Raises:
            ValueError: If ``max_requests`` or ``period`` is out of range.
        """
        if max_requests < 1:
            raise ValueError(f"max_requests must be at least 1, got {max_requests}")
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self.max_requests = max_requests
        self.period = period
        self.jitter = jitter if jitter is not None else Jitter()
        self._clock = clock
        self._admitted: deque[float] = deque()
        self._lock = asyncio.Lock()

    def _cleanup(self, now: float) -> None:
        """Drop admissions that left the window."""
        while self._admitted and now - self._admitted[0] >= self.period:
            self._admitted.popleft()

    def _wait_time(self, now: float) -> float:
        if len(self._admitted) < self.max_requests:
            return 0.0
        return max(0.0, self._admitted[0] + self.period - now)

    async def acquire(self) -> None:
        """Wait until a request may be sent, then record its admission.

        There is no timeout; wrap the call in ``asyncio.wait_for`` to bound it.
        """
        while True:
            async with self._lock:
                now = self._clock()
                self._cleanup(now)
                if len(self._admitted) < self.max_requests:
                    self._admitted.append(now)
                    return
                wait_time = self._wait_time(now)

            delay = wait_time + self.jitter.sample()
            logger.debug("Rate limit reached, waiting %.3fs", delay)
            await asyncio.sleep(delay)

    async def try_acquire(self) -> bool:
        """Admit a request only if the budget allows it right now."""
        async with self._lock:
            now = self._clock()
            self._cleanup(now)
            if len(self._admitted) < self.max_requests:
                self._admitted.append(now)
                return True
            return False

    async def get_wait_time(self) -> float:
        """Estimate seconds until the next request can be admitted (jitter excluded)."""
        async with self._lock:
            now = self._clock()
            self._cleanup(now)
            return self._wait_time(now)

    def __repr__(self) -> str:
        return f"RateLimiter(max_requests={self.max_requests}, period={self.period})"
