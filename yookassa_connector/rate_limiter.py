import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding-window limiter admitting at most ``max_requests`` per ``period``.

    Callers wait in FIFO order on an ``asyncio.Lock``; no request is dropped.
    """

    def __init__(
        self,
        max_requests: int,
        period: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")
        if period <= 0:
            raise ValueError("period must be positive")
        self._max_requests = max_requests
        self._period = period
        self._clock = clock
        self._sleep = sleep
        self._admitted: Deque[float] = deque()
        self._lock = asyncio.Lock()

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def period(self) -> float:
        return self._period

    async def admit(self) -> None:
        async with self._lock:
            while True:
                now = self._clock()
                while self._admitted and now - self._admitted[0] >= self._period:
                    self._admitted.popleft()
                if len(self._admitted) < self._max_requests:
                    self._admitted.append(now)
                    return
                wait = self._period - (now - self._admitted[0])
                logger.debug("Rate limit reached, delaying request by %.3fs", wait)
                await self._sleep(wait)
