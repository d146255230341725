"""Sliding-window rate limiter matching Riot API's documented limits."""
import asyncio
import time
from collections import deque
from typing import Deque, Dict, Optional

from core.logging.logger import get_logger

logger = get_logger(__name__, service="riot-api")

_SHORT_WINDOW_S = 1.0
_LONG_WINDOW_S = 120.0


class RateLimiter:
    """
    Two windows checked together:
      - short : N requests per 1 second
      - long  : N requests per 120 seconds (Riot's app-rate window)
    """

    def __init__(self, requests_per_1_sec: int = 18, requests_per_2_min: int = 90):
        self.requests_per_1_sec = requests_per_1_sec
        self.requests_per_2_min = requests_per_2_min
        self._short: Deque[float] = deque()
        self._long: Deque[float] = deque()
        self._lock = asyncio.Lock()

    def _evict(self, now: float) -> None:
        while self._short and now - self._short[0] > _SHORT_WINDOW_S:
            self._short.popleft()
        while self._long and now - self._long[0] > _LONG_WINDOW_S:
            self._long.popleft()

    def _wait_time(self, now: float) -> float:
        wait = 0.0
        if len(self._short) >= self.requests_per_1_sec:
            wait = max(wait, _SHORT_WINDOW_S - (now - self._short[0]) + 0.01)
        if len(self._long) >= self.requests_per_2_min:
            wait = max(wait, _LONG_WINDOW_S - (now - self._long[0]) + 0.01)
        return wait

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = time.monotonic()
                self._evict(now)
                wait = self._wait_time(now)
                if wait <= 0:
                    self._short.append(now)
                    self._long.append(now)
                    return
                logger.debug(lambda: f"rate limit - waiting {wait:.2f}s")
                await asyncio.sleep(max(wait, 0.05))

    async def reset(self) -> None:
        async with self._lock:
            self._short.clear()
            self._long.clear()


class EndpointRateLimiter:
    """Per-endpoint limiters ("match", "league") with a shared default."""

    def __init__(self, default: Optional[RateLimiter] = None):
        self._default = default or RateLimiter()
        self._limiters: Dict[str, RateLimiter] = {}

    def add_endpoint_limiter(self, endpoint: str, requests_per_1_sec: int, requests_per_2_min: int) -> None:
        self._limiters[endpoint] = RateLimiter(requests_per_1_sec, requests_per_2_min)

    def _for(self, endpoint: str) -> RateLimiter:
        return self._limiters.get(endpoint, self._default)

    async def acquire(self, endpoint: str = "default") -> None:
        await self._for(endpoint).acquire()

    async def reset_endpoint(self, endpoint: str = "default") -> None:
        await self._for(endpoint).reset()
