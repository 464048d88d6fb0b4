"""Request dependencies - per-client rate limiting and service wiring."""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from fastapi import HTTPException, Request

from stayplanner.config import settings
from stayplanner.services.plan_orchestrator import PlanOrchestrator, plan_orchestrator

logger = logging.getLogger(__name__)


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """
    Fixed-window request counter per client key.

    Process-wide and in-memory. Expired windows are evicted on every check
    so idle clients do not accumulate.
    """

    def __init__(self, limit: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    def check(self, key: str) -> bool:
        """Count one request for `key`; False once the window is exhausted."""
        now = self._clock()
        self._evict_expired(now)

        window = self._windows.get(key)
        if window is None:
            self._windows[key] = _Window(count=1, reset_at=now + self.window_seconds)
            return True

        if window.count >= self.limit:
            return False

        window.count += 1
        return True

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]

    def __len__(self) -> int:
        return len(self._windows)


rate_limiter = RateLimiter(settings.rate_limit_requests, settings.rate_limit_window_seconds)


def client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


async def enforce_rate_limit(request: Request) -> None:
    key = client_key(request)
    if not rate_limiter.check(key):
        logger.warning(f"Rate limit exceeded for {key}")
        raise HTTPException(status_code=429, detail="Rate limit exceeded")


def get_plan_orchestrator() -> PlanOrchestrator:
    return plan_orchestrator
