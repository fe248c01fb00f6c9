"""Minimum-interval rate limiter for outbound page requests."""

from __future__ import annotations

import threading
import time


class RateLimiter:
    """Spaces consecutive requests at least ``60 / requests_per_minute`` seconds apart.

    Args:
        requests_per_minute: Maximum requests allowed per minute. Zero or
            negative disables waiting.
    """

    def __init__(self, requests_per_minute: int = 30) -> None:
        self._interval = 60.0 / requests_per_minute if requests_per_minute > 0 else 0.0
        self._last_request_time: float | None = None
        self._lock = threading.Lock()

    @property
    def interval(self) -> float:
        return self._interval

    def wait(self) -> None:
        """Block until the next request is allowed."""
        with self._lock:
            now = time.monotonic()
            if self._last_request_time is not None:
                elapsed = now - self._last_request_time
                if elapsed < self._interval:
                    time.sleep(self._interval - elapsed)
            self._last_request_time = time.monotonic()
