"""HTTP client for search pages and source articles."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests
from fake_useragent import UserAgent

from article_engine.common.config import CollectorSettings

from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class HTTPClient:
    """requests wrapper with rate limiting and User-Agent rotation.

    A single attempt is made per request unless ``max_retries`` is raised
    in the collector settings; 4xx responses other than 429 never retry.
    """

    BACKOFF_BASE = 2.0

    def __init__(self, settings: CollectorSettings | None = None) -> None:
        self.settings = settings or CollectorSettings()
        self._rate_limiter = RateLimiter(self.settings.rate_limit_rpm)
        self._session = requests.Session()
        self._ua = UserAgent(fallback="Mozilla/5.0")

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a GET request.

        Args:
            url: Target URL.
            params: Query parameters.
            headers: Extra headers (merged with defaults).

        Returns:
            requests.Response object.

        Raises:
            requests.RequestException: After all attempts are exhausted.
        """
        merged_headers = {"User-Agent": self._ua.random}
        if headers:
            merged_headers.update(headers)

        attempts = max(self.settings.max_retries, 1)
        last_exc: Exception | None = None
        for attempt in range(attempts):
            self._rate_limiter.wait()
            try:
                resp = self._session.get(
                    url,
                    params=params,
                    headers=merged_headers,
                    timeout=self.settings.request_timeout,
                )
                resp.raise_for_status()
                return resp

            except requests.RequestException as exc:
                last_exc = exc

                if (
                    isinstance(exc, requests.HTTPError)
                    and exc.response is not None
                    and 400 <= exc.response.status_code < 500
                    and exc.response.status_code != 429
                ):
                    logger.warning("Request failed (4xx, no retry): %s", exc)
                    raise

                if attempt + 1 < attempts:
                    wait_time = self.BACKOFF_BASE ** attempt
                    logger.warning(
                        "Request failed (attempt %d/%d): %s, retrying in %.1fs",
                        attempt + 1, attempts, exc, wait_time,
                    )
                    time.sleep(wait_time)

        raise last_exc  # type: ignore[misc]

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
