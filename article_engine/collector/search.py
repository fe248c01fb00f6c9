"""Web search via the DuckDuckGo HTML endpoint.

Returns the top organic results for a keyword as web SourceDescriptors.
Result links point at a DuckDuckGo redirect; the target URL is carried
in its ``uddg`` query parameter.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup

from article_engine.common.config import CollectorSettings
from article_engine.common.models import SourceDescriptor

from .http_client import HTTPClient

logger = logging.getLogger(__name__)

_DDG_HTML_URL = "https://html.duckduckgo.com/html/"


class DuckDuckGoSearch:
    """Scrape DuckDuckGo's HTML results page.

    Usage:
        search = DuckDuckGoSearch()
        sources = search.search("rust ownership")
    """

    def __init__(
        self,
        settings: CollectorSettings | None = None,
        client: HTTPClient | None = None,
    ) -> None:
        self.settings = settings or CollectorSettings()
        self._client = client or HTTPClient(self.settings)

    def search(self, keyword: str, max_results: int | None = None) -> list[SourceDescriptor]:
        """Return up to ``max_results`` web sources for a keyword."""
        limit = max_results or self.settings.max_search_results
        resp = self._client.get(_DDG_HTML_URL, params={"q": keyword})
        results = self.parse_results(resp.text, limit)
        logger.info("DuckDuckGo: %d results for '%s'", len(results), keyword)
        return results

    @staticmethod
    def parse_results(html: str, limit: int = 5) -> list[SourceDescriptor]:
        """Extract ``{title, url}`` pairs from a results page."""
        soup = BeautifulSoup(html, "html.parser")
        results: list[SourceDescriptor] = []

        for anchor in soup.select(".result__a"):
            if len(results) >= limit:
                break
            url = _target_url(anchor.get("href", ""))
            if not url:
                continue
            results.append(SourceDescriptor(
                title=anchor.get_text(strip=True),
                url=url,
            ))

        return results


def _target_url(href: str) -> str | None:
    """Unwrap a DuckDuckGo redirect link to the destination URL."""
    if not href:
        return None
    if href.startswith("//"):
        href = "https:" + href
    parsed = urlparse(href)
    target = parse_qs(parsed.query).get("uddg")
    if target:
        return target[0]
    if parsed.scheme in ("http", "https") and "duckduckgo.com" not in parsed.netloc:
        return href
    return None
