"""Fetch a source page and reduce it to the text worth summarizing."""

from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from article_engine.common.config import CollectorSettings
from article_engine.common.errors import FetchError

from .http_client import HTTPClient

logger = logging.getLogger(__name__)

# Only headings and paragraphs carry article text; nav, scripts etc. are ignored
CONTENT_SELECTOR = "h1, h2, h3, h4, h5, h6, p"


class PageFetcher:
    """Download a page and extract heading/paragraph text."""

    def __init__(
        self,
        settings: CollectorSettings | None = None,
        client: HTTPClient | None = None,
    ) -> None:
        self.settings = settings or CollectorSettings()
        self._client = client or HTTPClient(self.settings)

    def fetch_text(self, url: str) -> str:
        """Return the page's visible text, truncated to ``max_content_chars``.

        Raises:
            FetchError: The page could not be downloaded.
        """
        try:
            resp = self._client.get(url)
        except requests.RequestException as exc:
            raise FetchError(url, str(exc)) from exc

        text = extract_text(resp.text, self.settings.max_content_chars)
        logger.debug("Extracted %d chars from %s", len(text), url)
        return text


def extract_text(html: str, max_chars: int = 14_000) -> str:
    """Concatenate the text of heading and paragraph elements."""
    soup = BeautifulSoup(html, "html.parser")
    text = "".join(el.get_text() for el in soup.select(CONTENT_SELECTOR))
    return text[:max_chars]
