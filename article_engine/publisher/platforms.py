"""Output targets for finished articles.

MarkdownExporter writes ``<articles_dir>/<keyword>.md``.
WordPressPublisher posts to the WordPress REST API with basic auth
(an application password); publishing is fire-and-forget.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import httpx

from article_engine.common.config import ARTICLES_DIR, PublishSettings
from article_engine.common.logging import setup_logging

from .models import PublishPlatform, PublishResult

logger = setup_logging(module_name="publisher.platforms")

WP_POSTS_PATH = "/wp-json/wp/v2/posts"


class MarkdownExporter:
    """Writes articles as Markdown files named after the keyword."""

    def __init__(self, articles_dir: Path | str | None = None):
        self.articles_dir = Path(articles_dir or ARTICLES_DIR)

    def export(self, keyword: str, content: str, titles: list[str] | None = None) -> Path:
        """Write the article and return its path.

        Args:
            keyword: Keyword the article was generated for (file name).
            content: Markdown article body.
            titles: Optional title suggestions, written above the article.

        Returns:
            Path of the written file.
        """
        output_path = self.articles_dir / f"{_sanitize_filename(keyword)}.md"
        output_path.parent.mkdir(parents=True, exist_ok=True)

        parts = []
        if titles:
            parts.append("\n".join(titles))
        parts.append(content.strip())

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n\n".join(parts) + "\n")

        logger.info("Article saved to %s", output_path)
        return output_path


class WordPressPublisher:
    """Publishes posts through the WordPress REST API."""

    PLATFORM = PublishPlatform.WORDPRESS

    def __init__(self, settings: PublishSettings | None = None, timeout: float = 30.0):
        self.settings = settings or PublishSettings()
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return self.settings.base_url.rstrip("/") + WP_POSTS_PATH

    def publish(self, title: str, content: str) -> PublishResult:
        """Create a post. Errors are logged and reported in the result, never raised.

        Args:
            title: Post title
            content: Post body (Markdown/HTML as accepted by the site)

        Returns:
            PublishResult with the post link on success
        """
        if not self.settings.base_url or not self.settings.username:
            logger.warning("WordPress publishing skipped: WORDPRESS_URL/USERNAME not set")
            return PublishResult(
                success=False,
                platform=self.PLATFORM,
                error="WordPress credentials not configured",
            )

        payload = {"title": title, "content": content, "status": self.settings.post_status}
        try:
            response = httpx.post(
                self.endpoint,
                json=payload,
                auth=(self.settings.username, self.settings.password),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "WordPress API error: %s %s", e.response.status_code, e.response.text[:200],
            )
            return PublishResult(
                success=False,
                platform=self.PLATFORM,
                error=f"HTTP {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            logger.error("WordPress not reachable at %s: %s", self.endpoint, e)
            return PublishResult(success=False, platform=self.PLATFORM, error=str(e))

        try:
            data = response.json()
        except ValueError:
            logger.error(
                "WordPress returned a non-JSON response from %s: %s",
                self.endpoint, response.text[:200],
            )
            return PublishResult(
                success=False,
                platform=self.PLATFORM,
                error="Invalid JSON response",
            )
        if not isinstance(data, dict):
            logger.error("WordPress returned unexpected JSON from %s: %r", self.endpoint, data)
            return PublishResult(
                success=False,
                platform=self.PLATFORM,
                error=f"Unexpected response type: {type(data).__name__}",
            )

        logger.info("Published '%s' to WordPress (id=%s)", title, data.get("id"))
        return PublishResult(
            success=True,
            platform=self.PLATFORM,
            post_url=data.get("link", ""),
            post_id=str(data.get("id", "")),
            published_at=datetime.now().isoformat(),
        )


def _sanitize_filename(name: str) -> str:
    """Make a keyword safe to use as a file name.

    Args:
        name: Raw keyword

    Returns:
        Name without path separators or control characters
    """
    safe = "".join(c for c in name if c.isprintable() and c not in '/\\:*?"<>|')
    safe = safe.strip().strip(".")
    return safe[:120] or "article"
