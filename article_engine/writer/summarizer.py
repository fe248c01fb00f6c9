"""Per-source summarization.

Each web source is fetched, reduced to heading/paragraph text and
condensed by the summary model. A source that fails to fetch or
summarize is dropped; the run continues with the rest.
"""

from __future__ import annotations

from article_engine.collector.page import PageFetcher
from article_engine.common.errors import FetchError
from article_engine.common.logging import setup_logging
from article_engine.common.models import SourceDescriptor, SummaryResult
from article_engine.llm.client import LLMGateway

from .prompts import SUMMARY_SYSTEM_PROMPT, build_summary_prompt

logger = setup_logging(module_name="writer.summarizer")


class Summarizer:
    """Summarizes web pages with the configured summary model.

    Usage:
        summarizer = Summarizer(gateway, fetcher, model="gpt-4o")
        summary = summarizer.summarize("https://example.com/post")
    """

    def __init__(
        self,
        gateway: LLMGateway,
        fetcher: PageFetcher | None = None,
        model: str = "gpt-4o",
        max_tokens: int = 1000,
    ):
        self.gateway = gateway
        self.fetcher = fetcher or PageFetcher()
        self.model = model
        self.max_tokens = max_tokens

    def summarize(self, url: str) -> SummaryResult | None:
        """Fetch and summarize one page.

        Returns:
            SummaryResult with usage and cost, or None if the page could
            not be fetched or the model call failed.
        """
        logger.info("SUMMARIZING %s with %s", url, self.model)
        try:
            text = self.fetcher.fetch_text(url)
        except FetchError as exc:
            logger.info("Error fetching %s (%s). Skipping...", url, exc.reason)
            return None

        if not text.strip():
            logger.info("No article text found at %s. Skipping...", url)
            return None

        try:
            response = self.gateway.complete(
                self.model,
                build_summary_prompt(text),
                system_prompt=SUMMARY_SYSTEM_PROMPT,
                max_tokens=self.max_tokens,
            )
        except Exception:
            logger.warning("Summarization failed for %s", url, exc_info=True)
            return None

        return SummaryResult(
            content=response.content,
            source=url,
            is_local=False,
            usage=response.usage,
            cost=response.cost,
        )

    @staticmethod
    def from_local(source: SourceDescriptor) -> SummaryResult:
        """Pass a local source through unsummarized."""
        return SummaryResult(content=source.content or "", source=None, is_local=True)
