"""Source collection: local documents first, then web search results."""

from __future__ import annotations

import logging

import requests

from article_engine.common.models import SourceDescriptor

from .local import LocalSourceReader
from .search import DuckDuckGoSearch

logger = logging.getLogger(__name__)


class SourceCollector:
    """Produces the ordered source list for one keyword.

    Usage:
        collector = SourceCollector(search, local_reader)
        sources = collector.collect("rust ownership", source_dir="rust")
    """

    def __init__(
        self,
        search: DuckDuckGoSearch | None = None,
        local_reader: LocalSourceReader | None = None,
    ) -> None:
        self.search = search or DuckDuckGoSearch()
        self.local_reader = local_reader or LocalSourceReader()

    def collect(
        self,
        keyword: str,
        source_dir: str | None = None,
        web_search: bool = True,
    ) -> list[SourceDescriptor]:
        """Gather sources for a keyword.

        Args:
            keyword: Topic to search for.
            source_dir: Optional local source directory name.
            web_search: Whether to query the web at all.

        Returns:
            Local sources (if any) followed by web sources.
        """
        sources: list[SourceDescriptor] = []

        if source_dir:
            sources.extend(self.local_reader.read(source_dir))

        if web_search:
            try:
                sources.extend(self.search.search(keyword))
            except requests.RequestException:
                logger.warning("Web search failed for '%s'", keyword, exc_info=True)

        logger.info(
            "Collected %d sources for '%s' (%d local)",
            len(sources), keyword, sum(1 for s in sources if s.is_local),
        )
        return sources
