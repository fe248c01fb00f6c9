# Collector: web search, page fetching and local source files
"""
Source collection for the article pipeline.

Searches DuckDuckGo for a keyword, reads local source directories and
reduces fetched pages to heading/paragraph text for summarization.
"""

from .collector import SourceCollector
from .http_client import HTTPClient
from .local import LocalSourceReader
from .page import PageFetcher, extract_text
from .search import DuckDuckGoSearch

__all__ = [
    "DuckDuckGoSearch",
    "HTTPClient",
    "LocalSourceReader",
    "PageFetcher",
    "SourceCollector",
    "extract_text",
]
