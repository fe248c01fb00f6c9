# Publisher: Markdown export + WordPress publishing
"""
Publisher module for finished articles.

Writes each article as a Markdown file named after its keyword and,
when enabled, posts it to a WordPress site.
"""

from .models import PublishPlatform, PublishResult
from .platforms import MarkdownExporter, WordPressPublisher

__all__ = [
    "MarkdownExporter",
    "PublishPlatform",
    "PublishResult",
    "WordPressPublisher",
]
