"""Data models for the publisher module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PublishPlatform(str, Enum):
    """Remote publishing targets. Markdown export is local and always runs."""
    WORDPRESS = "wordpress"


@dataclass
class PublishResult:
    """Result of publishing a post."""
    success: bool
    platform: PublishPlatform
    post_url: str = ""
    post_id: str = ""
    error: str = ""
    published_at: str = ""
