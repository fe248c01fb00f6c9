"""SEO title suggestions for a keyword."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from article_engine.common.logging import setup_logging
from article_engine.common.models import CostBreakdown, TokenUsage
from article_engine.llm.client import LLMGateway

from .prompts import build_title_prompt

logger = setup_logging(module_name="writer.titles")

_LIST_MARKER = re.compile(r"^\s*(?:\d+[.)]|[-*•])\s*")


@dataclass
class TitleResult:
    """Generated titles with the usage of the call."""
    titles: list[str] = field(default_factory=list)
    usage: TokenUsage = field(default_factory=TokenUsage)
    cost: CostBreakdown = field(default_factory=CostBreakdown)


class TitleGenerator:
    """Generates title candidates. Failures are logged, never raised."""

    def __init__(
        self,
        gateway: LLMGateway,
        model: str = "gpt-4o",
        max_tokens: int = 200,
        count: int = 10,
    ):
        self.gateway = gateway
        self.model = model
        self.max_tokens = max_tokens
        self.count = count

    def generate(self, keyword: str) -> TitleResult | None:
        try:
            response = self.gateway.complete(
                self.model,
                build_title_prompt(keyword, self.count),
                max_tokens=self.max_tokens,
            )
        except Exception:
            logger.warning("Title generation failed for '%s'", keyword, exc_info=True)
            return None

        titles = parse_titles(response.text)
        logger.info("Titles generated for '%s': %d", keyword, len(titles))
        return TitleResult(titles=titles, usage=response.usage, cost=response.cost)


def parse_titles(text: str) -> list[str]:
    """Split a one-per-line response, dropping list markers and quotes."""
    titles = []
    for line in text.splitlines():
        title = _LIST_MARKER.sub("", line).strip().strip('"').strip("'").strip()
        if title:
            titles.append(title)
    return titles
