"""Data models for the LLM layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from article_engine.common.models import Content, CostBreakdown, TokenUsage, flatten_content


class ProviderKind(str, Enum):
    """Request-shape families, resolved once from the short model name."""
    CHAT = "chat"  # OpenAI chat completions
    REASONING = "reasoning"  # OpenAI o-series: no system role, no temperature
    MESSAGES = "messages"  # Anthropic messages API


@dataclass(frozen=True)
class ModelRateEntry:
    """Per-token pricing for one model."""
    model_id: str
    input_rate: float
    output_rate: float


@dataclass
class LLMResponse:
    """Normalized result of a single completion call."""
    content: Content
    usage: TokenUsage
    cost: CostBreakdown
    model: str
    provider: ProviderKind = ProviderKind.CHAT

    @property
    def text(self) -> str:
        return flatten_content(self.content)
