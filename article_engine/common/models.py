"""Shared Pydantic data models for Article Engine.

These models define the data contracts between the collector, the
LLM layer, the writer and the pipeline. All modules import from here.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Anthropic responses carry a list of content blocks instead of a string
ContentBlocks = list[dict[str, Any]]
Content = Union[str, ContentBlocks]


def flatten_content(content: Content | None) -> str:
    """Render string or content-block content as plain text."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, dict):
            text = block.get("text")
            parts.append(text if isinstance(text, str) else json.dumps(block, ensure_ascii=False))
        else:
            parts.append(str(block))
    return "".join(parts)


# === Sources ===

class SourceDescriptor(BaseModel):
    """One discovered source, local file or web page."""
    title: str
    url: Optional[str] = None
    content: Optional[str] = None
    is_local: bool = False

    @model_validator(mode="after")
    def _check_origin(self) -> SourceDescriptor:
        if self.is_local:
            if self.content is None:
                raise ValueError("local sources must carry content")
            if self.url is not None:
                raise ValueError("local sources cannot have a url")
        elif not self.url:
            raise ValueError("web sources must have a url")
        return self


# === Usage & cost ===

class TokenUsage(BaseModel):
    """Provider-neutral token counts for one LLM call."""
    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)

    @classmethod
    def from_counts(cls, prompt_tokens: int, completion_tokens: int) -> TokenUsage:
        return cls(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        )

    @model_validator(mode="after")
    def _check_total(self) -> TokenUsage:
        if self.total_tokens != self.prompt_tokens + self.completion_tokens:
            raise ValueError("total_tokens must equal prompt_tokens + completion_tokens")
        return self


class CostBreakdown(BaseModel):
    """Cost of one LLM call in USD. Not rounded."""
    input_cost: float = 0.0
    output_cost: float = 0.0
    total_cost: float = 0.0


class RunUsageTotals(BaseModel):
    """Token and cost totals accumulated over one keyword run."""
    input_tokens: int = 0
    output_tokens: int = 0
    cost: float = 0.0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


# === Summaries & analysis ===

class SummaryResult(BaseModel):
    """Condensed representation of a single source."""
    model_config = ConfigDict(frozen=True)

    content: Content
    source: Optional[str] = None
    is_local: bool = False
    usage: Optional[TokenUsage] = None
    cost: Optional[CostBreakdown] = None

    @property
    def text(self) -> str:
        return flatten_content(self.content)


class SourceAnalysis(BaseModel):
    """Theme metadata extracted from the local sources of a run."""
    main_topic: str
    concepts: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    applications: list[str] = Field(default_factory=list)
    is_relevant: bool = True
    suggested_focus: str = ""


class ArticleResult(BaseModel):
    """Output of the synthesis step."""
    content: Content
    usage: TokenUsage
    cost: CostBreakdown
    model: str = ""

    @property
    def text(self) -> str:
        return flatten_content(self.content)


class KeywordRunResult(BaseModel):
    """Outcome of processing one keyword end to end."""
    keyword: str
    success: bool = True
    content: str = ""
    titles: list[str] = Field(default_factory=list)
    source_count: int = 0
    usage: RunUsageTotals = Field(default_factory=RunUsageTotals)
    stage_calls: dict[str, int] = Field(default_factory=dict)
    output_path: Optional[str] = None
    published: bool = False
    error: Optional[str] = None
