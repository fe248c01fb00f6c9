from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from article_engine.common.models import KeywordRunResult


class HealthResponse(BaseModel):
    status: str = "ok"


class UsageResponse(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    cost: float = 0.0


class KeywordResponse(BaseModel):
    keyword: str
    success: bool
    content: Optional[str] = None
    titles: list[str] = []
    output_path: Optional[str] = None
    published: bool = False
    usage: Optional[UsageResponse] = None
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: KeywordRunResult) -> KeywordResponse:
        if not result.success:
            return cls(keyword=result.keyword, success=False, error=result.error)
        return cls(
            keyword=result.keyword,
            success=True,
            content=result.content,
            titles=result.titles,
            output_path=result.output_path,
            published=result.published,
            usage=UsageResponse(
                input_tokens=result.usage.input_tokens,
                output_tokens=result.usage.output_tokens,
                total_tokens=result.usage.total_tokens,
                cost=result.usage.cost,
            ),
        )
