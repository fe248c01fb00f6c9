"""HTTP service surface.

``GET /?keywords=a,b&source_dir=docs&web_search=false&model=claude-3-5-sonnet``
runs the pipeline for each keyword and returns one result (or error)
object per keyword.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from article_engine.common.logging import setup_logging
from article_engine.pipeline.runner import ArticlePipeline

from .schemas import HealthResponse, KeywordResponse

logger = setup_logging(module_name="api")


def parse_keywords(raw: str) -> list[str]:
    return [k.strip() for k in raw.split(",") if k.strip()]


def create_app(pipeline: ArticlePipeline | None = None) -> FastAPI:
    """Build the FastAPI app around a pipeline (created from settings if omitted)."""
    app = FastAPI(title="Article Engine")
    app.state.pipeline = pipeline

    def get_pipeline() -> ArticlePipeline:
        if app.state.pipeline is None:
            app.state.pipeline = ArticlePipeline()
        return app.state.pipeline

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    @app.get("/", response_model=list[KeywordResponse])
    def generate(
        keywords: str = Query("", description="Comma-separated keywords"),
        source_dir: Optional[str] = Query(None, description="Local source directory"),
        web_search: bool = Query(True, description="Include web search results"),
        model: Optional[str] = Query(None, description="Article model override"),
    ) -> list[KeywordResponse]:
        parsed = parse_keywords(keywords)
        if not parsed:
            raise HTTPException(status_code=400, detail="Please provide a keyword")

        logger.info("Request for %d keywords: %s", len(parsed), parsed)
        results = get_pipeline().run_many(
            parsed, source_dir=source_dir, web_search=web_search, model=model,
        )
        return [KeywordResponse.from_result(r) for r in results]

    return app
