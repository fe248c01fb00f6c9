"""Article synthesis: one long-form article from all source summaries.

Local (primary) sources dominate the prompt when present; web summaries
are supporting material. A failed or empty synthesis is fatal for the
keyword: errors propagate to the caller, with no retry and no partial
article.
"""

from __future__ import annotations

from article_engine.common.logging import setup_logging
from article_engine.common.models import ArticleResult, SummaryResult
from article_engine.llm.client import LLMGateway
from article_engine.llm.resolver import select_provider

from .prompts import MIN_WORD_COUNT, PromptConfig, build_synthesis_prompt, format_web_source
from .relevance import SourceRelevanceAnalyzer

logger = setup_logging(module_name="writer.synthesizer")


class ArticleSynthesizer:
    """Builds the synthesis prompt and runs the article model.

    Usage:
        synthesizer = ArticleSynthesizer(gateway, analyzer)
        article = synthesizer.synthesize("rust ownership", summaries)
        print(article.text)
    """

    def __init__(
        self,
        gateway: LLMGateway,
        analyzer: SourceRelevanceAnalyzer | None = None,
        model: str = "gpt-4o",
        max_tokens: int = 4000,
        min_word_count: int = MIN_WORD_COUNT,
    ):
        self.gateway = gateway
        self.analyzer = analyzer or SourceRelevanceAnalyzer(gateway)
        self.model = model
        self.max_tokens = max_tokens
        self.min_word_count = min_word_count

    def synthesize(
        self,
        topic: str,
        summaries: list[SummaryResult],
        model: str | None = None,
    ) -> ArticleResult:
        """Generate the article.

        Args:
            topic: Article topic.
            summaries: Local pass-through sources and web summaries.
            model: Optional override of the configured article model.

        Returns:
            ArticleResult with content (string or content blocks), usage and cost.

        Raises:
            InvalidResponseError: The model returned no content.
        """
        active_model = model or self.model
        logger.info("Starting article generation with %d summaries", len(summaries))

        local_sources = [s.text for s in summaries if s.is_local and s.text.strip()]
        web_sources = [
            format_web_source(s.source, s.text)
            for s in summaries
            if not s.is_local and s.source and s.text.strip()
        ]
        logger.info(
            "Found %d valid local sources and %d web sources",
            len(local_sources), len(web_sources),
        )

        analysis = None
        if local_sources:
            analysis = self.analyzer.analyze(topic, local_sources)
            logger.info(
                "Source analysis: relevant=%s, main_topic=%s, concepts=%s",
                analysis.is_relevant, analysis.main_topic, analysis.concepts,
            )

        config = PromptConfig(
            has_local_sources=bool(local_sources),
            provider=select_provider(active_model),
        )
        prompt = build_synthesis_prompt(
            topic,
            local_sources,
            web_sources,
            config,
            analysis=analysis,
            min_word_count=self.min_word_count,
        )

        response = self.gateway.complete(
            active_model,
            prompt.user,
            system_prompt=prompt.system,
            max_tokens=self.max_tokens,
        )
        logger.info("Generated article length: %d characters", len(response.text))

        return ArticleResult(
            content=response.content,
            usage=response.usage,
            cost=response.cost,
            model=active_model,
        )
