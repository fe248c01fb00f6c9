"""Keyword-to-article pipeline.

Orchestrates the complete flow for one keyword:
collect sources → summarize web sources → synthesize → titles → write → publish

Usage:
    pipeline = ArticlePipeline(Settings.load())
    result = pipeline.run("rust ownership", source_dir="rust")
    results = pipeline.run_many(["rust ownership", "borrow checker"])
"""

from __future__ import annotations

from article_engine.collector.collector import SourceCollector
from article_engine.collector.http_client import HTTPClient
from article_engine.collector.local import LocalSourceReader
from article_engine.collector.page import PageFetcher
from article_engine.collector.search import DuckDuckGoSearch
from article_engine.common.config import Settings
from article_engine.common.errors import NoResultsError
from article_engine.common.logging import setup_logging
from article_engine.common.models import KeywordRunResult, SummaryResult
from article_engine.llm.client import LLMGateway
from article_engine.publisher.platforms import MarkdownExporter, WordPressPublisher
from article_engine.writer.relevance import SourceRelevanceAnalyzer
from article_engine.writer.summarizer import Summarizer
from article_engine.writer.synthesizer import ArticleSynthesizer
from article_engine.writer.titles import TitleGenerator

from .usage import UsageAggregator

logger = setup_logging(module_name="pipeline.runner")


class ArticlePipeline:
    """End-to-end pipeline from keyword to Markdown article.

    Steps:
    1. Collect local and web sources (SourceCollector)
    2. Summarize each web source in order; pass local sources through (Summarizer)
    3. Synthesize the article (ArticleSynthesizer, with SourceRelevanceAnalyzer)
    4. Optionally generate titles (TitleGenerator)
    5. Write Markdown and optionally publish (MarkdownExporter, WordPressPublisher)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        gateway: LLMGateway | None = None,
        collector: SourceCollector | None = None,
        summarizer: Summarizer | None = None,
        synthesizer: ArticleSynthesizer | None = None,
        title_generator: TitleGenerator | None = None,
        exporter: MarkdownExporter | None = None,
        publisher: WordPressPublisher | None = None,
    ):
        self.settings = settings or Settings.load()
        llm = self.settings.llm
        self.gateway = gateway or LLMGateway(temperature=llm.temperature)

        http_client = None
        if collector is None or summarizer is None:
            http_client = HTTPClient(self.settings.collector)

        self.collector = collector or SourceCollector(
            search=DuckDuckGoSearch(self.settings.collector, client=http_client),
            local_reader=LocalSourceReader(self.settings.collector.sources_dir),
        )
        self.summarizer = summarizer or Summarizer(
            self.gateway,
            PageFetcher(self.settings.collector, client=http_client),
            model=llm.summary_model,
            max_tokens=llm.summary_max_tokens,
        )
        self.synthesizer = synthesizer or ArticleSynthesizer(
            self.gateway,
            SourceRelevanceAnalyzer(self.gateway, model=llm.analysis_model),
            model=llm.default_model,
            max_tokens=llm.article_max_tokens,
            min_word_count=self.settings.pipeline.min_word_count,
        )
        self.title_generator = title_generator or TitleGenerator(
            self.gateway,
            model=llm.default_model,
            max_tokens=llm.title_max_tokens,
        )
        self.exporter = exporter or MarkdownExporter(self.settings.pipeline.articles_dir)
        self.publisher = publisher or WordPressPublisher(self.settings.publish)

    def run(
        self,
        keyword: str,
        source_dir: str | None = None,
        web_search: bool = True,
        model: str | None = None,
    ) -> KeywordRunResult:
        """Process one keyword.

        Args:
            keyword: Topic keyword.
            source_dir: Optional local source directory name.
            web_search: Whether to search the web.
            model: Optional article model override.

        Returns:
            KeywordRunResult with the article, output path and usage totals.

        Raises:
            NoResultsError: No usable sources were found.
            InvalidResponseError: Synthesis returned no content.
        """
        logger.info("Processing keyword: %s", keyword)
        usage = UsageAggregator()

        sources = self.collector.collect(keyword, source_dir=source_dir, web_search=web_search)
        if not sources:
            logger.info("No results found for '%s'. Skipping...", keyword)
            raise NoResultsError(keyword)

        summaries: list[SummaryResult] = []
        for source in sources:
            if source.is_local:
                summaries.append(Summarizer.from_local(source))
                continue
            logger.info('PROCESSING "%s - %s"', source.title, source.url)
            summary = self.summarizer.summarize(source.url)
            if summary is None:
                continue
            usage.record("summary", summary.usage, summary.cost)
            summaries.append(summary)

        if not any(s.text.strip() for s in summaries):
            logger.info("All sources for '%s' were empty or failed. Skipping...", keyword)
            raise NoResultsError(keyword)
        logger.info("Summarized %d sources. Generating article...", len(summaries))

        article = self.synthesizer.synthesize(keyword, summaries, model=model)
        usage.record("synthesis", article.usage, article.cost)
        content = article.text

        titles: list[str] = []
        if self.settings.pipeline.generate_titles:
            title_result = self.title_generator.generate(keyword)
            if title_result is not None:
                titles = title_result.titles
                usage.record("titles", title_result.usage, title_result.cost)

        output_path = self.exporter.export(keyword, content, titles)

        published = False
        if self.settings.publish.enabled:
            title = titles[0] if titles else keyword.title()
            published = self.publisher.publish(title, content).success

        totals = usage.snapshot()
        stage_calls = dict(usage.calls)
        logger.info(
            "DONE '%s': %d words, %d input + %d output tokens, $%.4f, calls=%s",
            keyword, len(content.split()), totals.input_tokens, totals.output_tokens, totals.cost,
            stage_calls,
        )
        return KeywordRunResult(
            keyword=keyword,
            content=content,
            titles=titles,
            source_count=len(summaries),
            usage=totals,
            stage_calls=stage_calls,
            output_path=str(output_path),
            published=published,
        )

    def run_many(
        self,
        keywords: list[str],
        source_dir: str | None = None,
        web_search: bool = True,
        model: str | None = None,
    ) -> list[KeywordRunResult]:
        """Process keywords in order; a failed keyword does not stop the others."""
        results = []
        for keyword in keywords:
            try:
                results.append(self.run(keyword, source_dir, web_search, model))
            except Exception as e:
                logger.error("Keyword '%s' failed: %s", keyword, e, exc_info=True)
                results.append(KeywordRunResult(keyword=keyword, success=False, error=str(e)))
        return results
