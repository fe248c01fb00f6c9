"""Tests for shared common modules (models, config, logging and errors)."""

import logging

import pytest

from article_engine.common.config import Settings, get_anthropic_api_key, get_openai_api_key
from article_engine.common.errors import FetchError, InvalidResponseError, NoResultsError, PipelineError
from article_engine.common.logging import PACKAGE_LOGGER, setup_logging
from article_engine.common.models import (
    CostBreakdown,
    RunUsageTotals,
    SourceDescriptor,
    SummaryResult,
    TokenUsage,
    flatten_content,
)


class TestSourceDescriptor:
    def test_web_source(self):
        source = SourceDescriptor(title="Rust Book", url="https://doc.rust-lang.org/book/")
        assert not source.is_local
        assert source.content is None

    def test_local_source(self):
        source = SourceDescriptor(title="notes.md", content="Ownership rules", is_local=True)
        assert source.is_local
        assert source.url is None

    def test_local_source_requires_content(self):
        with pytest.raises(Exception):
            SourceDescriptor(title="notes.md", is_local=True)

    def test_local_source_cannot_have_url(self):
        with pytest.raises(Exception):
            SourceDescriptor(title="notes.md", content="x", url="https://example.com", is_local=True)

    def test_web_source_requires_url(self):
        with pytest.raises(Exception):
            SourceDescriptor(title="Untitled")


class TestTokenUsage:
    def test_from_counts(self):
        usage = TokenUsage.from_counts(100, 50)
        assert usage.prompt_tokens == 100
        assert usage.completion_tokens == 50
        assert usage.total_tokens == 150

    def test_total_must_match(self):
        with pytest.raises(Exception):
            TokenUsage(prompt_tokens=1, completion_tokens=1, total_tokens=5)

    def test_counts_must_be_non_negative(self):
        with pytest.raises(Exception):
            TokenUsage.from_counts(-1, 0)


class TestSummaryResult:
    def test_text_from_string(self):
        summary = SummaryResult(content="plain", source="https://example.com")
        assert summary.text == "plain"

    def test_text_from_blocks(self):
        summary = SummaryResult(
            content=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "world"}],
            source="https://example.com",
        )
        assert summary.text == "Hello world"

    def test_is_frozen(self):
        summary = SummaryResult(content="plain")
        with pytest.raises(Exception):
            summary.content = "changed"


class TestFlattenContent:
    def test_none(self):
        assert flatten_content(None) == ""

    def test_block_without_text_is_serialized(self):
        assert "tool_use" in flatten_content([{"type": "tool_use", "id": "x"}])


class TestRunUsageTotals:
    def test_total_tokens(self):
        totals = RunUsageTotals(input_tokens=30, output_tokens=12, cost=0.1)
        assert totals.total_tokens == 42

    def test_cost_breakdown_defaults(self):
        cost = CostBreakdown()
        assert cost.total_cost == 0.0


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.llm.default_model == "gpt-4o"
        assert settings.llm.article_max_tokens == 4000
        assert settings.llm.summary_max_tokens == 1000
        assert settings.llm.title_max_tokens == 200
        assert settings.collector.max_content_chars == 14_000
        assert settings.pipeline.min_word_count == 1700
        assert settings.pipeline.port == 5129
        assert not settings.publish.enabled

    def test_load_from_yaml(self, tmp_path, monkeypatch):
        for var in ("OPENAI_MODEL", "SUMMARY_MODEL", "ARTICLE_MAX_TOKENS", "PORT"):
            monkeypatch.delenv(var, raising=False)
        path = tmp_path / "settings.yaml"
        path.write_text("llm:\n  default_model: o1-mini\npipeline:\n  port: 8080\n", encoding="utf-8")

        settings = Settings.load(path)

        assert settings.llm.default_model == "o1-mini"
        assert settings.pipeline.port == 8080
        assert settings.llm.summary_model == "gpt-4o"

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "claude-3-5-sonnet")
        monkeypatch.setenv("SUMMARY_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("ARTICLE_MAX_TOKENS", "8000")
        monkeypatch.setenv("PUBLISH_ENABLED", "true")
        monkeypatch.setenv("WORDPRESS_URL", "https://blog.example.com")
        monkeypatch.setenv("PORT", "9000")

        settings = Settings.load(tmp_path / "missing.yaml")

        assert settings.llm.default_model == "claude-3-5-sonnet"
        assert settings.llm.summary_model == "gpt-4o-mini"
        assert settings.llm.article_max_tokens == 8000
        assert settings.publish.enabled
        assert settings.publish.base_url == "https://blog.example.com"
        assert settings.pipeline.port == 9000

    def test_missing_api_keys_raise(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(ValueError):
            get_openai_api_key()
        with pytest.raises(ValueError):
            get_anthropic_api_key()


class TestErrors:
    def test_hierarchy(self):
        for exc in (FetchError("https://x"), InvalidResponseError("gpt-4o"), NoResultsError("k")):
            assert isinstance(exc, PipelineError)

    def test_messages(self):
        assert "https://x" in str(FetchError("https://x", "timeout"))
        assert "gpt-4o" in str(InvalidResponseError("gpt-4o"))
        assert "rust" in str(NoResultsError("rust"))


class TestSetupLogging:
    def test_module_loggers_live_under_package(self):
        assert setup_logging(module_name="writer.summarizer").name == "article_engine.writer.summarizer"
        assert setup_logging(module_name="article_engine.llm.pricing").name == "article_engine.llm.pricing"
        assert setup_logging().name == PACKAGE_LOGGER

    def test_handler_attached_once_to_package_logger(self):
        setup_logging(module_name="pipeline.runner")
        setup_logging(module_name="api")

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert len(package_logger.handlers) == 1
        assert not setup_logging(module_name="api").handlers

    def test_dunder_name_loggers_reach_package_handler(self):
        setup_logging()
        logger = logging.getLogger("article_engine.collector.search")

        names = []
        while logger is not None:
            names.append(logger.name)
            logger = logger.parent if logger.propagate else None
        assert PACKAGE_LOGGER in names
