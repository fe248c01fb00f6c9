"""Shared test fixtures for Article Engine."""

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Ensure the package is importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from article_engine.common.config import (
    CollectorSettings,
    LLMSettings,
    PipelineSettings,
    PublishSettings,
    Settings,
)
from article_engine.llm.client import LLMGateway


def chat_response(content, prompt_tokens=10, completion_tokens=5):
    """Build an object shaped like an OpenAI ChatCompletion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
    )


def messages_response(text, input_tokens=10, output_tokens=5):
    """Build an object shaped like an Anthropic Message."""
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)] if text is not None else [],
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
        stop_reason="end_turn",
    )


@pytest.fixture
def make_chat_response():
    return chat_response


@pytest.fixture
def make_messages_response():
    return messages_response


@pytest.fixture
def openai_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def anthropic_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def gateway(openai_client, anthropic_client) -> LLMGateway:
    """Gateway with mocked provider clients."""
    return LLMGateway(openai_client=openai_client, anthropic_client=anthropic_client)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with every output directory under tmp_path."""
    return Settings(
        llm=LLMSettings(),
        collector=CollectorSettings(sources_dir=str(tmp_path / "sources")),
        publish=PublishSettings(),
        pipeline=PipelineSettings(
            articles_dir=str(tmp_path / "articles"),
            keywords_dir=str(tmp_path / "keywords"),
        ),
    )


@pytest.fixture
def sample_html() -> str:
    return """<html><head><title>Ownership</title><script>var x = 1;</script></head>
<body>
<nav><a href="/">Home</a> Menu items</nav>
<h1>Understanding Ownership</h1>
<p>Each value in Rust has an owner.</p>
<div class="ad">Buy now</div>
<h2>Borrowing</h2>
<p>References allow you to refer to a value without taking ownership.</p>
<footer>Copyright 2024</footer>
</body></html>"""
