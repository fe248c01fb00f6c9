"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
ARTICLES_DIR = PROJECT_ROOT / "articles"
KEYWORDS_DIR = PROJECT_ROOT / "keywords"
SOURCES_DIR = PROJECT_ROOT / "sources"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class LLMSettings(BaseModel):
    """LLM API settings."""
    default_model: str = "gpt-4o"
    summary_model: str = "gpt-4o"
    analysis_model: str = "gpt-4o-mini"
    title_max_tokens: int = 200
    article_max_tokens: int = 4000
    summary_max_tokens: int = 1000
    temperature: float = 0.3


class CollectorSettings(BaseModel):
    """Settings for web search and page fetching."""
    max_search_results: int = 5
    max_content_chars: int = 14_000
    request_timeout: int = 30
    rate_limit_rpm: int = 30
    max_retries: int = 1
    sources_dir: str = str(SOURCES_DIR)


class PublishSettings(BaseModel):
    """CMS publishing settings."""
    enabled: bool = False
    base_url: str = ""
    username: str = ""
    password: str = ""
    post_status: str = "draft"


class PipelineSettings(BaseModel):
    """Orchestration settings."""
    articles_dir: str = str(ARTICLES_DIR)
    keywords_dir: str = str(KEYWORDS_DIR)
    min_word_count: int = 1700
    generate_titles: bool = False
    watch_interval_seconds: float = 5.0
    port: int = 5129


class Settings(BaseModel):
    """Top-level application settings."""
    llm: LLMSettings = Field(default_factory=LLMSettings)
    collector: CollectorSettings = Field(default_factory=CollectorSettings)
    publish: PublishSettings = Field(default_factory=PublishSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, then apply environment overrides."""
        settings_path = path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        settings = cls(**data)
        settings.apply_env()
        return settings

    def apply_env(self) -> None:
        """Override settings from environment variables."""
        if model := os.getenv("OPENAI_MODEL"):
            self.llm.default_model = model
        if model := os.getenv("SUMMARY_MODEL"):
            self.llm.summary_model = model
        if model := os.getenv("ANALYSIS_MODEL"):
            self.llm.analysis_model = model
        if tokens := os.getenv("TITLE_MAX_TOKENS"):
            self.llm.title_max_tokens = int(tokens)
        if tokens := os.getenv("ARTICLE_MAX_TOKENS"):
            self.llm.article_max_tokens = int(tokens)
        if tokens := os.getenv("SUMMARY_MAX_TOKENS"):
            self.llm.summary_max_tokens = int(tokens)

        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.collector.request_timeout = int(timeout)
        if rpm := os.getenv("RATE_LIMIT_REQUESTS_PER_MINUTE"):
            self.collector.rate_limit_rpm = int(rpm)
        if sources := os.getenv("SOURCES_DIR"):
            self.collector.sources_dir = sources

        if enabled := os.getenv("PUBLISH_ENABLED"):
            self.publish.enabled = enabled.strip().lower() in ("1", "true", "yes", "on")
        if url := os.getenv("WORDPRESS_URL"):
            self.publish.base_url = url
        if user := os.getenv("WORDPRESS_USERNAME"):
            self.publish.username = user
        if password := os.getenv("WORDPRESS_PASSWORD"):
            self.publish.password = password

        if articles := os.getenv("ARTICLES_DIR"):
            self.pipeline.articles_dir = articles
        if keywords := os.getenv("KEYWORDS_DIR"):
            self.pipeline.keywords_dir = keywords
        if port := os.getenv("PORT"):
            self.pipeline.port = int(port)


def get_openai_api_key() -> str:
    """Get OpenAI API key from environment."""
    key = os.getenv("OPENAI_API_KEY", "")
    if not key:
        raise ValueError("OPENAI_API_KEY not set in environment")
    return key


def get_anthropic_api_key() -> str:
    """Get Anthropic API key from environment."""
    key = os.getenv("ANTHROPIC_API_KEY", "")
    if not key:
        raise ValueError("ANTHROPIC_API_KEY not set in environment")
    return key
