# Writer: summarization, source analysis and article synthesis
"""
Writer module for turning collected sources into a long-form article.

Web sources are summarized one by one, local sources are analyzed for
themes, and a single synthesis call writes the Markdown article.
"""

from .prompts import PromptConfig, build_synthesis_prompt
from .relevance import SourceRelevanceAnalyzer
from .summarizer import Summarizer
from .synthesizer import ArticleSynthesizer
from .titles import TitleGenerator, TitleResult

__all__ = [
    "ArticleSynthesizer",
    "PromptConfig",
    "SourceRelevanceAnalyzer",
    "Summarizer",
    "TitleGenerator",
    "TitleResult",
    "build_synthesis_prompt",
]
