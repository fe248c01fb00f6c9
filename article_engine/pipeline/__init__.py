# Pipeline: per-keyword orchestration, usage accounting and CLI
"""
Runs the article pipeline for one keyword or a batch of keywords and
accumulates token/cost totals per run.
"""

from .runner import ArticlePipeline
from .usage import UsageAggregator

__all__ = [
    "ArticlePipeline",
    "UsageAggregator",
]
