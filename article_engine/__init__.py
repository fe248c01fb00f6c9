"""Article Engine: keyword → web/local sources → LLM summaries → long-form article."""

__version__ = "0.1.0"
