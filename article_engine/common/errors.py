"""Exception types shared across the pipeline."""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for article pipeline failures."""


class FetchError(PipelineError):
    """A source page could not be fetched or parsed. Non-fatal: the source is dropped."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}" if reason else f"Failed to fetch {url}")


class InvalidResponseError(PipelineError):
    """The LLM returned an empty or malformed response."""

    def __init__(self, model: str, detail: str = "empty content"):
        self.model = model
        self.detail = detail
        super().__init__(f"Invalid response from {model}: {detail}")


class ParseError(PipelineError):
    """Structured JSON output from the LLM could not be parsed."""


class NoResultsError(PipelineError):
    """No usable sources were found for a keyword."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"No sources found for keyword '{keyword}'")
