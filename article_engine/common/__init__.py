# Common utilities and shared modules
"""
Shared components used across the pipeline:
- Data models (Pydantic schemas)
- Error types
- Logging configuration
- Project configuration
"""

from .config import PROJECT_ROOT, Settings
from .errors import FetchError, InvalidResponseError, NoResultsError, ParseError, PipelineError
from .logging import setup_logging

__all__ = [
    "PROJECT_ROOT",
    "Settings",
    "FetchError",
    "InvalidResponseError",
    "NoResultsError",
    "ParseError",
    "PipelineError",
    "setup_logging",
]
