"""Logging setup for Article Engine.

Every logger in the project lives under the ``article_engine`` package
logger. The stdout handler is attached to that package logger once;
module loggers, whether named through ``setup_logging`` or created with
``logging.getLogger(__name__)``, propagate to it.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "article_engine"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str | None = None,
) -> logging.Logger:
    """Configure the package logger and return a module logger.

    Args:
        level: Level for the package logger, applied on first configuration.
        module_name: Dotted name relative to the package, e.g.
            ``"writer.summarizer"``. A name already under ``article_engine``
            is used as is. None returns the package logger itself.

    Returns:
        ``article_engine.<module_name>`` logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.setLevel(level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)

    if not module_name or module_name == PACKAGE_LOGGER:
        return package_logger
    if module_name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
