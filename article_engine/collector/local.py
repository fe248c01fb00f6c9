"""Local document sources.

Every regular file under ``<sources_dir>/<name>`` becomes a local
SourceDescriptor whose title is the file name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from article_engine.common.config import CollectorSettings
from article_engine.common.models import SourceDescriptor

logger = logging.getLogger(__name__)


class LocalSourceReader:
    """Read local source files from a named directory."""

    def __init__(self, sources_dir: Path | str | None = None) -> None:
        self.sources_dir = Path(sources_dir or CollectorSettings().sources_dir)

    def read(self, source_dir: str) -> list[SourceDescriptor]:
        """Return one local source per file, ordered by file name.

        A missing or unreadable directory is logged and yields no sources.
        """
        dir_path = self.sources_dir / source_dir
        if not dir_path.is_dir():
            logger.error("Error reading local directory %s: not a directory", dir_path)
            return []

        results: list[SourceDescriptor] = []
        for file_path in sorted(dir_path.iterdir()):
            if not file_path.is_file():
                continue
            try:
                content = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                logger.warning("Skipping unreadable source file %s", file_path, exc_info=True)
                continue
            results.append(SourceDescriptor(title=file_path.name, content=content, is_local=True))

        logger.info("Loaded %d local sources from %s", len(results), dir_path)
        return results
