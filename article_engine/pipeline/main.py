"""CLI entry point for article generation.

Usage:
    python -m article_engine.pipeline.main run "rust ownership" --source-dir rust
    python -m article_engine.pipeline.main watch --interval 5
    python -m article_engine.pipeline.main serve --port 5129
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from article_engine.common.config import Settings
from article_engine.common.logging import setup_logging

from .runner import ArticlePipeline

logger = setup_logging(module_name="pipeline.main")

FAILED_SUFFIX = ".failed"


def next_keyword_file(keywords_dir: Path) -> Path | None:
    """Return the first pending keyword file (by name), if any."""
    if not keywords_dir.is_dir():
        return None
    pending = sorted(
        p for p in keywords_dir.iterdir()
        if p.is_file() and not p.name.startswith(".") and not p.name.endswith(FAILED_SUFFIX)
    )
    return pending[0] if pending else None


def process_next_keyword(pipeline: ArticlePipeline, keywords_dir: Path) -> bool:
    """Process one keyword file. The file name is the keyword.

    The file is deleted on success and renamed with a ``.failed`` suffix on
    failure so the loop moves on.

    Returns:
        True if a keyword file was found.
    """
    keyword_file = next_keyword_file(keywords_dir)
    if keyword_file is None:
        return False

    keyword = keyword_file.name
    try:
        pipeline.run(keyword)
    except Exception:
        logger.error("Keyword '%s' failed", keyword, exc_info=True)
        keyword_file.rename(keyword_file.with_name(keyword_file.name + FAILED_SUFFIX))
        return True

    logger.info("Deleting keyword file %s", keyword_file)
    keyword_file.unlink()
    return True


def watch(
    pipeline: ArticlePipeline,
    keywords_dir: Path,
    interval: float,
    max_iterations: int | None = None,
) -> None:
    """Process keyword files forever, sleeping ``interval`` seconds between runs."""
    iteration = 0
    while max_iterations is None or iteration < max_iterations:
        if not process_next_keyword(pipeline, keywords_dir):
            logger.debug("No keyword files in %s", keywords_dir)
        iteration += 1
        time.sleep(interval)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate long-form articles from keywords")
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Generate articles for one or more keywords")
    run_p.add_argument("keywords", nargs="+", help="Topic keywords")
    run_p.add_argument("--source-dir", help="Local source directory under sources/")
    run_p.add_argument(
        "--no-web-search",
        action="store_true",
        help="Only use local sources",
    )
    run_p.add_argument("--model", help="Article model override (e.g. claude-3-5-sonnet)")

    watch_p = sub.add_parser("watch", help="Continuously process files in keywords/")
    watch_p.add_argument("--interval", type=float, help="Seconds to sleep between runs")

    serve_p = sub.add_parser("serve", help="Run the HTTP service")
    serve_p.add_argument("--host", default="0.0.0.0")
    serve_p.add_argument("--port", type=int, help="Listen port (default: PORT or 5129)")

    args = parser.parse_args(argv)
    settings = Settings.load()

    if args.command == "serve":
        import uvicorn

        from article_engine.api.app import create_app

        port = args.port or settings.pipeline.port
        logger.info("Listening on port %d", port)
        uvicorn.run(create_app(ArticlePipeline(settings)), host=args.host, port=port)
        return 0

    pipeline = ArticlePipeline(settings)

    if args.command == "watch":
        interval = args.interval if args.interval is not None else settings.pipeline.watch_interval_seconds
        watch(pipeline, Path(settings.pipeline.keywords_dir), interval)
        return 0

    results = pipeline.run_many(
        args.keywords,
        source_dir=args.source_dir,
        web_search=not args.no_web_search,
        model=args.model,
    )
    for r in results:
        if r.success:
            print(
                f"{r.keyword}: {r.output_path} "
                f"({r.usage.input_tokens} in / {r.usage.output_tokens} out, ${r.usage.cost:.4f})"
            )
        else:
            print(f"{r.keyword}: FAILED ({r.error})", file=sys.stderr)
    return 0 if all(r.success for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
