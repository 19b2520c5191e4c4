"""
Standards Requirements — Main Entry Point

Ingest the data directory and print a summary (CLI):
    python -m standards_automation
    python -m standards_automation path/to/data

Run as an API server:
    python -m standards_automation --serve
    # or: uvicorn standards_automation.api:app --port 3000

Or import and run programmatically:
    from standards_automation.main import run
    corpus = run("path/to/data")
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

from standards_automation.config import get_settings
from standards_automation.ingestion.loader import ingest_directory
from standards_automation.query.corpus import Corpus
from standards_automation.utils.logger import setup_logging


def run(data_dir: str = "") -> Corpus:
    """Ingest every source document and return the finished corpus."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    data_dir = data_dir or settings.data_dir

    logger.info("=" * 60)
    logger.info("  STANDARDS REQUIREMENTS INGESTION")
    logger.info(f"  Source: {data_dir} | Started: {datetime.now(timezone.utc).isoformat()}")
    logger.info("=" * 60)

    corpus = ingest_directory(data_dir, settings.data_glob)

    _print_summary(corpus)

    return corpus


def _print_summary(corpus: Corpus) -> None:
    """Print a human-readable summary of the ingestion result."""
    logger = logging.getLogger(__name__)

    logger.info("-" * 60)
    logger.info("  CORPUS SUMMARY")
    logger.info("-" * 60)
    logger.info(f"  Records:        {len(corpus)}")
    logger.info(f"  Fingerprint:    {corpus.fingerprint()[:16]}...")
    for standard, count in sorted(corpus.count_by_standard().items()):
        logger.info(f"    {standard:<24} {count}")
    logger.info("-" * 60)


def serve(host: str = "", port: int = 0) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    host = host or settings.api_host
    port = port or settings.api_port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("standards_automation.api:app", host=host, port=port)


def cli() -> None:
    """Console entry point: ingest, or serve with --serve."""
    if "--serve" in sys.argv:
        serve()
    else:
        dir_arg = sys.argv[1] if len(sys.argv) > 1 else ""
        run(dir_arg)


if __name__ == "__main__":
    cli()
