"""
Corpus loader — read source documents from disk and run the single
ingestion pass.

Usage:
    python -m standards_automation            # ingest ./data and print a summary

Each file is ingested in isolation: one unreadable or malformed document is
logged and skipped, the rest still load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from standards_automation.ingestion.naming import domain_from_source, standard_from_source
from standards_automation.ingestion.walker import SourceContext, walk_document
from standards_automation.models.errors import IngestionError
from standards_automation.models.schemas import RequirementRecord
from standards_automation.query.corpus import Corpus

logger = logging.getLogger(__name__)


def read_document(path: Path) -> Any:
    """Read and parse one JSON document."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise IngestionError(path.name, str(e)) from e


def load_documents(data_dir: str | Path, pattern: str = "*.json") -> Iterator[tuple[str, Any]]:
    """Yield ``(source_name, parsed_document)`` for every readable file, in name order."""
    base = Path(data_dir)
    if not base.is_dir():
        logger.warning(f"Data directory not found: {base}")
        return

    files = sorted(p for p in base.glob(pattern) if p.is_file())
    logger.info(f"Found {len(files)} files to load in {base}")

    for path in files:
        try:
            yield path.name, read_document(path)
        except IngestionError as e:
            logger.error(f"Error loading {path.name}: {e.reason}")


def normalize_document(source_name: str, document: Any) -> list[RequirementRecord]:
    """Normalize one parsed document, deriving standard/domain from its name."""
    source = SourceContext(
        standard=standard_from_source(source_name),
        domain=domain_from_source(source_name, document),
    )
    return walk_document(document, source)


def build_corpus(documents: Iterable[tuple[str, Any]]) -> Corpus:
    """Run the ingestion pass over ``(source_name, document)`` pairs."""
    records: list[RequirementRecord] = []

    for source_name, document in documents:
        try:
            normalized = normalize_document(source_name, document)
        except Exception as e:
            logger.exception(f"Error normalizing {source_name}: {e}")
            continue
        records.extend(normalized)
        logger.info(f"Loaded {len(normalized)} records from {source_name}")

    corpus = Corpus(records)
    logger.info(f"Total normalized records: {len(corpus)}")
    logger.info(f"Records by standard: {json.dumps(corpus.count_by_standard(), indent=2)}")
    return corpus


def ingest_directory(data_dir: str | Path, pattern: str = "*.json") -> Corpus:
    """Load every matching file under ``data_dir`` into a corpus."""
    return build_corpus(load_documents(data_dir, pattern))
