"""Ingestion — classify, walk, segment and assemble source documents into a Corpus."""

from standards_automation.ingestion.classifier import classify_document
from standards_automation.ingestion.segmenter import segment_text
from standards_automation.ingestion.walker import SourceContext, walk_document
from standards_automation.ingestion.loader import build_corpus, ingest_directory, load_documents

__all__ = [
    "classify_document",
    "segment_text",
    "SourceContext",
    "walk_document",
    "build_corpus",
    "ingest_directory",
    "load_documents",
]
