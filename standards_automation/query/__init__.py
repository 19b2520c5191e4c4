"""Query layer — Corpus, filters and reference resolution."""

from standards_automation.query.corpus import Corpus
from standards_automation.query.filters import checklist_records, search
from standards_automation.query.resolver import normalize_reference, resolve_reference

__all__ = ["Corpus", "checklist_records", "search", "normalize_reference", "resolve_reference"]
