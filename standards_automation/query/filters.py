"""
Filter engine — stateless predicates that narrow a sequence of records.

Two matching modes:
  • field substring  — case-insensitive containment
  • fuzzy text       — the whole query is contained, OR every
                       whitespace-separated word of it is (AND of words;
                       no edit distance)

Checklist generation uses a "soft" policy for its optional filters: a
filter is applied only to records that carry a value for that attribute,
and is ignored entirely when it would leave nothing.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from standards_automation.models.schemas import RequirementRecord

RecordPredicate = Callable[[RequirementRecord], bool]

# Search filters: request attribute -> record attribute
SEARCH_FIELDS = ("standard", "directive_code", "facility_class", "domain")


def contains(value: str, needle: str) -> bool:
    return needle.lower() in (value or "").lower()


def fuzzy_match(text: str, query: str) -> bool:
    if not query:
        return True

    lower_text = (text or "").lower()
    lower_query = query.lower()

    if lower_query in lower_text:
        return True

    return all(word in lower_text for word in lower_query.split())


def field_contains(field: str, needle: str) -> RecordPredicate:
    return lambda record: contains(getattr(record, field), needle)


def text_matches(query: str) -> RecordPredicate:
    """Fuzzy match against the title OR the text."""
    return lambda record: fuzzy_match(record.title, query) or fuzzy_match(record.text, query)


def narrow(
    records: Iterable[RequirementRecord], predicate: RecordPredicate
) -> list[RequirementRecord]:
    return [r for r in records if predicate(r)]


def search(
    records: Sequence[RequirementRecord],
    *,
    standard: Optional[str] = None,
    directive_code: Optional[str] = None,
    facility_class: Optional[str] = None,
    domain: Optional[str] = None,
    query: Optional[str] = None,
    limit: int = 50,
) -> list[RequirementRecord]:
    """Apply each supplied filter in turn, then cut to ``limit``."""
    filters = {
        "standard": standard,
        "directive_code": directive_code,
        "facility_class": facility_class,
        "domain": domain,
    }

    results: Sequence[RequirementRecord] = records
    for field in SEARCH_FIELDS:
        if filters[field]:
            results = narrow(results, field_contains(field, filters[field]))

    if query:
        results = narrow(results, text_matches(query))

    return list(results[:limit])


def soft_filter(
    records: list[RequirementRecord],
    field: str,
    predicate: RecordPredicate,
) -> list[RequirementRecord]:
    """
    Narrow ``records`` by ``predicate`` among those with a non-empty ``field``.

    Returns ``records`` unchanged when no record carries the field or none
    of them passes.
    """
    candidates = [r for r in records if getattr(r, field)]
    if not candidates:
        return records

    filtered = narrow(candidates, predicate)
    return filtered if filtered else records


def checklist_records(
    records: Sequence[RequirementRecord],
    standards: Sequence[str],
    facility_class: Optional[str] = None,
    domains: Optional[Sequence[str]] = None,
) -> list[RequirementRecord]:
    """Hard filter by standards, then soft filters by facility class and domains."""
    wanted = [s.lower() for s in standards]
    results = narrow(records, lambda r: any(s in r.standard.lower() for s in wanted))

    if facility_class:
        results = soft_filter(
            results, "facility_class", field_contains("facility_class", facility_class)
        )

    wanted_domains = [d.lower() for d in (domains or []) if d]
    if wanted_domains:
        results = soft_filter(
            results,
            "domain",
            lambda r: any(d in r.domain.lower() for d in wanted_domains),
        )

    return results
