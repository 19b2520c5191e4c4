"""
Structural walk — turn one classified document into requirement records.

DirectiveRooted:  directive -> structured section -> clause
SectionRooted:    structured section -> clause        (directive code is '')
Generic:          the object itself, plus every element of its nested
                  requirements / sections / clauses / items collections

A section yields one record per explicit clause object AND, independently,
the segmenter's records for its ``content`` text. The two sets are neither
merged nor deduplicated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from standards_automation.ingestion.assembler import (
    ClauseContext,
    assemble_clause,
    assemble_generic,
)
from standards_automation.ingestion.classifier import classify_document
from standards_automation.ingestion.fields import first_present, list_field
from standards_automation.ingestion.segmenter import segment_text
from standards_automation.models.enums import SchemaVariant
from standards_automation.models.schemas import RequirementRecord

logger = logging.getLogger(__name__)

DIRECTIVE_CODE_KEYS = ("directive_code", "directiveCode")
SECTION_CODE_KEYS = ("section_code", "sectionCode")
SECTION_TITLE_KEYS = ("section_title",)
NESTED_COLLECTION_KEYS = ("requirements", "sections", "clauses", "items")


@dataclass(frozen=True)
class SourceContext:
    """Per-document values derived from the source identifier."""
    standard: str
    domain: str


def walk_section(section: Mapping[str, Any], context: ClauseContext) -> list[RequirementRecord]:
    """Explicit clauses first, then the segmented ``content`` text."""
    records: list[RequirementRecord] = []

    for index, clause in enumerate(list_field(section, "clauses")):
        if not isinstance(clause, dict):
            continue
        record = assemble_clause(clause, context, index)
        if record is not None:
            records.append(record)

    content = section.get("content")
    if isinstance(content, str) and content.strip():
        records.extend(segment_text(content, context))

    return records


def _walk_sections(
    sections: list[Any], source: SourceContext, directive_code: str
) -> list[RequirementRecord]:
    records: list[RequirementRecord] = []
    for section in sections:
        if not isinstance(section, dict):
            continue
        context = ClauseContext(
            standard=source.standard,
            directive_code=directive_code,
            section_code=first_present(section, SECTION_CODE_KEYS),
            domain=source.domain,
            section_title=first_present(section, SECTION_TITLE_KEYS),
        )
        records.extend(walk_section(section, context))
    return records


def walk_directive_rooted(
    body: Mapping[str, Any], source: SourceContext
) -> list[RequirementRecord]:
    records: list[RequirementRecord] = []
    for directive in list_field(body, "directives"):
        if not isinstance(directive, dict):
            continue
        directive_code = first_present(directive, DIRECTIVE_CODE_KEYS)
        records.extend(
            _walk_sections(list_field(directive, "structured_sections"), source, directive_code)
        )
    return records


def walk_section_rooted(
    body: Mapping[str, Any], source: SourceContext
) -> list[RequirementRecord]:
    sections = list_field(body.get("document") or {}, "structured_sections")
    return _walk_sections(sections, source, directive_code="")


def walk_generic(
    body: Mapping[str, Any], source: SourceContext, ordinal: int = 1
) -> list[RequirementRecord]:
    records: list[RequirementRecord] = []

    record = assemble_generic(body, source.standard, source.domain, ordinal)
    if record is not None:
        records.append(record)

    for key in NESTED_COLLECTION_KEYS:
        for position, element in enumerate(list_field(body, key), start=1):
            if isinstance(element, dict):
                records.extend(walk_generic(element, source, position))

    return records


_WALKERS = {
    SchemaVariant.DIRECTIVE_ROOTED: walk_directive_rooted,
    SchemaVariant.SECTION_ROOTED: walk_section_rooted,
    SchemaVariant.GENERIC: walk_generic,
}


def walk_document(document: Any, source: SourceContext) -> list[RequirementRecord]:
    """Normalize one raw parsed document (object or array) into records."""
    records: list[RequirementRecord] = []
    for classified in classify_document(document):
        walked = _WALKERS[classified.variant](classified.body, source)
        logger.debug(f"{source.standard}: {classified.variant.value} -> {len(walked)} records")
        records.extend(walked)
    return records
