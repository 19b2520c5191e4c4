"""
Schema classification — decide which structural variant a raw document is.

Three shapes are recognized, purely by the presence of top-level fields:

  DirectiveRooted  { "directives": [ { "structured_sections": [...] } ] }
  SectionRooted    { "document": { "structured_sections": [...] } }
  Generic          anything else (a single free-form object)

A top-level array is not a variant of its own: it is flattened and each
element classified independently. Classification never fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from standards_automation.models.enums import SchemaVariant


@dataclass(frozen=True)
class ClassifiedDocument:
    variant: SchemaVariant
    body: dict[str, Any]


def classify(document: Any) -> SchemaVariant:
    """Classify a single (non-array) document."""
    if not isinstance(document, dict):
        return SchemaVariant.GENERIC

    if isinstance(document.get("directives"), list):
        return SchemaVariant.DIRECTIVE_ROOTED

    inner = document.get("document")
    if isinstance(inner, dict) and isinstance(inner.get("structured_sections"), list):
        return SchemaVariant.SECTION_ROOTED

    return SchemaVariant.GENERIC


def classify_document(document: Any) -> Iterator[ClassifiedDocument]:
    """Yield one tagged document per object, flattening arrays in order."""
    if isinstance(document, list):
        for element in document:
            yield from classify_document(element)
        return

    body = document if isinstance(document, dict) else {}
    yield ClassifiedDocument(variant=classify(document), body=body)
