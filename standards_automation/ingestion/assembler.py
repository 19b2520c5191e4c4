"""
Record assembly — turn whatever fragments a source offers into a
canonical ``RequirementRecord``.

Every attribute is read through its own ordered key chain (see
``fields.first_present``). Missing references are synthesized from the
identifying codes, text is capped, and a title is derived from the text
when the source does not supply one. Records with neither a title nor a
text are dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from standards_automation.ingestion.fields import first_present, read_tags
from standards_automation.models.schemas import RequirementRecord

MAX_TEXT_LENGTH = 10_000
MAX_TITLE_LENGTH = 200

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")

# ── Key chains: explicit clause objects ─────────────────

CLAUSE_ID_KEYS = ("clause_id", "id")
CLAUSE_TITLE_KEYS = ("title", "heading")
CLAUSE_TEXT_KEYS = ("text", "content", "requirement", "description")
CLAUSE_FACILITY_KEYS = ("facility_class", "facilityClass", "class")

# ── Key chains: free-form (Generic) objects ─────────────

GENERIC_DIRECTIVE_KEYS = (
    "directiveCode", "directive_code", "directive", "chapter", "section", "code",
)
GENERIC_SECTION_KEYS = (
    "sectionCode", "section_code", "subsection", "article", "clause",
)
GENERIC_CLAUSE_ID_KEYS = (
    "clauseId", "clause_id", "id", "clauseNumber", "number", "articleNumber",
)
GENERIC_TITLE_KEYS = ("title", "heading", "name", "description")
GENERIC_TEXT_KEYS = ("text", "content", "requirement", "clause", "description")
GENERIC_FACILITY_KEYS = (
    "facilityClass", "facility_class", "class", "occupancy", "category",
)
GENERIC_DOMAIN_KEYS = ("domain",)
GENERIC_REFERENCE_KEYS = ("reference", "ref")


@dataclass(frozen=True)
class ClauseContext:
    """Identifying codes inherited from the enclosing directive/section."""
    standard: str
    directive_code: str = ""
    section_code: str = ""
    domain: str = ""
    section_title: str = ""


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def first_sentence(text: str) -> str:
    """First sentence of ``text`` (split on . ! ?), capped at 200 chars."""
    head = _SENTENCE_END_RE.split(text, maxsplit=1)[0]
    return head.strip()[:MAX_TITLE_LENGTH]


def synthesize_reference(
    standard: str, directive_code: str, section_code: str, clause_id: str
) -> str:
    return collapse_whitespace(f"{standard} {directive_code} {section_code} {clause_id}")


def build_record(
    context: ClauseContext,
    *,
    clause_id: str,
    text: str,
    title: str = "",
    fallback_title: str = "",
    facility_class: str = "",
    tags: Sequence[str] = (),
    reference: str = "",
) -> Optional[RequirementRecord]:
    """
    Build one canonical record, or ``None`` when it would carry neither
    a title nor a text.

    ``title`` wins when supplied. Otherwise it is derived from the first
    sentence of ``text``, then ``fallback_title``. No title is invented
    for an empty text.
    """
    text = text[:MAX_TEXT_LENGTH]
    if not title and text:
        title = first_sentence(text) or fallback_title

    if not title and not text:
        return None

    return RequirementRecord(
        standard=context.standard,
        directive_code=context.directive_code,
        section_code=context.section_code,
        clause_id=clause_id,
        title=title,
        text=text,
        facility_class=facility_class,
        domain=context.domain,
        tags=tuple(tags),
        reference=reference
        or synthesize_reference(
            context.standard, context.directive_code, context.section_code, clause_id
        ),
    )


def assemble_clause(
    clause: Mapping[str, Any], context: ClauseContext, index: int
) -> Optional[RequirementRecord]:
    """Assemble an explicit clause object; ``index`` is its 0-based position."""
    clause_id = first_present(clause, CLAUSE_ID_KEYS, default=str(index + 1))
    return build_record(
        context,
        clause_id=clause_id,
        title=first_present(clause, CLAUSE_TITLE_KEYS, default=context.section_title),
        text=first_present(clause, CLAUSE_TEXT_KEYS),
        fallback_title=f"Clause {clause_id}",
        facility_class=first_present(clause, CLAUSE_FACILITY_KEYS),
        tags=read_tags(clause),
        reference=first_present(clause, ("reference",)),
    )


def assemble_generic(
    obj: Mapping[str, Any], standard: str, domain: str, ordinal: int = 1
) -> Optional[RequirementRecord]:
    """Assemble a free-form object by probing the generic key chains."""
    clause_id = first_present(obj, GENERIC_CLAUSE_ID_KEYS)
    context = ClauseContext(
        standard=standard,
        directive_code=first_present(obj, GENERIC_DIRECTIVE_KEYS),
        section_code=first_present(obj, GENERIC_SECTION_KEYS),
        domain=first_present(obj, GENERIC_DOMAIN_KEYS, default=domain),
    )
    return build_record(
        context,
        clause_id=clause_id,
        title=first_present(obj, GENERIC_TITLE_KEYS),
        text=first_present(obj, GENERIC_TEXT_KEYS),
        fallback_title=f"Clause {clause_id}" if clause_id else f"Requirement {ordinal}",
        facility_class=first_present(obj, GENERIC_FACILITY_KEYS),
        tags=read_tags(obj),
        reference=first_present(obj, GENERIC_REFERENCE_KEYS),
    )
