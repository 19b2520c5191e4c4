"""
Data schemas for the requirement corpus and the query surface.

Attributes are snake_case in Python and camelCase on the wire
(``directive_code`` <-> ``directiveCode``).
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every model that crosses the API boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Corpus ───────────────────────────────────────────────


class RequirementRecord(WireModel):
    """One atomic, normalized requirement taken from a source document."""

    model_config = ConfigDict(frozen=True)

    standard: str = ""
    directive_code: str = ""
    section_code: str = ""
    clause_id: str = ""  # not unique
    title: str = ""
    text: str = ""
    facility_class: str = ""
    domain: str = ""
    tags: tuple[str, ...] = ()
    reference: str = ""  # lookup key, first match wins

    def has_content(self) -> bool:
        return bool(self.title or self.text)


class ChecklistItem(WireModel):
    """A requirement reshaped for checklist output."""
    standard: str
    directive_code: str
    section_code: str
    clause_id: str
    domain: str
    requirement: str
    facility_class: str
    mandatory: bool = True
    reference: str

    @classmethod
    def from_record(cls, record: RequirementRecord) -> "ChecklistItem":
        return cls(
            standard=record.standard,
            directive_code=record.directive_code,
            section_code=record.section_code,
            clause_id=record.clause_id,
            domain=record.domain,
            requirement=record.text,
            facility_class=record.facility_class,
            reference=record.reference,
        )


# ── Requests ─────────────────────────────────────────────


class SearchRequirementsRequest(WireModel):
    standard: Optional[str] = None
    directive_code: Optional[str] = None
    facility_class: Optional[str] = None
    domain: Optional[str] = None
    query: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)


class GetReferenceRequest(WireModel):
    reference: str = ""


class GenerateChecklistRequest(WireModel):
    standards: list[str] = []
    facility_class: Optional[str] = None
    domains: Optional[list[str]] = None


# ── Responses ────────────────────────────────────────────


class SearchRequirementsResponse(WireModel):
    results: list[RequirementRecord] = []


class ChecklistResponse(WireModel):
    checklist: list[ChecklistItem] = []


class HealthResponse(WireModel):
    status: str = "ok"
    records_loaded: int = 0
    corpus_fingerprint: str = ""
    timestamp: str = ""


class ErrorResponse(WireModel):
    error: str
    reference: Optional[str] = None
