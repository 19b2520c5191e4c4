"""
Standards Service — the three query operations over a built Corpus.

    service = StandardsService(corpus)
    service.search_requirements(SearchRequirementsRequest(standard="HCIS"))
    service.get_reference("HCIS_SEC SEC-01 4.4.1")
    service.generate_checklist(GenerateChecklistRequest(standards=["SBC_801"]))

Every operation is a side-effect-free linear scan; the service never
mutates its corpus, so one instance can serve any number of readers.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from standards_automation.config import Settings, get_settings
from standards_automation.models.errors import ReferenceNotFound, RequestValidationFailed
from standards_automation.models.schemas import (
    ChecklistItem,
    ChecklistResponse,
    GenerateChecklistRequest,
    HealthResponse,
    RequirementRecord,
    SearchRequirementsRequest,
    SearchRequirementsResponse,
)
from standards_automation.query.corpus import Corpus
from standards_automation.query.filters import checklist_records, search
from standards_automation.query.resolver import resolve_reference

logger = logging.getLogger(__name__)


class StandardsService:
    """Query facade handed to the API layer."""

    def __init__(self, corpus: Corpus, settings: Optional[Settings] = None):
        self.corpus = corpus
        self.settings = settings or get_settings()
        self._fingerprint = corpus.fingerprint()

    # ── Search ───────────────────────────────────────────

    def search_requirements(
        self, request: SearchRequirementsRequest
    ) -> SearchRequirementsResponse:
        if not any(
            [
                request.standard,
                request.directive_code,
                request.facility_class,
                request.domain,
                request.query,
            ]
        ):
            raise RequestValidationFailed(
                "At least one filter is required "
                "(standard, directiveCode, facilityClass, domain, or query)"
            )

        limit = request.limit or self.settings.default_search_limit
        limit = min(limit, self.settings.max_search_limit)

        results = search(
            self.corpus,
            standard=request.standard,
            directive_code=request.directive_code,
            facility_class=request.facility_class,
            domain=request.domain,
            query=request.query,
            limit=limit,
        )
        logger.debug(f"searchRequirements matched {len(results)} records (limit {limit})")
        return SearchRequirementsResponse(results=results)

    # ── Reference lookup ─────────────────────────────────

    def get_reference(self, reference: str) -> RequirementRecord:
        if not reference or not isinstance(reference, str) or not reference.strip():
            raise RequestValidationFailed("reference (string) is required")

        record = resolve_reference(self.corpus, reference)
        if record is None:
            raise ReferenceNotFound(reference)
        return record

    # ── Checklist ────────────────────────────────────────

    def generate_checklist(self, request: GenerateChecklistRequest) -> ChecklistResponse:
        if not request.standards:
            raise RequestValidationFailed("standards array is required and must not be empty")

        # facilityClass / domains are soft filters: a filter that would
        # leave nothing is dropped rather than enforced.
        records = checklist_records(
            self.corpus,
            request.standards,
            facility_class=request.facility_class,
            domains=request.domains,
        )
        logger.debug(f"generateChecklist selected {len(records)} of {len(self.corpus)} records")
        return ChecklistResponse(checklist=[ChecklistItem.from_record(r) for r in records])

    # ── Health ───────────────────────────────────────────

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="ok",
            records_loaded=len(self.corpus),
            corpus_fingerprint=self._fingerprint,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
