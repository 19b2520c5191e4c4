"""
API routes — thin HTTP layer that delegates to StandardsService.

Routes:
  GET  /health                          → API health check + loaded record count
  POST /standards/searchRequirements    → Filtered search over the corpus
  POST /standards/getReference          → Look up one record by reference
  POST /standards/generateChecklist     → Checklist for one or more standards
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from standards_automation.models.errors import InternalError, StandardsError
from standards_automation.models.schemas import (
    ChecklistResponse,
    GenerateChecklistRequest,
    GetReferenceRequest,
    HealthResponse,
    RequirementRecord,
    SearchRequirementsRequest,
    SearchRequirementsResponse,
)
from standards_automation.services.standards_service import StandardsService

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
standards_router = APIRouter()


def get_service(request: Request) -> StandardsService:
    """The service built at startup and stored on the application state."""
    return request.app.state.standards_service


# ── Health ───────────────────────────────────────────────

@health_router.get("/health", response_model=HealthResponse)
async def health_check(service: StandardsService = Depends(get_service)):
    return service.health()


# ── Search ───────────────────────────────────────────────

@standards_router.post("/searchRequirements", response_model=SearchRequirementsResponse)
async def search_requirements(
    body: SearchRequirementsRequest,
    service: StandardsService = Depends(get_service),
):
    try:
        return service.search_requirements(body)
    except StandardsError:
        raise
    except Exception as e:
        logger.exception(f"Error in searchRequirements: {e}")
        raise InternalError() from e


# ── Reference lookup ─────────────────────────────────────

@standards_router.post("/getReference", response_model=RequirementRecord)
async def get_reference(
    body: GetReferenceRequest,
    service: StandardsService = Depends(get_service),
):
    try:
        return service.get_reference(body.reference)
    except StandardsError:
        raise
    except Exception as e:
        logger.exception(f"Error in getReference: {e}")
        raise InternalError() from e


# ── Checklist ────────────────────────────────────────────

@standards_router.post("/generateChecklist", response_model=ChecklistResponse)
async def generate_checklist(
    body: GenerateChecklistRequest,
    service: StandardsService = Depends(get_service),
):
    try:
        return service.generate_checklist(body)
    except StandardsError:
        raise
    except Exception as e:
        logger.exception(f"Error in generateChecklist: {e}")
        raise InternalError() from e
