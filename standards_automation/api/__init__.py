"""
FastAPI application factory and API package.

Run with:
    uvicorn standards_automation.api:app --port 3000

Or via main.py:
    python -m standards_automation --serve
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from standards_automation.config import Settings, get_settings
from standards_automation.api.routes import health_router, standards_router
from standards_automation.ingestion.loader import ingest_directory
from standards_automation.models.errors import (
    InternalError,
    ReferenceNotFound,
    RequestValidationFailed,
    StandardsError,
)
from standards_automation.models.schemas import ErrorResponse
from standards_automation.query.corpus import Corpus
from standards_automation.services.standards_service import StandardsService

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, reference: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=message, reference=reference)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _register_error_handlers(application: FastAPI) -> None:
    """Map the error taxonomy onto status codes and ``{"error": ...}`` bodies."""

    @application.exception_handler(RequestValidationFailed)
    async def on_validation_failed(request: Request, exc: RequestValidationFailed):
        return _error(400, exc.message)

    @application.exception_handler(RequestValidationError)
    async def on_malformed_body(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        return _error(400, f"Invalid request body: {details}")

    @application.exception_handler(ReferenceNotFound)
    async def on_reference_not_found(request: Request, exc: ReferenceNotFound):
        return _error(404, exc.message, reference=exc.reference)

    @application.exception_handler(StandardsError)
    async def on_standards_error(request: Request, exc: StandardsError):
        # InternalError and anything unexpected: never leak internal state
        if not isinstance(exc, InternalError):
            logger.error(f"Unhandled service error: {exc}")
        return _error(500, InternalError.message)


def create_app(
    corpus: Optional[Corpus] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Application factory — create and configure the FastAPI instance.

    With no ``corpus`` the data directory is ingested once at startup;
    passing one (tests, embedding) skips ingestion entirely.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if corpus is None:
            logger.info(f"Ingesting source documents from {settings.data_dir}")
            built = ingest_directory(settings.data_dir, settings.data_glob)
            application.state.standards_service = StandardsService(built, settings)
        logger.info(f"Starting {settings.app_name} API")
        logger.info(
            f"Loaded {len(application.state.standards_service.corpus)} normalized records"
        )
        yield

    application = FastAPI(
        title=settings.app_name,
        description="Search, reference lookup and checklists over normalized standards requirements",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    if corpus is not None:
        application.state.standards_service = StandardsService(corpus, settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register route groups
    application.include_router(health_router, tags=["Health"])
    application.include_router(standards_router, prefix="/standards", tags=["Standards"])
    _register_error_handlers(application)

    return application


# Module-level instance for `uvicorn standards_automation.api:app`
app = create_app()
