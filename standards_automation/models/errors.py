"""
Error taxonomy shared by ingestion, the query layer and the API.

The API maps each subclass to a status code; nothing here knows about HTTP.
"""

from __future__ import annotations


class StandardsError(Exception):
    """Base class for every error the service raises on purpose."""

    message = "Standards service error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class RequestValidationFailed(StandardsError):
    """The caller omitted a required filter or array."""

    message = "Invalid request"


class ReferenceNotFound(StandardsError):
    """No record matched a reference lookup."""

    message = "Reference not found"

    def __init__(self, reference: str):
        super().__init__(self.message)
        self.reference = reference


class IngestionError(StandardsError):
    """One source document could not be read or parsed."""

    message = "Failed to ingest document"

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class InternalError(StandardsError):
    """Unexpected fault while evaluating a query."""

    message = "Internal server error"
