"""Services — StandardsService."""

from standards_automation.services.standards_service import StandardsService

__all__ = ["StandardsService"]
