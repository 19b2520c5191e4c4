"""
Reference resolution — find a record from a free-form reference string.

"HCIS SEC-01 4.4.1", "hcis_sec sec-01 4.4.1" and "SEC-01 4.4.1" should all
reach the record stored as "HCIS_SEC SEC-01 4.4.1".
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from standards_automation.models.schemas import RequirementRecord

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_reference(reference: str) -> str:
    """Lower-case, underscores to spaces, collapse whitespace, trim."""
    if not reference:
        return ""
    return _WHITESPACE_RE.sub(" ", reference.lower().replace("_", " ")).strip()


def resolve_reference(
    records: Iterable[RequirementRecord], reference: str
) -> Optional[RequirementRecord]:
    """Exact normalized match first, then the first suffix match."""
    wanted = normalize_reference(reference)
    if not wanted:
        return None

    normalized = [(normalize_reference(r.reference), r) for r in records]

    for ref, record in normalized:
        if ref == wanted:
            return record

    for ref, record in normalized:
        if ref.endswith(wanted):
            return record

    return None
