"""
Corpus — the finished, read-only collection of requirement records.

Built once by the ingestion pass and handed to the query layer. Records
keep their insertion order; there is no update, deletion or eviction.
"""

from __future__ import annotations

import hashlib
from collections import Counter
from typing import Iterable, Iterator, Sequence

from standards_automation.models.schemas import RequirementRecord


class Corpus(Sequence[RequirementRecord]):
    """Immutable, insertion-ordered sequence of records."""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[RequirementRecord] = ()):
        self._records: tuple[RequirementRecord, ...] = tuple(
            r for r in records if r.has_content()
        )

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RequirementRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Corpus({len(self._records)} records)"

    @property
    def records(self) -> tuple[RequirementRecord, ...]:
        return self._records

    def count_by_standard(self) -> dict[str, int]:
        return dict(Counter(r.standard for r in self._records))

    def fingerprint(self) -> str:
        """SHA-256 hex digest of the ordered references."""
        joined = "\n".join(r.reference for r in self._records)
        return hashlib.sha256(joined.encode("utf-8")).hexdigest()
