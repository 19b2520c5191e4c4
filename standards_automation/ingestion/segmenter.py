"""
Text segmentation — split free-running clause text into atomic requirements.

Used when a section carries only a ``content`` string. Strategies are tried
in priority order and the first one that returns records wins:

  1. numbered clauses   "4.1.1 ...", "4.2.3.1 ..."   (needs >= 2 usable matches)
  2. articles           "Article (1): ..."           (needs >= 2 usable matches)
  3. bare sections      "4.1 ..."                    (needs >= 2 usable matches)
  4. paragraphs         blank-line separated blocks  (text > 200 chars)
  5. whole text         one record                   (text > 100 chars)

Segmentation is pattern based only; there is no sentence or clause
boundary detection beyond the numeric / "Article (" cues. A record's text
keeps its clause label ("4.3.1 Fences must be 2m."); its title is the first
sentence of the body after the label.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from standards_automation.ingestion.assembler import (
    ClauseContext,
    build_record,
    collapse_whitespace,
    first_sentence,
)
from standards_automation.models.schemas import RequirementRecord

logger = logging.getLogger(__name__)

MIN_CASCADE_MATCHES = 2
MIN_CLAUSE_LENGTH = 20
PARAGRAPH_MIN_TEXT_LENGTH = 200
PARAGRAPH_LONG_LENGTH = 100
PARAGRAPH_SHORT_LENGTH = 50
PARAGRAPH_MANY = 3
WHOLE_TEXT_MIN_LENGTH = 100

# ── Patterns ─────────────────────────────────────────────

_ARTICLE_MARKER = r"\s*Article\s*\("

NUMBERED_CLAUSE_RE = re.compile(
    r"(?<!\S)(?P<label>\d+(?:\.\d+){1,3})\.?\s+(?P<body>.+?)"
    r"(?=\s+\d+(?:\.\d+){1,3}\.?\s|" + _ARTICLE_MARKER + r"|\s*\Z)",
    re.DOTALL,
)

ARTICLE_RE = re.compile(
    r"Article\s*\((?P<label>\d+)\)\s*:?\s*(?P<body>.+?)"
    r"(?=" + _ARTICLE_MARKER + r"|\s*\Z)",
    re.DOTALL | re.IGNORECASE,
)

BARE_SECTION_RE = re.compile(
    r"(?<!\S)(?P<label>\d+\.\d+)\.?\s+(?P<body>.+?)"
    r"(?=\s+\d+\.\d+\.?\s|" + _ARTICLE_MARKER + r"|\s*\Z)",
    re.DOTALL,
)

_BLANK_LINE_RE = re.compile(r"\n\s*\n")

Strategy = Callable[[str, ClauseContext], Optional[list[RequirementRecord]]]


def _segment_record(
    context: ClauseContext, clause_id: str, text: str, title: str
) -> Optional[RequirementRecord]:
    return build_record(context, clause_id=clause_id, text=text, title=title)


# ── Strategies ───────────────────────────────────────────


def pattern_strategy(pattern: re.Pattern[str]) -> Strategy:
    """Build a cascade strategy that emits one record per labelled match."""

    def strategy(text: str, context: ClauseContext) -> Optional[list[RequirementRecord]]:
        records: list[RequirementRecord] = []
        for ordinal, match in enumerate(pattern.finditer(text), start=1):
            segment = collapse_whitespace(match.group(0))
            if len(segment) <= MIN_CLAUSE_LENGTH:
                continue
            clause_id = match.group("label") or str(ordinal)
            body = collapse_whitespace(match.group("body"))
            title = first_sentence(body) or f"Clause {clause_id}"
            record = _segment_record(context, clause_id, segment, title)
            if record is not None:
                records.append(record)

        if len(records) < MIN_CASCADE_MATCHES:
            return None
        return records

    strategy.__name__ = f"pattern_strategy[{pattern.pattern[:24]}]"
    return strategy


def paragraph_strategy(
    text: str, context: ClauseContext
) -> Optional[list[RequirementRecord]]:
    """One record per blank-line separated paragraph."""
    if len(text) <= PARAGRAPH_MIN_TEXT_LENGTH:
        return None

    paragraphs = [collapse_whitespace(p) for p in _BLANK_LINE_RE.split(text)]
    long_paragraphs = [p for p in paragraphs if len(p) > PARAGRAPH_LONG_LENGTH]

    # Only paragraphs over the long floor survive; with a few of them the
    # per-record floor drops to the short length.
    if len(long_paragraphs) > PARAGRAPH_MANY:
        kept = long_paragraphs
    else:
        kept = [p for p in long_paragraphs if len(p) > PARAGRAPH_SHORT_LENGTH]

    records: list[RequirementRecord] = []
    for number, paragraph in enumerate(kept, start=1):
        title = first_sentence(paragraph) or f"Requirement {number}"
        record = _segment_record(context, str(number), paragraph, title)
        if record is not None:
            records.append(record)
    return records or None


def whole_text_strategy(
    text: str, context: ClauseContext
) -> Optional[list[RequirementRecord]]:
    """Last resort: the entire cleaned text as a single record."""
    cleaned = collapse_whitespace(text)
    if len(text) <= WHOLE_TEXT_MIN_LENGTH or not cleaned:
        return None

    title = first_sentence(cleaned) or context.section_code or "Requirement"
    record = _segment_record(context, "1", cleaned, title)
    return [record] if record is not None else None


SEGMENTATION_STRATEGIES: list[Strategy] = [
    pattern_strategy(NUMBERED_CLAUSE_RE),
    pattern_strategy(ARTICLE_RE),
    pattern_strategy(BARE_SECTION_RE),
    paragraph_strategy,
    whole_text_strategy,
]


def segment_text(text: str, context: ClauseContext) -> list[RequirementRecord]:
    """Split ``text`` into requirement records using the first strategy that applies."""
    if not text or not text.strip():
        return []

    for strategy in SEGMENTATION_STRATEGIES:
        records = strategy(text, context)
        if records:
            logger.debug(
                f"{context.standard} {context.directive_code} {context.section_code}: "
                f"{strategy.__name__} produced {len(records)} records"
            )
            return records

    return []
