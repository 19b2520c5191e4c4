"""Shared fixtures for the standards_automation test suite."""

import pytest

from standards_automation.models.schemas import RequirementRecord
from standards_automation.query.corpus import Corpus


def build_record(**overrides) -> RequirementRecord:
    fields = {
        "standard": "HCIS_SEC",
        "directive_code": "SEC-01",
        "section_code": "4.4",
        "clause_id": "4.4.1",
        "title": "Security manager",
        "text": "The facility shall appoint a qualified security manager.",
        "facility_class": "",
        "domain": "security",
        "tags": (),
    }
    fields.update(overrides)
    fields.setdefault(
        "reference",
        f"{fields['standard']} {fields['directive_code']} {fields['section_code']} {fields['clause_id']}",
    )
    return RequirementRecord(**fields)


@pytest.fixture
def sample_corpus() -> Corpus:
    return Corpus(
        [
            build_record(facility_class="Class A"),
            build_record(
                clause_id="4.4.2",
                title="Guard licensing",
                text="Security guards shall hold a valid licence.",
                facility_class="Class B",
            ),
            build_record(
                directive_code="SEC-05",
                section_code="4.3",
                clause_id="4.3.2",
                title="Gates must be locked",
                text="4.3.2 Gates must be locked.",
            ),
            build_record(
                standard="SBC_801",
                directive_code="",
                section_code="903",
                clause_id="903.2.1",
                title="Assembly occupancies",
                text="An automatic sprinkler system shall be provided in Group A buildings.",
                facility_class="Group A",
                domain="fire",
            ),
            build_record(
                standard="SBC_801",
                directive_code="",
                section_code="906",
                clause_id="1",
                title="Portable extinguishers",
                text="Portable fire extinguishers shall be installed in all occupancies.",
                domain="fire",
            ),
        ]
    )


@pytest.fixture
def make_record():
    return build_record
