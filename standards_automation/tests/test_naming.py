"""
Tests: Standard / domain derivation from source identifiers.

Run with:
    pytest standards_automation/tests/test_naming.py -v
"""

import pytest

from standards_automation.ingestion.naming import domain_from_source, standard_from_source


class TestStandardFromSource:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("HCIS_SEC-01_Security_Directives.json", "HCIS_SEC"),
            ("SBC_801_Fire_Code.json", "SBC_801"),
            ("SBC_901_Mechanical.json", "SBC_901"),
            ("SASO_FIRE_equipment_regulation.json", "SASO_FIRE_TR"),
            ("SASO_FIRE_technical_regulation.json", "SASO_FIRE_TECH_REG"),
            ("NCA_ECC_2018.json", "NCA_ECC"),
            ("NCA_GECC_2023.json", "NCA_GECC"),
            ("NCA_OTCC.json", "NCA_CYBER"),
            ("NEOM_Operational_Security.json", "NEOM_OPS_SEC"),
            ("NEOM_Public Safety_Standard.json", "NEOM_PUB_SAFETY"),
            ("NEOM-SEC-SCH-2022.json", "NEOM_SEC_SCH"),
            ("SAMA_BCM_Framework.json", "SAMA_BCM"),
            ("SAMA_Cyber_Framework.json", "SAMA_CYBER"),
            ("PDPL_Implementing_Regulation.json", "SDAIA_DATA"),
            ("Civil Defense code requirements.json", "CIVIL_DEFENSE_CODE"),
            ("Civil Defense Regulations.json", "CIVIL_DEFENSE_REG"),
            ("MAWANI_Port_Security.json", "MAWANI_SEC"),
        ],
    )
    def test_known_families(self, source, expected):
        assert standard_from_source(source) == expected

    def test_fallback_first_two_tokens(self):
        assert standard_from_source("iso_27001_controls.json") == "ISO_27001"

    def test_fallback_single_token(self):
        assert standard_from_source("misc.json") == "MISC"

    def test_directory_prefix_is_ignored(self):
        assert standard_from_source("data/nested/HCIS_file.json") == "HCIS_SEC"

    def test_unknown_when_empty(self):
        assert standard_from_source(".json") == "UNKNOWN"


class TestDomainFromSource:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("SBC_801_Fire_Code.json", "fire"),
            ("civil_defense_rules.json", "fire"),
            ("NCA_ECC_2018.json", "cyber"),
            ("PDPL_Implementing_Regulation.json", "data_protection"),
            ("HCIS_SEC-01_Directives.json", "security"),
            ("SBC_201_Building.json", "building"),
            ("SAMA_BCM_Framework.json", "business_continuity"),
            ("port_maritime_rules.json", "maritime"),
            ("site_operational_manual.json", "operational"),
            ("city_public_safety.json", "public_safety"),
        ],
    )
    def test_filename_tokens(self, source, expected):
        assert domain_from_source(source) == expected

    def test_document_domain_fallback(self):
        assert domain_from_source("misc.json", {"domain": "Health"}) == "health"

    def test_general_fallback(self):
        assert domain_from_source("misc.json", [{"domain": "ignored"}]) == "general"
