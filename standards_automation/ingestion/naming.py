"""
Derive ``standard`` and ``domain`` from a source document's identifier.

Source files are named after the issuing organization and document
(``HCIS_SEC-01_Security_Directives.json``, ``SBC_801_Fire_Code.json``);
ordered substring checks map them onto short family codes. The first
matching rule wins, so more specific tokens are listed before broader ones.
"""

from __future__ import annotations

from typing import Any

from standards_automation.models.enums import StandardDomain

# (required token, [(sub-token, code), ...], default code)
_STANDARD_RULES: list[tuple[tuple[str, ...], list[tuple[str, str]], str]] = [
    (("HCIS",), [], "HCIS_SEC"),
    (("SBC_801",), [], "SBC_801"),
    (("SBC_901",), [], "SBC_901"),
    (("SASO_FIRE",), [("equipment", "SASO_FIRE_TR")], "SASO_FIRE_TECH_REG"),
    (("NCA",), [("GECC", "NCA_GECC"), ("ECC", "NCA_ECC")], "NCA_CYBER"),
    (
        ("NEOM",),
        [
            ("Operational", "NEOM_OPS_SEC"),
            ("Public Safety", "NEOM_PUB_SAFETY"),
            ("SEC-SCH", "NEOM_SEC_SCH"),
        ],
        "NEOM",
    ),
    (("SAMA",), [("BCM", "SAMA_BCM")], "SAMA_CYBER"),
    (("SDAIA", "NDMO", "PDPL"), [], "SDAIA_DATA"),
    (("Civil Defense",), [("code", "CIVIL_DEFENSE_CODE")], "CIVIL_DEFENSE_REG"),
    (("MAWANI",), [], "MAWANI_SEC"),
]

# Checked against the lower-cased identifier, in order.
_DOMAIN_RULES: list[tuple[tuple[str, ...], StandardDomain]] = [
    (("fire", "civil_defense"), StandardDomain.FIRE),
    (("cyber", "nca"), StandardDomain.CYBER),
    (("data", "pdpl", "ndmo"), StandardDomain.DATA_PROTECTION),
    (("security", "hcis", "mawani", "neom"), StandardDomain.SECURITY),
    (("building", "sbc"), StandardDomain.BUILDING),
    (("bcm", "business_continuity"), StandardDomain.BUSINESS_CONTINUITY),
    (("maritime",), StandardDomain.MARITIME),
    (("operational",), StandardDomain.OPERATIONAL),
    (("public_safety",), StandardDomain.PUBLIC_SAFETY),
]


def _stem(source: str) -> str:
    name = source.replace("\\", "/").rsplit("/", 1)[-1]
    if name.lower().endswith(".json"):
        name = name[: -len(".json")]
    return name


def standard_from_source(source: str) -> str:
    """Map a source identifier to its standard family code."""
    name = _stem(source)

    for tokens, refinements, default in _STANDARD_RULES:
        if not any(token in name for token in tokens):
            continue
        for sub_token, code in refinements:
            if sub_token in name:
                return code
        return default

    # Fallback: first two underscore-separated tokens
    parts = [p for p in name.split("_") if p]
    return "_".join(parts[:2]).upper() or "UNKNOWN"


def domain_from_source(source: str, document: Any = None) -> str:
    """Map a source identifier (or the document's own ``domain``) to a topical tag."""
    name = _stem(source).lower()

    for tokens, domain in _DOMAIN_RULES:
        if any(token in name for token in tokens):
            return domain.value

    if isinstance(document, dict) and document.get("domain"):
        return str(document["domain"]).lower()

    return StandardDomain.GENERAL.value
