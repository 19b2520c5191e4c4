from enum import Enum

class SchemaVariant(str, Enum):
    DIRECTIVE_ROOTED = "DirectiveRooted"
    SECTION_ROOTED = "SectionRooted"
    GENERIC = "Generic"

class StandardDomain(str, Enum):
    FIRE = "fire"
    CYBER = "cyber"
    DATA_PROTECTION = "data_protection"
    SECURITY = "security"
    BUILDING = "building"
    BUSINESS_CONTINUITY = "business_continuity"
    MARITIME = "maritime"
    OPERATIONAL = "operational"
    PUBLIC_SAFETY = "public_safety"
    GENERAL = "general"
