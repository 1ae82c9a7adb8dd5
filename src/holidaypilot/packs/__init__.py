"""
HolidayPilot Provider Packs

YAML/JSON definitions of jurisdictions, validated with pydantic and converted
to Provider instances.
"""
from .loader import (
    BUILTIN_DATE_FUNCTIONS,
    ProviderPackLoader,
    load_provider_pack,
    load_provider_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    DateSchema,
    ProviderPackSchema,
    RuleSchema,
    SubstitutionSchema,
    check_schema_version,
    validate_provider_pack,
)

__all__ = [
    "BUILTIN_DATE_FUNCTIONS",
    "ProviderPackLoader",
    "load_provider_pack",
    "load_provider_pack_from_string",
    "SCHEMA_VERSION",
    "DateSchema",
    "ProviderPackSchema",
    "RuleSchema",
    "SubstitutionSchema",
    "check_schema_version",
    "validate_provider_pack",
]
