"""
HolidayPilot - Jurisdiction Holiday Computation Engine

HolidayPilot computes the public holidays and observances of a jurisdiction
for a given year, with localized names, time-zone aware start instants and
weekend substitution.

Key Features:
- Fixed, Easter-relative and nth-weekday date rules, plus custom functions
- Establishment/abolition years and per-period holiday types
- Subdivisions that inherit, remove and replace parent holidays
- Substitute holidays for dates falling on non-working days
- Locale fallback (sr_Latn_BA -> sr_Latn -> sr -> en) for holiday names
- YAML/JSON provider packs for additional jurisdictions

Quick Start:
    from holidaypilot import default_registry

    holidays = default_registry().holidays("Switzerland/Glarus", 2024)
    for holiday in holidays:
        print(holiday.date, holidays.name(holiday.key))

    holidays.is_working_day(date(2024, 4, 4))   # False

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "HolidayPilot Team"

# =============================================================================
# Date Calculations
# =============================================================================
from .calendars import (
    CustomDate,
    DateSpec,
    EasterOffset,
    FixedDate,
    NthWeekday,
    calculate_easter,
    nth_weekday_of_month,
    resolve_date,
    resolve_timezone,
)

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
    HolidayType,
    SearchDirection,
    # Holidays
    Holiday,
    HolidayCollection,
    # Rules
    HolidayRule,
    RulePeriod,
    SubstitutionPolicy,
    WEEKEND_SUBSTITUTION,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import compute_holidays
from .translations import TranslationResolver, locale_candidates
from .providers import BUILTIN_PROVIDERS, Provider
from .registry import ProviderRegistry, default_registry
from .packs import ProviderPackLoader, load_provider_pack, load_provider_pack_from_string

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    HolidayPilotError,
    InvalidDateError,
    InvalidRuleError,
    UnknownTimezoneError,
    DuplicateHolidayKeyError,
    SubstitutionBoundExceededError,
    HolidayNotFoundError,
    UnknownLocaleError,
    MissingTranslationError,
    CatalogLoadError,
    CatalogValidationError,
    UnknownProviderError,
    ProviderCycleError,
    ProviderConflictError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Dates
    "CustomDate",
    "DateSpec",
    "EasterOffset",
    "FixedDate",
    "NthWeekday",
    "calculate_easter",
    "nth_weekday_of_month",
    "resolve_date",
    "resolve_timezone",
    # Enums
    "HolidayType",
    "SearchDirection",
    # Holidays
    "Holiday",
    "HolidayCollection",
    # Rules
    "HolidayRule",
    "RulePeriod",
    "SubstitutionPolicy",
    "WEEKEND_SUBSTITUTION",
    # Engine
    "compute_holidays",
    "TranslationResolver",
    "locale_candidates",
    # Providers
    "BUILTIN_PROVIDERS",
    "Provider",
    "ProviderRegistry",
    "default_registry",
    # Packs
    "ProviderPackLoader",
    "load_provider_pack",
    "load_provider_pack_from_string",
    # Exceptions
    "HolidayPilotError",
    "InvalidDateError",
    "InvalidRuleError",
    "UnknownTimezoneError",
    "DuplicateHolidayKeyError",
    "SubstitutionBoundExceededError",
    "HolidayNotFoundError",
    "UnknownLocaleError",
    "MissingTranslationError",
    "CatalogLoadError",
    "CatalogValidationError",
    "UnknownProviderError",
    "ProviderCycleError",
    "ProviderConflictError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
]
