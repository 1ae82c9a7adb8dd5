"""
HolidayPilot Models

Domain models:
- HolidayType: closed holiday classification
- Holiday: one dated, named, typed holiday
- HolidayRule / RulePeriod / SubstitutionPolicy: declarative rules
- HolidayCollection: ordered, key-unique result set for one year
"""
from __future__ import annotations

from .enums import HolidayType, SearchDirection
from .holiday import SUBSTITUTE_PREFIX, Holiday, substitute_key
from .rules import WEEKEND_SUBSTITUTION, HolidayRule, RulePeriod, SubstitutionPolicy
from .collection import DEFAULT_WEEKEND, HolidayCollection

__all__ = [
    # Enums
    "HolidayType",
    "SearchDirection",
    # Holiday
    "Holiday",
    "SUBSTITUTE_PREFIX",
    "substitute_key",
    # Rules
    "HolidayRule",
    "RulePeriod",
    "SubstitutionPolicy",
    "WEEKEND_SUBSTITUTION",
    # Collection
    "HolidayCollection",
    "DEFAULT_WEEKEND",
]
