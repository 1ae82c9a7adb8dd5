"""
HolidayPilot Providers

Jurisdiction rule sets.

Provides:
- Provider: immutable rule set with optional parent jurisdiction
- Shared rule groups (COMMON_HOLIDAYS, CHRISTIAN_HOLIDAYS)
- Built-in jurisdictions: Switzerland (+ Glarus, St. Gallen, Vaud),
  Germany (+ Thuringia, Saarland), Japan, Ireland

Usage:
    from holidaypilot.providers import GLARUS

    holidays = GLARUS.holidays(2024)
    holidays.name("naefelserFahrt")   # 'Näfelser Fahrt'
"""
from __future__ import annotations

from . import germany, ireland, japan, switzerland
from .base import Provider
from .common import CHRISTIAN_HOLIDAYS, COMMON_HOLIDAYS, select, with_type
from .germany import GERMANY, SAARLAND, THURINGIA
from .ireland import IRELAND
from .japan import JAPAN
from .switzerland import GLARUS, ST_GALLEN, SWITZERLAND, VAUD

BUILTIN_PROVIDERS: tuple[Provider, ...] = (
    switzerland.PROVIDERS
    + germany.PROVIDERS
    + japan.PROVIDERS
    + ireland.PROVIDERS
)

__all__ = [
    "Provider",
    "BUILTIN_PROVIDERS",
    # Rule groups
    "COMMON_HOLIDAYS",
    "CHRISTIAN_HOLIDAYS",
    "select",
    "with_type",
    # Jurisdictions
    "SWITZERLAND",
    "GLARUS",
    "ST_GALLEN",
    "VAUD",
    "GERMANY",
    "THURINGIA",
    "SAARLAND",
    "JAPAN",
    "IRELAND",
]
