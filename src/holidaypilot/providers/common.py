"""
Shared Rule Groups

Rules used by many jurisdictions. Jurisdictions pick from these groups and
adjust them by value (type, gating, substitution) with with_type() and
dataclasses.replace().

Groups:
- COMMON_HOLIDAYS: secular fixed-date holidays
- CHRISTIAN_HOLIDAYS: Western Christian feasts, fixed and Easter-based
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..calendars import EasterOffset, FixedDate
from ..models import HolidayRule, HolidayType


# =============================================================================
# Common Holidays
# =============================================================================

NEW_YEARS_DAY = HolidayRule("newYearsDay", FixedDate(1, 1))
INTERNATIONAL_WORKERS_DAY = HolidayRule("internationalWorkersDay", FixedDate(5, 1))

COMMON_HOLIDAYS: tuple[HolidayRule, ...] = (
    NEW_YEARS_DAY,
    INTERNATIONAL_WORKERS_DAY,
)


# =============================================================================
# Christian Holidays
# =============================================================================

GOOD_FRIDAY = HolidayRule("goodFriday", EasterOffset(-2))
EASTER = HolidayRule("easter", EasterOffset(0))
EASTER_MONDAY = HolidayRule("easterMonday", EasterOffset(1))
ASCENSION_DAY = HolidayRule("ascensionDay", EasterOffset(39))
PENTECOST = HolidayRule("pentecost", EasterOffset(49))
PENTECOST_MONDAY = HolidayRule("pentecostMonday", EasterOffset(50))
CORPUS_CHRISTI = HolidayRule("corpusChristi", EasterOffset(60))
ASSUMPTION_OF_MARY = HolidayRule("assumptionOfMary", FixedDate(8, 15))
REFORMATION_DAY = HolidayRule("reformationDay", FixedDate(10, 31))
ALL_SAINTS_DAY = HolidayRule("allSaintsDay", FixedDate(11, 1))
CHRISTMAS_DAY = HolidayRule("christmasDay", FixedDate(12, 25))
SECOND_CHRISTMAS_DAY = HolidayRule("secondChristmasDay", FixedDate(12, 26))
ST_STEPHENS_DAY = HolidayRule("stStephensDay", FixedDate(12, 26))

CHRISTIAN_HOLIDAYS: tuple[HolidayRule, ...] = (
    GOOD_FRIDAY,
    EASTER,
    EASTER_MONDAY,
    ASCENSION_DAY,
    PENTECOST,
    PENTECOST_MONDAY,
    CORPUS_CHRISTI,
    ASSUMPTION_OF_MARY,
    REFORMATION_DAY,
    ALL_SAINTS_DAY,
    CHRISTMAS_DAY,
    SECOND_CHRISTMAS_DAY,
    ST_STEPHENS_DAY,
)


# =============================================================================
# Helpers
# =============================================================================

def select(group: Iterable[HolidayRule], *keys: str) -> tuple[HolidayRule, ...]:
    """
    Pick rules from a group by key, in the order given.

    Raises:
        KeyError: If a key is not part of the group
    """
    by_key = {rule.key: rule for rule in group}
    return tuple(by_key[key] for key in keys)


def with_type(rules: Iterable[HolidayRule], holiday_type: HolidayType) -> tuple[HolidayRule, ...]:
    """Copies of rules with a different holiday type."""
    return tuple(replace(rule, type=holiday_type) for rule in rules)
