"""
Germany Holiday Provider

National holidays:
- New Year's Day, Good Friday, Easter Monday, International Workers' Day
  (since 1933), Ascension Day, Whit Monday, German Unity Day (since 1990),
  Christmas Day, Second Christmas Day
- Reformation Day in 2017 only (500th anniversary)

States:
- Thuringia: Reformation Day since 1517, World Children's Day since 2019
- Saarland: Corpus Christi, Assumption of Mary, All Saints' Day

Reference: https://en.wikipedia.org/wiki/Public_holidays_in_Germany
"""
from __future__ import annotations

from dataclasses import replace

from ..calendars import FixedDate
from ..models import HolidayRule, HolidayType
from .base import Provider
from .common import (
    ALL_SAINTS_DAY,
    ASCENSION_DAY,
    ASSUMPTION_OF_MARY,
    CHRISTMAS_DAY,
    CORPUS_CHRISTI,
    EASTER_MONDAY,
    GOOD_FRIDAY,
    INTERNATIONAL_WORKERS_DAY,
    NEW_YEARS_DAY,
    PENTECOST_MONDAY,
    REFORMATION_DAY,
    SECOND_CHRISTMAS_DAY,
)


# =============================================================================
# Rules
# =============================================================================

GERMAN_UNITY_DAY = HolidayRule(
    "germanUnityDay",
    FixedDate(10, 3),
    establishment_year=1990,
)

# Nationwide once, for the 500th anniversary of the Reformation
REFORMATION_DAY_500 = replace(
    REFORMATION_DAY,
    establishment_year=2017,
    abolition_year=2018,
)

WORLD_CHILDRENS_DAY = HolidayRule(
    "worldChildrensDay",
    FixedDate(9, 20),
    translations={"de": "Weltkindertag"},
    establishment_year=2019,
)


# =============================================================================
# Providers
# =============================================================================

GERMANY = Provider(
    code="DE",
    name="Germany",
    timezone="Europe/Berlin",
    default_locale="de_DE",
    rules=(
        NEW_YEARS_DAY,
        GOOD_FRIDAY,
        EASTER_MONDAY,
        replace(INTERNATIONAL_WORKERS_DAY, establishment_year=1933),
        ASCENSION_DAY,
        PENTECOST_MONDAY,
        GERMAN_UNITY_DAY,
        REFORMATION_DAY_500,
        CHRISTMAS_DAY,
        SECOND_CHRISTMAS_DAY,
    ),
    sources=(
        "https://en.wikipedia.org/wiki/Public_holidays_in_Germany",
        "https://de.wikipedia.org/wiki/Gesetzliche_Feiertage_in_Deutschland",
    ),
)

THURINGIA = GERMANY.subdivision(
    code="DE-TH",
    name="Germany/Thuringia",
    rules=(
        replace(REFORMATION_DAY, establishment_year=1517, replaces="reformationDay"),
        WORLD_CHILDRENS_DAY,
    ),
    sources=("https://en.wikipedia.org/wiki/Thuringia",),
)

SAARLAND = GERMANY.subdivision(
    code="DE-SL",
    name="Germany/Saarland",
    rules=(
        CORPUS_CHRISTI,
        replace(ASSUMPTION_OF_MARY, type=HolidayType.OTHER),
        ALL_SAINTS_DAY,
    ),
    sources=("https://en.wikipedia.org/wiki/Saarland",),
)

PROVIDERS: tuple[Provider, ...] = (GERMANY, THURINGIA, SAARLAND)
