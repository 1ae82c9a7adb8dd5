"""
Switzerland Holiday Provider

National holidays:
- Swiss National Day (August 1). Celebrated in 1891 and yearly since 1899,
  official national holiday only since 1994.

Cantons (regional holidays, typed OTHER):
- Glarus: adds Näfelser Fahrt (first Thursday of April, one week later when
  that Thursday is Maundy Thursday)
- St. Gallen
- Vaud: adds Lundi du Jeûne (Monday after the third Sunday of September)

Reference: https://en.wikipedia.org/wiki/Public_holidays_in_Switzerland
"""
from __future__ import annotations

from datetime import date, timedelta

from ..calendars import (
    SUNDAY,
    THURSDAY,
    CustomDate,
    FixedDate,
    NthWeekday,
    calculate_easter,
    nth_weekday_of_month,
)
from ..models import HolidayRule, HolidayType, RulePeriod
from .base import Provider
from .common import CHRISTIAN_HOLIDAYS, NEW_YEARS_DAY, select, with_type


# =============================================================================
# Rules
# =============================================================================

SWISS_NATIONAL_DAY = HolidayRule(
    "swissNationalDay",
    FixedDate(8, 1),
    translations={
        "en": "National Day",
        "fr": "Jour de la fête nationale",
        "de": "Bundesfeiertag",
        "it": "Giorno festivo federale",
        "rm": "Fiasta naziunala",
    },
    periods=(
        RulePeriod(1891, 1892, HolidayType.OBSERVANCE),
        RulePeriod(1899, 1994, HolidayType.OBSERVANCE),
        RulePeriod(1994, None, HolidayType.OFFICIAL),
    ),
)

BERCHTOLDS_TAG = HolidayRule(
    "berchtoldsTag",
    FixedDate(1, 2),
    type=HolidayType.OTHER,
    translations={
        "de": "Berchtoldstag",
        "fr": "Jour de la Saint-Berthold",
        "en": "Berchtoldstag",
    },
)

# Federal Day of Thanksgiving, Repentance and Prayer is the third Sunday of
# September; Vaud observes the Monday after.
BETTAGS_MONTAG = HolidayRule(
    "bettagsMontag",
    NthWeekday(month=9, weekday=SUNDAY, ordinal=3, offset_days=1),
    type=HolidayType.OTHER,
    translations={
        "fr": "Jeûne fédéral",
        "de": "Eidgenössischer Dank-, Buss- und Bettag",
        "it": "Festa federale di ringraziamento, pentimento e preghiera",
        "en": "Federal Day of Thanksgiving, Repentance and Prayer",
    },
    establishment_year=1832,
)


def naefelser_fahrt_date(year: int) -> date:
    """First Thursday of April, moved a week when it falls on Maundy Thursday."""
    first_thursday = nth_weekday_of_month(year, 4, THURSDAY, 1)
    if first_thursday == calculate_easter(year) - timedelta(days=3):
        return first_thursday + timedelta(weeks=1)
    return first_thursday


NAEFELSER_FAHRT = HolidayRule(
    "naefelserFahrt",
    CustomDate(naefelser_fahrt_date, "first Thursday of April, skipping Maundy Thursday"),
    type=HolidayType.OTHER,
    translations={
        "de": "Näfelser Fahrt",
        "en": "Battle of Naefels Victory Day",
        "fr": "Bataille de Näfels",
    },
    establishment_year=1389,
)


# =============================================================================
# Providers
# =============================================================================

SWITZERLAND = Provider(
    code="CH",
    name="Switzerland",
    timezone="Europe/Zurich",
    default_locale="de_CH",
    rules=(SWISS_NATIONAL_DAY,),
    sources=(
        "https://en.wikipedia.org/wiki/Public_holidays_in_Switzerland",
        "https://fr.wikipedia.org/wiki/Jours_f%C3%A9ri%C3%A9s_en_Suisse",
        "https://it.wikipedia.org/wiki/Festivit%C3%A0_in_Svizzera",
    ),
)

GLARUS = SWITZERLAND.subdivision(
    code="CH-GL",
    name="Switzerland/Glarus",
    rules=(
        with_type((NEW_YEARS_DAY,), HolidayType.OTHER)
        + (BERCHTOLDS_TAG, NAEFELSER_FAHRT)
        + with_type(
            select(
                CHRISTIAN_HOLIDAYS,
                "goodFriday",
                "easterMonday",
                "ascensionDay",
                "pentecostMonday",
                "allSaintsDay",
                "christmasDay",
                "stStephensDay",
            ),
            HolidayType.OTHER,
        )
    ),
    sources=("https://de.wikipedia.org/wiki/Feiertage_in_der_Schweiz",),
)

ST_GALLEN = SWITZERLAND.subdivision(
    code="CH-SG",
    name="Switzerland/StGallen",
    rules=(
        with_type((NEW_YEARS_DAY,), HolidayType.OTHER)
        + with_type(
            select(
                CHRISTIAN_HOLIDAYS,
                "goodFriday",
                "easterMonday",
                "ascensionDay",
                "pentecostMonday",
                "allSaintsDay",
                "christmasDay",
                "stStephensDay",
            ),
            HolidayType.OTHER,
        )
    ),
    sources=("https://de.wikipedia.org/wiki/Feiertage_in_der_Schweiz",),
)

VAUD = SWITZERLAND.subdivision(
    code="CH-VD",
    name="Switzerland/Vaud",
    default_locale="fr_CH",
    rules=(
        with_type((NEW_YEARS_DAY,), HolidayType.OTHER)
        + (BERCHTOLDS_TAG,)
        + with_type(
            select(
                CHRISTIAN_HOLIDAYS,
                "goodFriday",
                "easterMonday",
                "ascensionDay",
                "pentecostMonday",
            ),
            HolidayType.OTHER,
        )
        + (BETTAGS_MONTAG,)
        + with_type(select(CHRISTIAN_HOLIDAYS, "christmasDay"), HolidayType.OTHER)
    ),
    sources=("https://fr.wikipedia.org/wiki/Jours_f%C3%A9ri%C3%A9s_en_Suisse",),
)

PROVIDERS: tuple[Provider, ...] = (SWITZERLAND, GLARUS, ST_GALLEN, VAUD)
