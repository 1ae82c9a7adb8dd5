"""
Ireland Holiday Provider

Holidays covered:
- New Year's Day (since 1974)
- St. Patrick's Day (since 1903)
- Easter Monday
- Christmas Day
- St. Stephen's Day

A holiday on a Saturday or Sunday gives a substitute on the next day that is
neither a weekend day nor another holiday (so Christmas and St. Stephen's
Day over a weekend become the following Monday and Tuesday).

Reference: https://en.wikipedia.org/wiki/Public_holidays_in_the_Republic_of_Ireland
"""
from __future__ import annotations

from dataclasses import replace

from ..calendars import FixedDate
from ..models import WEEKEND_SUBSTITUTION, HolidayRule
from .base import Provider
from .common import CHRISTMAS_DAY, EASTER_MONDAY, NEW_YEARS_DAY, ST_STEPHENS_DAY


ST_PATRICKS_DAY = HolidayRule(
    "stPatricksDay",
    FixedDate(3, 17),
    establishment_year=1903,
    substitution=WEEKEND_SUBSTITUTION,
)


IRELAND = Provider(
    code="IE",
    name="Ireland",
    timezone="Europe/Dublin",
    default_locale="en_IE",
    rules=(
        replace(NEW_YEARS_DAY, establishment_year=1974, substitution=WEEKEND_SUBSTITUTION),
        ST_PATRICKS_DAY,
        EASTER_MONDAY,
        replace(CHRISTMAS_DAY, substitution=WEEKEND_SUBSTITUTION),
        replace(ST_STEPHENS_DAY, substitution=WEEKEND_SUBSTITUTION),
    ),
    sources=("https://en.wikipedia.org/wiki/Public_holidays_in_the_Republic_of_Ireland",),
)

PROVIDERS: tuple[Provider, ...] = (IRELAND,)
