"""
Japan Holiday Provider

Holidays covered:
- New Year's Day (since 1948)
- Coming of Age Day (January 15 until 1999, second Monday of January since 2000)
- National Foundation Day (since 1966)
- Sports Day (October 10 from 1996, second Monday of October since 2000,
  moved for the Tokyo Olympics in 2020 and 2021; renamed in 2020)
- Culture Day (since 1948)

A holiday on a Sunday is substituted by the next day that is not a holiday
(substitute holiday law of 12 April 1973).

Reference: https://en.wikipedia.org/wiki/Public_holidays_in_Japan
"""
from __future__ import annotations

from datetime import date

from ..calendars import MONDAY, SUNDAY, CustomDate, FixedDate, nth_weekday_of_month
from ..models import HolidayRule, SubstitutionPolicy
from .base import Provider


SUBSTITUTE_HOLIDAY_POLICY = SubstitutionPolicy(
    non_working_days=frozenset({SUNDAY}),
    effective_from=date(1973, 4, 12),
)

# Olympic reschedules
SPORTS_DAY_OVERRIDES = {
    2020: date(2020, 7, 24),
    2021: date(2021, 7, 23),
}


def sports_day_date(year: int) -> date:
    """October 10 before 2000, second Monday of October after, Olympic years aside."""
    if year in SPORTS_DAY_OVERRIDES:
        return SPORTS_DAY_OVERRIDES[year]
    if year < 2000:
        return date(year, 10, 10)
    return nth_weekday_of_month(year, 10, MONDAY, 2)


def coming_of_age_day_date(year: int) -> date:
    if year < 2000:
        return date(year, 1, 15)
    return nth_weekday_of_month(year, 1, MONDAY, 2)


SPORTS_DAY_DATE = CustomDate(sports_day_date, "October 10 / second Monday of October")


JAPAN = Provider(
    code="JP",
    name="Japan",
    timezone="Asia/Tokyo",
    default_locale="ja_JP",
    rules=(
        HolidayRule(
            "newYearsDay",
            FixedDate(1, 1),
            establishment_year=1948,
            substitution=SUBSTITUTE_HOLIDAY_POLICY,
        ),
        HolidayRule(
            "comingOfAgeDay",
            CustomDate(coming_of_age_day_date, "January 15 / second Monday of January"),
            establishment_year=1948,
            substitution=SUBSTITUTE_HOLIDAY_POLICY,
        ),
        HolidayRule(
            "nationalFoundationDay",
            FixedDate(2, 11),
            establishment_year=1966,
            substitution=SUBSTITUTE_HOLIDAY_POLICY,
        ),
        HolidayRule(
            "sportsDay",
            SPORTS_DAY_DATE,
            translations={"en": "Health And Sports Day", "ja": "体育の日"},
            establishment_year=1996,
            abolition_year=2020,
            substitution=SUBSTITUTE_HOLIDAY_POLICY,
        ),
        HolidayRule(
            "sportsDay",
            SPORTS_DAY_DATE,
            translations={"en": "Sports Day", "ja": "スポーツの日"},
            establishment_year=2020,
            substitution=SUBSTITUTE_HOLIDAY_POLICY,
        ),
        HolidayRule(
            "cultureDay",
            FixedDate(11, 3),
            establishment_year=1948,
            substitution=SUBSTITUTE_HOLIDAY_POLICY,
        ),
    ),
    sources=(
        "https://en.wikipedia.org/wiki/Public_holidays_in_Japan",
        "https://www8.cao.go.jp/chosei/shukujitsu/gaiyou.html",
    ),
)

PROVIDERS: tuple[Provider, ...] = (JAPAN,)
