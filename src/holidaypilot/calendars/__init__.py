"""
HolidayPilot Calendars

Calendar arithmetic used by holiday rules.

Provides:
- Easter Sunday (anonymous Gregorian algorithm)
- Fixed, Easter-relative and nth-weekday date specifications
- resolve_date() dispatcher for rule evaluation
- resolve_timezone() for anchoring dates to local midnight

Usage:
    from holidaypilot.calendars import NthWeekday, MONDAY, resolve_date

    # Second Monday of October
    resolve_date(NthWeekday(month=10, weekday=MONDAY, ordinal=2), 2022)
"""
from __future__ import annotations

from .dates import (
    FRIDAY,
    LAST,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    CustomDate,
    DateSpec,
    EasterOffset,
    FixedDate,
    NthWeekday,
    calculate_easter,
    check_year,
    easter_offset,
    fixed_date,
    nth_weekday_of_month,
    resolve_date,
)
from .timezones import local_midnight, resolve_timezone

__all__ = [
    # Weekdays
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    "LAST",
    # Specifications
    "DateSpec",
    "FixedDate",
    "EasterOffset",
    "NthWeekday",
    "CustomDate",
    # Resolvers
    "calculate_easter",
    "check_year",
    "easter_offset",
    "fixed_date",
    "nth_weekday_of_month",
    "resolve_date",
    # Timezones
    "resolve_timezone",
    "local_midnight",
]
