"""
HolidayPilot Date Resolution

Pure functions that turn an abstract date specification plus a year into a
concrete calendar date.

Supported specifications:
- FixedDate: month/day (e.g., 1 August)
- EasterOffset: days relative to Western Easter Sunday
- NthWeekday: nth (or nth-last) weekday of a month, plus an optional offset
- CustomDate: a pure function of the year for irregular rules

All dates are proleptic Gregorian.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Callable, Union

from ..exceptions import InvalidDateError, InvalidRuleError


# Weekday numbers (0=Monday, 6=Sunday), matching date.weekday()
MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

LAST = -1


# =============================================================================
# Core Algorithms
# =============================================================================

def calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western Christianity.
    """
    check_year(year)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def fixed_date(year: int, month: int, day: int) -> date:
    """
    Build a fixed calendar date.

    Raises:
        InvalidDateError: If the month/day combination does not exist in the year
    """
    check_year(year)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(
            message=f"{year:04d}-{month:02d}-{day:02d} is not a valid date",
            details={"year": year, "month": month, "day": day, "error": str(e)},
        )


def easter_offset(year: int, days: int) -> date:
    """Get the date `days` away from Easter Sunday (negative = before)."""
    return calculate_easter(year) + timedelta(days=days)


def nth_weekday_of_month(year: int, month: int, weekday: int, ordinal: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        ordinal: Which occurrence (1=first, ..., 5=fifth, -1=last, -2=second last)

    Returns:
        The date of the nth weekday

    Raises:
        InvalidRuleError: If the ordinal or weekday is out of range
        InvalidDateError: If the month has no such occurrence (e.g. no 5th Friday)
    """
    if ordinal == 0 or abs(ordinal) > 5:
        raise InvalidRuleError(
            message=f"Weekday ordinal must be in 1..5 or -1..-5, got {ordinal}",
            details={"ordinal": ordinal},
        )
    if not 0 <= weekday <= 6:
        raise InvalidRuleError(
            message=f"Weekday must be in 0..6, got {weekday}",
            details={"weekday": weekday},
        )
    first_day = fixed_date(year, month, 1)

    if ordinal > 0:
        days_until_weekday = (weekday - first_day.weekday()) % 7
        first_occurrence = first_day + timedelta(days=days_until_weekday)
        result = first_occurrence + timedelta(weeks=ordinal - 1)
    else:
        last_day = date(year, month, calendar.monthrange(year, month)[1])
        days_since_weekday = (last_day.weekday() - weekday) % 7
        last_occurrence = last_day - timedelta(days=days_since_weekday)
        result = last_occurrence - timedelta(weeks=-ordinal - 1)

    if result.month != month:
        raise InvalidDateError(
            message=(
                f"{calendar.month_name[month]} {year} has no occurrence "
                f"{ordinal} of {calendar.day_name[weekday]}"
            ),
            details={"year": year, "month": month, "weekday": weekday, "ordinal": ordinal},
        )
    return result


def check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(
            message=f"Year {year} is outside the supported range {MINYEAR}..{MAXYEAR}",
            details={"year": year},
        )


# =============================================================================
# Date Specifications
# =============================================================================

@dataclass(frozen=True)
class FixedDate:
    """Same month and day every year."""
    month: int
    day: int

    def describe(self) -> str:
        return f"{calendar.month_name[self.month]} {self.day}"


@dataclass(frozen=True)
class EasterOffset:
    """Day offset from Easter Sunday (-2 = Good Friday, +1 = Easter Monday)."""
    days: int = 0

    def describe(self) -> str:
        if self.days == 0:
            return "Easter Sunday"
        return f"Easter Sunday {self.days:+d} days"


@dataclass(frozen=True)
class NthWeekday:
    """
    Nth weekday of a month, optionally shifted by a fixed number of days.

    Example: third Sunday of September plus one day (Swiss Lundi du Jeûne)
        NthWeekday(month=9, weekday=SUNDAY, ordinal=3, offset_days=1)
    """
    month: int
    weekday: int
    ordinal: int
    offset_days: int = 0

    def describe(self) -> str:
        which = "last" if self.ordinal == LAST else f"#{self.ordinal}"
        text = f"{which} {calendar.day_name[self.weekday]} of {calendar.month_name[self.month]}"
        if self.offset_days:
            text += f" {self.offset_days:+d} days"
        return text


@dataclass(frozen=True)
class CustomDate:
    """
    Irregular date logic expressed as a pure function of the year.

    Reserved for genuinely irregular rules, such as one-off reschedules.
    """
    function: Callable[[int], date]
    description: str = ""

    def describe(self) -> str:
        return self.description or getattr(self.function, "__name__", "custom")


DateSpec = Union[FixedDate, EasterOffset, NthWeekday, CustomDate]


def resolve_date(spec: DateSpec, year: int) -> date:
    """
    Resolve a date specification for a year.

    Raises:
        InvalidDateError: If the resulting date is impossible
        InvalidRuleError: If the specification is malformed
    """
    if isinstance(spec, FixedDate):
        return fixed_date(year, spec.month, spec.day)

    if isinstance(spec, EasterOffset):
        return easter_offset(year, spec.days)

    if isinstance(spec, NthWeekday):
        anchor = nth_weekday_of_month(year, spec.month, spec.weekday, spec.ordinal)
        return anchor + timedelta(days=spec.offset_days)

    if isinstance(spec, CustomDate):
        check_year(year)
        result = spec.function(year)
        if not isinstance(result, date) or result.year != year:
            raise InvalidRuleError(
                message=f"Custom date '{spec.describe()}' returned {result!r} for year {year}",
                details={"year": year, "result": str(result)},
            )
        return result

    raise InvalidRuleError(
        message=f"Unsupported date specification: {type(spec).__name__}",
        details={"spec": repr(spec)},
    )
