"""
HolidayPilot Holiday Collection

The per-jurisdiction, per-year result set produced by compute_holidays().

Holidays are kept unique by key and iterated in date order; holidays on the
same date keep their insertion order. Names are resolved lazily on access.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, Iterator, Optional

from ..calendars import SATURDAY, SUNDAY
from ..exceptions import (
    DuplicateHolidayKeyError,
    HolidayNotFoundError,
    InvalidDateError,
    MissingTranslationError,
)
from ..translations import TranslationResolver, validate_locale
from .enums import HolidayType
from .holiday import Holiday


DEFAULT_WEEKEND = frozenset({SATURDAY, SUNDAY})


class HolidayCollection:
    """
    Holidays of one jurisdiction for one year.

    Usage:
        holidays = compute_holidays(provider, 2024, "de_CH")

        for holiday in holidays:
            print(holiday.date, holidays.name(holiday.key))

        official = holidays.by_type(HolidayType.OFFICIAL)
        august = holidays.between(date(2024, 8, 1), date(2024, 8, 31))
    """

    def __init__(
        self,
        jurisdiction: str,
        year: int,
        locale: str,
        resolver: Optional[TranslationResolver] = None,
    ):
        self.jurisdiction = jurisdiction
        self.year = year
        self.locale = locale
        self.resolver = resolver or TranslationResolver()
        self._holidays: dict[str, Holiday] = {}
        self._order: dict[str, int] = {}
        self._sequence = 0

    # -------------------------------------------------------------------------
    # Mutation (used while composing)
    # -------------------------------------------------------------------------

    def add(self, holiday: Holiday) -> None:
        """
        Insert a holiday.

        Raises:
            DuplicateHolidayKeyError: If the key is already present
            InvalidDateError: If the holiday is not in the collection's year
        """
        if holiday.key in self._holidays:
            raise DuplicateHolidayKeyError(
                message=f"Holiday '{holiday.key}' is already defined for {self.year}",
                details={
                    "key": holiday.key,
                    "existing": self._holidays[holiday.key].date.isoformat(),
                    "new": holiday.date.isoformat(),
                },
                jurisdiction=self.jurisdiction,
            )
        if holiday.date.year != self.year:
            raise InvalidDateError(
                message=f"Holiday '{holiday.key}' on {holiday.date} is outside {self.year}",
                details={"key": holiday.key, "date": holiday.date.isoformat()},
                jurisdiction=self.jurisdiction,
            )
        self._holidays[holiday.key] = holiday
        self._order[holiday.key] = self._sequence
        self._sequence += 1

    def remove(self, key: str) -> Holiday:
        """
        Remove and return a holiday.

        Raises:
            HolidayNotFoundError: If the key is not present
        """
        if key not in self._holidays:
            raise HolidayNotFoundError(
                message=f"Holiday '{key}' is not defined for {self.year}",
                details={"key": key},
                jurisdiction=self.jurisdiction,
            )
        del self._order[key]
        return self._holidays.pop(key)

    def discard(self, key: str) -> Optional[Holiday]:
        """Remove a holiday if present."""
        if key not in self._holidays:
            return None
        return self.remove(key)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._holidays

    def __len__(self) -> int:
        return len(self._holidays)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self.holidays())

    def __getitem__(self, key: str) -> Holiday:
        if key not in self._holidays:
            raise HolidayNotFoundError(
                message=f"Holiday '{key}' is not defined for {self.year}",
                details={"key": key},
                jurisdiction=self.jurisdiction,
            )
        return self._holidays[key]

    def get(self, key: str) -> Optional[Holiday]:
        return self._holidays.get(key)

    def holidays(self) -> list[Holiday]:
        """All holidays ordered by date, then insertion."""
        return sorted(
            self._holidays.values(),
            key=lambda h: (h.date, self._order[h.key]),
        )

    def keys(self) -> list[str]:
        return [h.key for h in self.holidays()]

    def dates(self) -> list[date]:
        """Distinct holiday dates in ascending order."""
        return sorted({h.date for h in self._holidays.values()})

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def by_type(self, holiday_type: HolidayType) -> list[Holiday]:
        return [h for h in self.holidays() if h.type == holiday_type]

    def official(self) -> list[Holiday]:
        return self.by_type(HolidayType.OFFICIAL)

    def observances(self) -> list[Holiday]:
        return self.by_type(HolidayType.OBSERVANCE)

    def between(self, start: date, end: date, inclusive: bool = True) -> list[Holiday]:
        """
        Holidays within a date range.

        Args:
            start: Range start
            end: Range end
            inclusive: Include holidays on start/end

        Raises:
            InvalidDateError: If end is before start
        """
        if end < start:
            raise InvalidDateError(
                message=f"Range end {end} is before start {start}",
                details={"start": start.isoformat(), "end": end.isoformat()},
                jurisdiction=self.jurisdiction,
            )
        if inclusive:
            return [h for h in self.holidays() if start <= h.date <= end]
        return [h for h in self.holidays() if start < h.date < end]

    def on(self, d: date) -> list[Holiday]:
        """Holidays falling on a date."""
        return [h for h in self.holidays() if h.date == d]

    def is_holiday(self, d: date) -> bool:
        return any(h.date == d for h in self._holidays.values())

    # -------------------------------------------------------------------------
    # Working Days
    # -------------------------------------------------------------------------

    def is_working_day(self, d: date, weekend_days: AbstractSet[int] = DEFAULT_WEEKEND) -> bool:
        """
        Check if a date is a working day.

        A working day is a weekday that is not an official holiday.
        """
        if d.weekday() in weekend_days:
            return False
        return not any(h.date == d for h in self.official())

    def next_working_day(
        self,
        start: date,
        days: int = 1,
        weekend_days: AbstractSet[int] = DEFAULT_WEEKEND,
    ) -> date:
        """
        Get the date `days` working days after `start`.

        Raises:
            InvalidDateError: If the result leaves the collection's year
        """
        return self._shift_working_days(start, days, weekend_days)

    def previous_working_day(
        self,
        start: date,
        days: int = 1,
        weekend_days: AbstractSet[int] = DEFAULT_WEEKEND,
    ) -> date:
        """Get the date `days` working days before `start`."""
        return self._shift_working_days(start, -days, weekend_days)

    def _shift_working_days(self, start: date, days: int, weekend_days: AbstractSet[int]) -> date:
        if days == 0:
            return start

        direction = 1 if days > 0 else -1
        remaining = abs(days)
        current = start

        while remaining > 0:
            current += timedelta(days=direction)
            if current.year != self.year:
                raise InvalidDateError(
                    message=f"Working day lookup from {start} leaves {self.year}",
                    details={"start": start.isoformat(), "days": days},
                    jurisdiction=self.jurisdiction,
                )
            if self.is_working_day(current, weekend_days):
                remaining -= 1

        return current

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    def name(self, key: str, locale: Optional[str] = None, fallback_to_key: bool = False) -> str:
        """
        Display name of a holiday.

        Args:
            key: Holiday key
            locale: Requested locale (defaults to the collection's locale)
            fallback_to_key: Return the key instead of raising MissingTranslationError

        Raises:
            HolidayNotFoundError: If the key is not present
            UnknownLocaleError: If the locale is not recognized
            MissingTranslationError: If no name exists and fallback_to_key is False
        """
        holiday = self[key]
        requested = validate_locale(locale or self.locale)
        try:
            return self.resolver.resolve_holiday(holiday, requested)
        except MissingTranslationError:
            if fallback_to_key:
                return holiday.key
            raise

    def names(self, locale: Optional[str] = None) -> dict[str, str]:
        """Key -> display name in date order, degrading to the key when untranslated."""
        return {h.key: self.name(h.key, locale, fallback_to_key=True) for h in self.holidays()}

    def __repr__(self) -> str:
        return (
            f"HolidayCollection(jurisdiction={self.jurisdiction!r}, "
            f"year={self.year}, holidays={len(self)})"
        )
