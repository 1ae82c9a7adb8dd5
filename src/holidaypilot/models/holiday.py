"""
HolidayPilot Holiday Model

A Holiday is a named, dated, typed calendar event for one year of one
jurisdiction. Holidays are immutable once constructed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping, Optional

from ..calendars import local_midnight
from .enums import HolidayType


SUBSTITUTE_PREFIX = "substitute:"


def substitute_key(key: str) -> str:
    """Key under which the substitute of `key` is stored."""
    return f"{SUBSTITUTE_PREFIX}{key}"


@dataclass(frozen=True)
class Holiday:
    """
    A holiday occurrence in a specific year.

    Attributes:
        key: Stable identifier (e.g., 'newYearsDay'); substitutes use 'substitute:<key>'
        date: Local calendar date
        type: Holiday classification
        translations: Locale code -> display name (read-only)
        timezone: IANA zone of the jurisdiction that produced the holiday
        substitute_of: Key of the original holiday, for substitutes only
    """
    key: str
    date: date
    type: HolidayType = HolidayType.OFFICIAL
    translations: Mapping[str, str] = field(default_factory=dict, hash=False)
    timezone: str = "UTC"
    substitute_of: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "translations", MappingProxyType(dict(self.translations))
        )

    @property
    def is_substitute(self) -> bool:
        return self.substitute_of is not None

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def start(self) -> datetime:
        """Midnight-local start of the holiday in its jurisdiction's zone."""
        return local_midnight(self.date, self.timezone)

    def to_dict(self) -> dict[str, object]:
        """Serialize for logging/API responses."""
        result: dict[str, object] = {
            "key": self.key,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "translations": dict(self.translations),
            "timezone": self.timezone,
        }
        if self.substitute_of:
            result["substitute_of"] = self.substitute_of
        return result
