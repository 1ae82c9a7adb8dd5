"""
HolidayPilot Rule Models

Declarative holiday rules. A rule is a small record describing how to derive
one holiday for a year:

- HolidayRule: key, date specification, type, names and year gating
- RulePeriod: year range with its own holiday type
- SubstitutionPolicy: what happens when the holiday falls on a non-working day

Rules are immutable and shared between computations.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from ..calendars import SATURDAY, SUNDAY, DateSpec, resolve_date
from ..exceptions import InvalidRuleError
from .enums import HolidayType, SearchDirection
from .holiday import Holiday


# =============================================================================
# Rule Period
# =============================================================================

@dataclass(frozen=True)
class RulePeriod:
    """
    Year range [start, end) in which a rule applies with a given type.

    Attributes:
        start: First year of the period
        end: First year after the period (None = open-ended)
        type: Holiday type during the period
    """
    start: int
    end: Optional[int] = None
    type: HolidayType = HolidayType.OFFICIAL

    def __post_init__(self) -> None:
        if self.end is not None and self.end <= self.start:
            raise InvalidRuleError(
                message=f"Rule period end {self.end} must be after start {self.start}",
                details={"start": self.start, "end": self.end},
            )

    def contains(self, year: int) -> bool:
        if year < self.start:
            return False
        return self.end is None or year < self.end


# =============================================================================
# Substitution Policy
# =============================================================================

@dataclass(frozen=True)
class SubstitutionPolicy:
    """
    Weekend substitution policy.

    Attributes:
        non_working_days: Weekdays that trigger a substitute (0=Monday, 6=Sunday)
        direction: Search direction for the substitute day
        step: Days advanced per iteration
        max_days: Search bound; exceeding it is a policy misconfiguration
        effective_from: First holiday date for which substitution applies
    """
    non_working_days: frozenset[int] = field(
        default_factory=lambda: frozenset({SATURDAY, SUNDAY})
    )
    direction: SearchDirection = SearchDirection.FORWARD
    step: int = 1
    max_days: int = 14
    effective_from: Optional[date] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "non_working_days", frozenset(self.non_working_days))
        if not self.non_working_days:
            raise InvalidRuleError(message="Substitution policy needs at least one non-working day")
        if any(not 0 <= d <= 6 for d in self.non_working_days):
            raise InvalidRuleError(
                message="Non-working days must be weekday numbers 0..6",
                details={"non_working_days": sorted(self.non_working_days)},
            )
        if len(self.non_working_days) == 7:
            raise InvalidRuleError(message="Substitution policy marks every weekday as non-working")
        if self.step < 1:
            raise InvalidRuleError(
                message=f"Substitution step must be positive, got {self.step}",
                details={"step": self.step},
            )
        if self.max_days < 1:
            raise InvalidRuleError(
                message=f"Substitution bound must be positive, got {self.max_days}",
                details={"max_days": self.max_days},
            )

    def is_non_working(self, d: date) -> bool:
        return d.weekday() in self.non_working_days

    def applies_to(self, d: date) -> bool:
        """Check if the policy is in force for a holiday on `d`."""
        return self.effective_from is None or d >= self.effective_from


# Saturday/Sunday, next working day
WEEKEND_SUBSTITUTION = SubstitutionPolicy()


# =============================================================================
# Holiday Rule
# =============================================================================

@dataclass(frozen=True)
class HolidayRule:
    """
    Declarative definition of one holiday.

    Attributes:
        key: Holiday key produced by this rule
        date_spec: How to compute the date for a year
        type: Holiday type (ignored when periods are given)
        translations: Rule-specific names (locale -> name)
        establishment_year: First year the rule applies (None = always)
        abolition_year: First year the rule no longer applies (None = never)
        periods: Year ranges with their own type; restricts the rule to those ranges
        substitution: Weekend substitution policy, if any
        substitute_type: Type of the substitute (defaults to the original's)
        substitute_translations: Names of the substitute (default: original's)
        replaces: Key of an inherited holiday this rule replaces
        description: Free text (e.g., legal basis)
    """
    key: str
    date_spec: DateSpec
    type: HolidayType = HolidayType.OFFICIAL
    translations: Mapping[str, str] = field(default_factory=dict, hash=False)
    establishment_year: Optional[int] = None
    abolition_year: Optional[int] = None
    periods: tuple[RulePeriod, ...] = ()
    substitution: Optional[SubstitutionPolicy] = None
    substitute_type: Optional[HolidayType] = None
    substitute_translations: Optional[Mapping[str, str]] = field(default=None, hash=False)
    replaces: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise InvalidRuleError(message="Holiday rule requires a key")
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))
        object.__setattr__(self, "periods", tuple(self.periods))
        if self.substitute_translations is not None:
            object.__setattr__(
                self,
                "substitute_translations",
                MappingProxyType(dict(self.substitute_translations)),
            )
        if (
            self.establishment_year is not None
            and self.abolition_year is not None
            and self.abolition_year <= self.establishment_year
        ):
            raise InvalidRuleError(
                message=(
                    f"Rule '{self.key}' is abolished ({self.abolition_year}) "
                    f"before it is established ({self.establishment_year})"
                ),
                details={"key": self.key},
            )

    def applies_to(self, year: int) -> bool:
        """Check the establishment/abolition gate and periods for a year."""
        if self.establishment_year is not None and year < self.establishment_year:
            return False
        if self.abolition_year is not None and year >= self.abolition_year:
            return False
        if self.periods:
            return any(p.contains(year) for p in self.periods)
        return True

    def type_for(self, year: int) -> Optional[HolidayType]:
        """Holiday type in effect for a year, or None if the rule is inactive."""
        if not self.applies_to(year):
            return None
        for period in self.periods:
            if period.contains(year):
                return period.type
        return self.type

    def evaluate(self, year: int, timezone: str = "UTC") -> Optional[Holiday]:
        """
        Produce the holiday for a year.

        Returns:
            Holiday, or None when the rule is not in effect that year

        Raises:
            InvalidDateError: If the date specification yields an impossible date
            InvalidRuleError: If the date specification is malformed
        """
        holiday_type = self.type_for(year)
        if holiday_type is None:
            return None
        return Holiday(
            key=self.key,
            date=resolve_date(self.date_spec, year),
            type=holiday_type,
            translations=self.translations,
            timezone=timezone,
        )
