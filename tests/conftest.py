"""
Pytest configuration and fixtures for HolidayPilot tests.

Provides helper factories and common fixtures for rules, providers and
collections.
"""
import pytest
from datetime import date

from holidaypilot.calendars import FixedDate
from holidaypilot.models import (
    Holiday,
    HolidayCollection,
    HolidayRule,
    HolidayType,
    SubstitutionPolicy,
)
from holidaypilot.providers import Provider
from holidaypilot.registry import ProviderRegistry, default_registry
from holidaypilot.translations import TranslationResolver


# =============================================================================
# Factory Helpers
# =============================================================================

def make_rule(
    key: str,
    month: int = 1,
    day: int = 1,
    holiday_type: HolidayType = HolidayType.OFFICIAL,
    **kwargs,
) -> HolidayRule:
    """Create a fixed-date HolidayRule."""
    return HolidayRule(key, FixedDate(month, day), type=holiday_type, **kwargs)


def make_holiday(
    key: str,
    d: date,
    holiday_type: HolidayType = HolidayType.OFFICIAL,
    translations: dict = None,
    timezone: str = "UTC",
) -> Holiday:
    """Create a Holiday with required fields."""
    return Holiday(
        key=key,
        date=d,
        type=holiday_type,
        translations=translations or {},
        timezone=timezone,
    )


def make_provider(
    code: str = "XX",
    name: str = "Testland",
    rules=(),
    timezone: str = "UTC",
    **kwargs,
) -> Provider:
    """Create a root Provider."""
    return Provider(code=code, name=name, rules=tuple(rules), timezone=timezone, **kwargs)


def make_collection(holidays=(), year: int = 2024, locale: str = "en") -> HolidayCollection:
    """Create a HolidayCollection pre-filled with holidays."""
    collection = HolidayCollection(
        jurisdiction="XX",
        year=year,
        locale=locale,
        resolver=TranslationResolver({}),
    )
    for holiday in holidays:
        collection.add(holiday)
    return collection


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def weekend_policy():
    """Saturday/Sunday policy searching forward."""
    return SubstitutionPolicy()


@pytest.fixture
def registry():
    """Fresh registry holding the built-in jurisdictions."""
    return ProviderRegistry(default_registry())


@pytest.fixture
def builtin_registry():
    """Shared registry of the built-in jurisdictions (do not mutate)."""
    return default_registry()
