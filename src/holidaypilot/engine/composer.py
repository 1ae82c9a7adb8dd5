"""
HolidayPilot Composer

Computes a jurisdiction's holidays for one year.

Evaluation order:
1. Parent chain, root first (country before subdivision)
2. At each level: drop removed inherited keys, then evaluate local rules;
   a rule that `replaces` an inherited key removes it before inserting
3. Substitution pass over the finished set, in date order

Each call builds its own collection; providers are never mutated.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..calendars import check_year, resolve_timezone
from ..models import HolidayCollection, HolidayRule
from ..translations import TranslationResolver, validate_locale
from .substitution import substitute

if TYPE_CHECKING:
    from ..providers.base import Provider


logger = logging.getLogger(__name__)


def compute_holidays(
    provider: Provider,
    year: int,
    locale: Optional[str] = None,
) -> HolidayCollection:
    """
    Compute all holidays of a provider for a year.

    Args:
        provider: Jurisdiction rule set
        year: Calendar year
        locale: Default locale for names (defaults to the provider's)

    Returns:
        HolidayCollection for the year

    Raises:
        UnknownLocaleError: If the locale is not recognized
        InvalidDateError: If the year is unsupported or a rule yields an impossible date
        InvalidRuleError: If a rule is malformed
        DuplicateHolidayKeyError: If two rules produce the same key
        SubstitutionBoundExceededError: If a substitution policy is misconfigured
    """
    requested = validate_locale(locale or provider.default_locale)
    check_year(year)

    timezone = provider.timezone
    resolve_timezone(timezone)

    collection = HolidayCollection(
        jurisdiction=provider.code,
        year=year,
        locale=requested,
        resolver=TranslationResolver(provider.translation_table()),
    )
    sources: dict[str, HolidayRule] = {}

    for level in provider.chain():
        _evaluate_level(level, year, timezone, collection, sources)

    _apply_substitutions(collection, sources)

    logger.debug(
        "Computed %d holidays for %s in %d", len(collection), provider.code, year,
    )
    return collection


def _evaluate_level(
    level: Provider,
    year: int,
    timezone: str,
    collection: HolidayCollection,
    sources: dict[str, HolidayRule],
) -> None:
    """Apply one provider's removals and local rules on top of inherited holidays."""
    for key in level.removed_keys:
        if collection.discard(key) is not None:
            sources.pop(key, None)
            logger.debug("%s removes inherited holiday %s", level.code, key)

    for rule in level.rules:
        holiday = rule.evaluate(year, timezone)
        if holiday is None:
            logger.debug("%s: %s not in effect in %d", level.code, rule.key, year)
            continue

        if rule.replaces and rule.replaces in collection:
            collection.remove(rule.replaces)
            sources.pop(rule.replaces, None)
            logger.debug("%s: %s replaces inherited %s", level.code, rule.key, rule.replaces)

        collection.add(holiday)
        sources[holiday.key] = rule


def _apply_substitutions(collection: HolidayCollection, sources: dict[str, HolidayRule]) -> None:
    """Insert substitutes for holidays whose rule carries a substitution policy."""
    for holiday in collection.holidays():
        rule = sources.get(holiday.key)
        if rule is None or rule.substitution is None:
            continue

        occupied = set(collection.dates())
        result = substitute(
            holiday,
            rule.substitution,
            occupied,
            holiday_type=rule.substitute_type,
            translations=rule.substitute_translations,
        )
        if result is not None:
            collection.add(result)
