"""
HolidayPilot Substitution Engine

Derives a substitute holiday when a holiday falls on a non-working day.

The substitute lands on the nearest day (in the policy's direction) that is
neither a non-working weekday nor already occupied by another holiday, so
two substitutes never collide.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Container, Mapping, Optional

from ..exceptions import SubstitutionBoundExceededError
from ..models import Holiday, HolidayType, SubstitutionPolicy, substitute_key


logger = logging.getLogger(__name__)


def find_substitute_date(
    original: date,
    policy: SubstitutionPolicy,
    occupied: Container[date] = frozenset(),
) -> Optional[date]:
    """
    Find the substitute date for a holiday on `original`.

    Returns:
        The substitute date, or None if no substitute is due (working day,
        policy not yet in force, or the search would leave the year)

    Raises:
        SubstitutionBoundExceededError: If no day qualifies within policy.max_days
    """
    if not policy.is_non_working(original) or not policy.applies_to(original):
        return None

    step = timedelta(days=policy.step * policy.direction.sign)
    candidate = original

    for _ in range(policy.max_days):
        candidate += step
        if candidate.year != original.year:
            logger.debug(
                "Substitute for %s would fall in %d; no substitute",
                original, candidate.year,
            )
            return None
        if policy.is_non_working(candidate) or candidate in occupied:
            continue
        return candidate

    raise SubstitutionBoundExceededError(
        message=f"No substitute day within {policy.max_days} days of {original}",
        details={
            "date": original.isoformat(),
            "max_days": policy.max_days,
            "non_working_days": sorted(policy.non_working_days),
        },
    )


def substitute(
    holiday: Holiday,
    policy: SubstitutionPolicy,
    occupied: Container[date] = frozenset(),
    *,
    holiday_type: Optional[HolidayType] = None,
    translations: Optional[Mapping[str, str]] = None,
) -> Optional[Holiday]:
    """
    Build the substitute for a holiday, if one is due.

    Args:
        holiday: The original holiday
        policy: Substitution policy
        occupied: Dates already taken by other holidays
        holiday_type: Override for the substitute's type
        translations: Override for the substitute's names

    Returns:
        Holiday keyed 'substitute:<key>', or None
    """
    substitute_date = find_substitute_date(holiday.date, policy, occupied)
    if substitute_date is None:
        return None

    logger.debug("Substituting %s (%s) on %s", holiday.key, holiday.date, substitute_date)
    return Holiday(
        key=substitute_key(holiday.key),
        date=substitute_date,
        type=holiday_type or holiday.type,
        translations=translations if translations is not None else holiday.translations,
        timezone=holiday.timezone,
        substitute_of=holiday.key,
    )
