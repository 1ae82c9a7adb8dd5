"""
HolidayPilot Engine

- compute_holidays(): provider composition for one year
- substitute() / find_substitute_date(): weekend substitution

Usage:
    from holidaypilot.engine import compute_holidays
    from holidaypilot.registry import default_registry

    provider = default_registry().lookup("Switzerland/Glarus")
    holidays = compute_holidays(provider, 2024, "de_CH")
"""
from __future__ import annotations

from .composer import compute_holidays
from .substitution import find_substitute_date, substitute

__all__ = [
    "compute_holidays",
    "find_substitute_date",
    "substitute",
]
