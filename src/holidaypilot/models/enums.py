"""
HolidayPilot Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Holiday Types
# =============================================================================

class HolidayType(str, Enum):
    """
    Classification attached to every holiday.

    OFFICIAL holidays are the ones a jurisdiction mandates; the others are
    informational (observances, seasons, bank-only closures, regional days).
    """
    OFFICIAL = "official"
    OBSERVANCE = "observance"
    SEASON = "season"
    BANK = "bank"
    OTHER = "other"


# =============================================================================
# Substitution
# =============================================================================

class SearchDirection(str, Enum):
    """Direction in which a substitute day is searched."""
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def sign(self) -> int:
        return 1 if self is SearchDirection.FORWARD else -1
