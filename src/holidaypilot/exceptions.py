"""
HolidayPilot Exception Hierarchy

Domain-specific exceptions for holiday computation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: HP_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayPilotError(Exception):
    """
    Base exception for all HolidayPilot errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HP_*)
        details: Additional context about the error
        jurisdiction: Associated jurisdiction code if applicable
    """
    message: str
    code: str = "HP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    jurisdiction: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.jurisdiction:
            parts.append(f"(jurisdiction: {self.jurisdiction})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.jurisdiction:
            result["jurisdiction"] = self.jurisdiction
        return result


# =============================================================================
# Date Resolution Errors
# =============================================================================

@dataclass
class InvalidDateError(HolidayPilotError):
    """Date specification yields an impossible calendar date."""
    code: str = "HP_INVALID_DATE"


@dataclass
class InvalidRuleError(HolidayPilotError):
    """Rule parameters are malformed (bad ordinal, bad policy, ...)."""
    code: str = "HP_INVALID_RULE"


@dataclass
class UnknownTimezoneError(HolidayPilotError):
    """Timezone name is not present in the timezone database."""
    code: str = "HP_UNKNOWN_TIMEZONE"


# =============================================================================
# Composition Errors
# =============================================================================

@dataclass
class DuplicateHolidayKeyError(HolidayPilotError):
    """A holiday key was registered twice for the same year."""
    code: str = "HP_DUPLICATE_HOLIDAY_KEY"


@dataclass
class SubstitutionBoundExceededError(HolidayPilotError):
    """No substitute day found within the policy's search bound."""
    code: str = "HP_SUBSTITUTION_BOUND_EXCEEDED"


@dataclass
class HolidayNotFoundError(HolidayPilotError):
    """Requested holiday key is not part of the collection."""
    code: str = "HP_HOLIDAY_NOT_FOUND"


# =============================================================================
# Translation Errors
# =============================================================================

@dataclass
class UnknownLocaleError(HolidayPilotError):
    """Locale is not part of the recognized locale set."""
    code: str = "HP_UNKNOWN_LOCALE"


@dataclass
class MissingTranslationError(HolidayPilotError):
    """No name could be resolved for a holiday, even in the default locale."""
    code: str = "HP_MISSING_TRANSLATION"


@dataclass
class CatalogLoadError(HolidayPilotError):
    """Failed to read a translation or locale catalog."""
    code: str = "HP_CATALOG_LOAD_ERROR"


@dataclass
class CatalogValidationError(HolidayPilotError):
    """Translation or locale catalog failed schema validation."""
    code: str = "HP_CATALOG_VALIDATION_ERROR"


# =============================================================================
# Registry Errors
# =============================================================================

@dataclass
class UnknownProviderError(HolidayPilotError):
    """Requested jurisdiction is not registered."""
    code: str = "HP_UNKNOWN_PROVIDER"


@dataclass
class ProviderCycleError(HolidayPilotError):
    """Provider parent chain is cyclic or references itself."""
    code: str = "HP_PROVIDER_CYCLE"


@dataclass
class ProviderConflictError(HolidayPilotError):
    """Provider code or name is already registered."""
    code: str = "HP_PROVIDER_CONFLICT"


# =============================================================================
# Pack Errors
# =============================================================================

@dataclass
class PackLoadError(HolidayPilotError):
    """Failed to load provider pack from file."""
    code: str = "HP_PACK_LOAD_ERROR"


@dataclass
class PackValidationError(HolidayPilotError):
    """Provider pack schema validation failed."""
    code: str = "HP_PACK_VALIDATION_ERROR"


@dataclass
class PackVersionMismatch(HolidayPilotError):
    """Provider pack schema version doesn't match expected version."""
    code: str = "HP_PACK_VERSION_MISMATCH"
