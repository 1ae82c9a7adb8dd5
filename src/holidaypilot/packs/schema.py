"""
HolidayPilot Provider Pack Schemas

Pydantic models for validating provider pack YAML/JSON files.

A provider pack declares one jurisdiction: its identity, timezone, parent
jurisdiction, translations and rules. They map to Provider and HolidayRule.

Example:
    schema_version: "1.0.0"
    code: CH-VS
    name: Switzerland/Valais
    parent: CH
    rules:
      - key: stJosephsDay
        type: other
        date: {fixed: {month: 3, day: 19}}
        translations: {de: Josefstag, fr: Saint-Joseph}

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

HolidayTypeValue = Literal["official", "observance", "season", "bank", "other"]

WeekdayValue = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

SearchDirectionValue = Literal["forward", "backward"]

WEEKDAY_NUMBERS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


# =============================================================================
# Date Specification Schemas
# =============================================================================

class FixedDateSchema(BaseModel):
    """Same month/day every year."""
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)

    model_config = {"extra": "forbid"}


class EasterDateSchema(BaseModel):
    """Offset in days from Easter Sunday."""
    offset: int = Field(0, description="Days from Easter Sunday (negative = before)")

    model_config = {"extra": "forbid"}


class NthWeekdaySchema(BaseModel):
    """Nth weekday of a month with an optional day offset."""
    month: int = Field(..., ge=1, le=12)
    weekday: WeekdayValue
    ordinal: int = Field(..., description="1..5 from the start, -1..-5 from the end")
    offset_days: int = Field(0, description="Days added after finding the weekday")

    model_config = {"extra": "forbid"}

    @field_validator("ordinal")
    @classmethod
    def validate_ordinal(cls, v: int) -> int:
        """Reject ordinals that can never match."""
        if v == 0 or abs(v) > 5:
            raise ValueError(f"ordinal must be in 1..5 or -1..-5, got {v}")
        return v


class DateSchema(BaseModel):
    """
    Date specification: exactly one of fixed, easter, nth_weekday or custom.

    `custom` names a registered date function (e.g., 'japan.sports_day').
    """
    fixed: Optional[FixedDateSchema] = None
    easter: Optional[EasterDateSchema] = None
    nth_weekday: Optional[NthWeekdaySchema] = None
    custom: Optional[str] = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_single_kind(self) -> "DateSchema":
        """Exactly one date kind must be given."""
        given = [
            name for name in ("fixed", "easter", "nth_weekday", "custom")
            if getattr(self, name) is not None
        ]
        if len(given) != 1:
            raise ValueError(
                f"date needs exactly one of fixed/easter/nth_weekday/custom, got {given or 'none'}"
            )
        return self


# =============================================================================
# Rule Schemas
# =============================================================================

class PeriodSchema(BaseModel):
    """Year range [start, end) with its own holiday type."""
    start: int
    end: Optional[int] = None
    type: HolidayTypeValue = "official"

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_range(self) -> "PeriodSchema":
        if self.end is not None and self.end <= self.start:
            raise ValueError(f"period end {self.end} must be after start {self.start}")
        return self


class SubstitutionSchema(BaseModel):
    """Weekend substitution policy for a rule."""
    non_working_days: list[WeekdayValue] = Field(
        default_factory=lambda: ["saturday", "sunday"],
        min_length=1,
        max_length=6,
    )
    direction: SearchDirectionValue = "forward"
    step: int = Field(1, ge=1)
    max_days: int = Field(14, ge=1)
    effective_from: Optional[date] = None
    type: Optional[HolidayTypeValue] = Field(None, description="Substitute type override")
    translations: Optional[dict[str, str]] = Field(
        None, description="Substitute name override"
    )

    model_config = {"extra": "forbid"}


class RuleSchema(BaseModel):
    """Schema for a single holiday rule."""
    key: str = Field(..., min_length=1, description="Holiday key (e.g., 'newYearsDay')")
    date: DateSchema
    type: HolidayTypeValue = "official"
    translations: dict[str, str] = Field(default_factory=dict)
    establishment_year: Optional[int] = None
    abolition_year: Optional[int] = None
    periods: list[PeriodSchema] = Field(default_factory=list)
    substitution: Optional[SubstitutionSchema] = None
    replaces: Optional[str] = Field(None, description="Inherited key this rule replaces")
    description: str = ""

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_gate(self) -> "RuleSchema":
        if (
            self.establishment_year is not None
            and self.abolition_year is not None
            and self.abolition_year <= self.establishment_year
        ):
            raise ValueError(
                f"abolition_year {self.abolition_year} must be after "
                f"establishment_year {self.establishment_year}"
            )
        return self


# =============================================================================
# Provider Pack Schema
# =============================================================================

class ProviderPackSchema(BaseModel):
    """
    Top-level schema for a provider pack YAML/JSON file.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    code: str = Field(..., min_length=2, description="Jurisdiction code (e.g., 'CH-VS')")
    name: str = Field(..., min_length=1, description="Registry name (e.g., 'Switzerland/Valais')")
    timezone: Optional[str] = Field(None, description="IANA zone; inherited when omitted")
    parent: Optional[str] = Field(None, description="Parent jurisdiction code or name")
    default_locale: Optional[str] = None
    sources: list[str] = Field(default_factory=list)
    removes: list[str] = Field(default_factory=list, description="Inherited keys to drop")
    translations: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Jurisdiction translation table (key -> locale -> name)",
    )
    rules: list[RuleSchema] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Normalize jurisdiction code to upper case."""
        return v.upper()

    @model_validator(mode="after")
    def validate_root_timezone(self) -> "ProviderPackSchema":
        """A pack without a parent must declare its timezone."""
        if self.parent is None and self.timezone is None:
            raise ValueError("timezone is required for a jurisdiction without parent")
        return self


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_provider_pack(data: dict[str, Any]) -> ProviderPackSchema:
    """
    Validate a provider pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return ProviderPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a provider pack's schema version is compatible.

    Only the major version has to match.
    """
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
