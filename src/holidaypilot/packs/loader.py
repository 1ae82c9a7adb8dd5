"""
HolidayPilot Provider Pack Loader

Loads and validates provider packs from YAML or JSON files and converts them
to Provider instances. Parent jurisdictions are resolved through a
ProviderRegistry, and loaded packs are registered there so later packs can
build on them.
"""
from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars import CustomDate, DateSpec, EasterOffset, FixedDate, NthWeekday
from ..exceptions import (
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    UnknownProviderError,
)
from ..models import HolidayRule, HolidayType, RulePeriod, SearchDirection, SubstitutionPolicy
from ..providers import Provider
from ..providers.japan import coming_of_age_day_date, sports_day_date
from ..providers.switzerland import naefelser_fahrt_date
from ..registry import ProviderRegistry, default_registry
from .schema import (
    SCHEMA_VERSION,
    WEEKDAY_NUMBERS,
    DateSchema,
    ProviderPackSchema,
    RuleSchema,
    SubstitutionSchema,
    check_schema_version,
    validate_provider_pack,
)


logger = logging.getLogger(__name__)

DateFunction = Callable[[int], date]

# Named date functions usable as `custom` in packs
BUILTIN_DATE_FUNCTIONS: dict[str, DateFunction] = {
    "japan.coming_of_age_day": coming_of_age_day_date,
    "japan.sports_day": sports_day_date,
    "switzerland.naefelser_fahrt": naefelser_fahrt_date,
}


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_date(schema: DateSchema, functions: Mapping[str, DateFunction], key: str) -> DateSpec:
    """Convert DateSchema to a date specification."""
    if schema.fixed is not None:
        return FixedDate(schema.fixed.month, schema.fixed.day)
    if schema.easter is not None:
        return EasterOffset(schema.easter.offset)
    if schema.nth_weekday is not None:
        spec = schema.nth_weekday
        return NthWeekday(
            month=spec.month,
            weekday=WEEKDAY_NUMBERS[spec.weekday],
            ordinal=spec.ordinal,
            offset_days=spec.offset_days,
        )
    name = schema.custom or ""
    if name not in functions:
        raise PackValidationError(
            message=f"Rule '{key}' uses unknown custom date function '{name}'",
            details={"key": key, "function": name, "available": sorted(functions)},
        )
    return CustomDate(functions[name], name)


def _convert_substitution(schema: SubstitutionSchema) -> SubstitutionPolicy:
    """Convert SubstitutionSchema to SubstitutionPolicy."""
    return SubstitutionPolicy(
        non_working_days=frozenset(WEEKDAY_NUMBERS[d] for d in schema.non_working_days),
        direction=SearchDirection(schema.direction),
        step=schema.step,
        max_days=schema.max_days,
        effective_from=schema.effective_from,
    )


def _convert_rule(schema: RuleSchema, functions: Mapping[str, DateFunction]) -> HolidayRule:
    """Convert RuleSchema to HolidayRule."""
    substitution = schema.substitution
    return HolidayRule(
        key=schema.key,
        date_spec=_convert_date(schema.date, functions, schema.key),
        type=HolidayType(schema.type),
        translations=schema.translations,
        establishment_year=schema.establishment_year,
        abolition_year=schema.abolition_year,
        periods=tuple(
            RulePeriod(p.start, p.end, HolidayType(p.type)) for p in schema.periods
        ),
        substitution=_convert_substitution(substitution) if substitution else None,
        substitute_type=(
            HolidayType(substitution.type) if substitution and substitution.type else None
        ),
        substitute_translations=substitution.translations if substitution else None,
        replaces=schema.replaces,
        description=schema.description,
    )


def _convert_provider_pack(
    schema: ProviderPackSchema,
    registry: ProviderRegistry,
    functions: Mapping[str, DateFunction],
) -> Provider:
    """Convert ProviderPackSchema to Provider, resolving the parent via the registry."""
    parent = None
    if schema.parent is not None:
        try:
            parent = registry.lookup(schema.parent)
        except UnknownProviderError as e:
            raise PackValidationError(
                message=f"Parent jurisdiction '{schema.parent}' is not registered",
                details={"parent": schema.parent, "error": e.message},
                jurisdiction=schema.code,
            )

    return Provider(
        code=schema.code,
        name=schema.name,
        rules=tuple(_convert_rule(r, functions) for r in schema.rules),
        timezone=schema.timezone,
        parent=parent,
        removed_keys=frozenset(schema.removes),
        default_locale=schema.default_locale,
        sources=tuple(schema.sources),
        translations=schema.translations,
    )


# =============================================================================
# Provider Pack Loader
# =============================================================================

class ProviderPackLoader:
    """
    Loads provider packs from YAML or JSON files.

    Usage:
        loader = ProviderPackLoader()
        provider = loader.load("packs/valais.yaml")
        holidays = provider.holidays(2024)
    """

    def __init__(
        self,
        registry: Optional[ProviderRegistry] = None,
        date_functions: Optional[Mapping[str, DateFunction]] = None,
        strict_version: bool = True,
        register: bool = True,
    ):
        """
        Initialize the loader.

        Args:
            registry: Registry used for parent lookup (defaults to a copy of the built-ins)
            date_functions: Extra named functions for `custom` dates
            strict_version: If True, reject packs with incompatible schema versions
            register: If True, register loaded providers in the registry
        """
        self.registry = registry if registry is not None else ProviderRegistry(default_registry())
        self.date_functions: dict[str, DateFunction] = dict(BUILTIN_DATE_FUNCTIONS)
        if date_functions:
            self.date_functions.update(date_functions)
        self.strict_version = strict_version
        self.register = register

    def load(self, path: Union[str, Path]) -> Provider:
        """
        Load a provider pack from a file.

        Raises:
            PackLoadError: If file cannot be read
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        path = Path(path)
        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise PackLoadError(
                message=f"Failed to load provider pack: {e}",
                details={"path": str(path), "error": str(e)},
            )
        return self.load_data(data, source=str(path))

    def load_string(self, content: str, format: str = "yaml") -> Provider:
        """Load a provider pack from a YAML or JSON string."""
        try:
            if format.lower() == "json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise PackLoadError(
                message=f"Failed to parse provider pack: {e}",
                details={"format": format, "error": str(e)},
            )
        return self.load_data(data)

    def load_data(self, data: Any, source: str = "<string>") -> Provider:
        """Validate a parsed pack and convert it to a Provider."""
        if not isinstance(data, dict):
            raise PackLoadError(
                message="Provider pack must be a mapping at the top level",
                details={"path": source},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise PackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_provider_pack(data)
        except ValidationError as e:
            raise PackValidationError(
                message=f"Provider pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(), "path": source},
            )

        provider = _convert_provider_pack(schema, self.registry, self.date_functions)
        if self.register:
            self.registry.register(provider)
        logger.debug("Loaded provider pack %s from %s", provider.code, source)
        return provider

    def _load_file(self, path: Path) -> dict[str, Any]:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_provider_pack(
    path: Union[str, Path],
    registry: Optional[ProviderRegistry] = None,
) -> Provider:
    """
    Load a provider pack from a file.

    Convenience function that creates a temporary loader.
    """
    return ProviderPackLoader(registry=registry).load(path)


def load_provider_pack_from_string(
    content: str,
    format: str = "yaml",
    registry: Optional[ProviderRegistry] = None,
) -> Provider:
    """Load a provider pack from a YAML or JSON string."""
    return ProviderPackLoader(registry=registry).load_string(content, format)
