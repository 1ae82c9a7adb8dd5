"""
HolidayPilot Translation Catalogs

Loads and validates the built-in translation and locale catalogs from YAML.

The catalogs are package data:
- data/locales.yaml: recognized locale codes
- data/holidays.yaml: holiday key -> locale -> name, shared by all jurisdictions

Both are loaded once per process and exposed read-only.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import CatalogLoadError, CatalogValidationError


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

CATALOG_SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Schemas
# =============================================================================

def _check_locale_code(code: str) -> str:
    """Validate a locale code of the form xx, xx_YY or xx_Script_YY."""
    parts = code.split("_")
    language = parts[0]
    if not (2 <= len(language) <= 3 and language.isalpha() and language.islower()):
        raise ValueError(f"Invalid locale code '{code}'")
    if any(not part.isalnum() or not 2 <= len(part) <= 4 for part in parts[1:]):
        raise ValueError(f"Invalid locale code '{code}'")
    return code


class LocaleCatalogSchema(BaseModel):
    """Schema for the recognized locale list."""
    schema_version: str = Field(CATALOG_SCHEMA_VERSION, description="Catalog schema version")
    locales: list[str] = Field(..., min_length=1, description="Recognized locale codes")

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, v: list[str]) -> list[str]:
        """Validate locale code format and uniqueness."""
        seen: set[str] = set()
        for code in v:
            _check_locale_code(code)
            if code in seen:
                raise ValueError(f"Duplicate locale '{code}'")
            seen.add(code)
        return v


class TranslationCatalogSchema(BaseModel):
    """Schema for a holiday translation table."""
    schema_version: str = Field(CATALOG_SCHEMA_VERSION, description="Catalog schema version")
    translations: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Holiday key -> locale -> display name",
    )

    @field_validator("translations")
    @classmethod
    def validate_translations(cls, v: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        """Validate locale codes and reject empty names."""
        for key, names in v.items():
            if not names:
                raise ValueError(f"Holiday '{key}' has no translations")
            for locale, name in names.items():
                _check_locale_code(locale)
                if not name.strip():
                    raise ValueError(f"Empty name for holiday '{key}' in locale '{locale}'")
        return v


# =============================================================================
# Loaders
# =============================================================================

def _load_file(path: Path) -> dict[str, Any]:
    """Load data from YAML or JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogLoadError(
            message=f"Failed to load catalog: {e}",
            details={"path": str(path), "error": str(e)},
        )
    if not isinstance(data, dict):
        raise CatalogLoadError(
            message="Catalog must be a mapping at the top level",
            details={"path": str(path)},
        )
    return data


def load_locale_catalog(path: Union[str, Path]) -> frozenset[str]:
    """
    Load a recognized-locale catalog.

    Raises:
        CatalogLoadError: If the file cannot be read
        CatalogValidationError: If validation fails
    """
    path = Path(path)
    data = _load_file(path)
    try:
        schema = LocaleCatalogSchema.model_validate(data)
    except ValidationError as e:
        raise CatalogValidationError(
            message=f"Locale catalog validation failed: {e.error_count()} errors",
            details={"errors": e.errors(), "path": str(path)},
        )
    return frozenset(schema.locales)


def load_translation_catalog(path: Union[str, Path]) -> Mapping[str, Mapping[str, str]]:
    """
    Load a translation catalog as a read-only nested mapping.

    Raises:
        CatalogLoadError: If the file cannot be read
        CatalogValidationError: If validation fails
    """
    path = Path(path)
    data = _load_file(path)
    try:
        schema = TranslationCatalogSchema.model_validate(data)
    except ValidationError as e:
        raise CatalogValidationError(
            message=f"Translation catalog validation failed: {e.error_count()} errors",
            details={"errors": e.errors(), "path": str(path)},
        )
    return freeze_table(schema.translations)


def freeze_table(table: Mapping[str, Mapping[str, str]]) -> Mapping[str, Mapping[str, str]]:
    """Copy a translation table into nested read-only mappings."""
    return MappingProxyType(
        {key: MappingProxyType(dict(names)) for key, names in table.items()}
    )


def merge_tables(*tables: Mapping[str, Mapping[str, str]]) -> Mapping[str, Mapping[str, str]]:
    """
    Merge translation tables; later tables win per (key, locale).
    """
    merged: dict[str, dict[str, str]] = {}
    for table in tables:
        for key, names in table.items():
            merged.setdefault(key, {}).update(names)
    return freeze_table(merged)


# =============================================================================
# Built-in Catalogs
# =============================================================================

@lru_cache(maxsize=1)
def recognized_locales() -> frozenset[str]:
    """Locales accepted by compute_holidays() and name lookups."""
    locales = load_locale_catalog(DATA_DIR / "locales.yaml")
    logger.debug("Loaded %d recognized locales", len(locales))
    return locales


@lru_cache(maxsize=1)
def default_translations() -> Mapping[str, Mapping[str, str]]:
    """Translation table shared by all built-in jurisdictions."""
    table = load_translation_catalog(DATA_DIR / "holidays.yaml")
    logger.debug("Loaded translations for %d holidays", len(table))
    return table
