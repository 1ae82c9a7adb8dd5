"""
HolidayPilot Translations

Locale catalogs and display-name resolution.

Usage:
    from holidaypilot.translations import TranslationResolver

    resolver = TranslationResolver()
    resolver.resolve("christmasDay", "de_CH")   # 'Weihnachtstag'
"""
from __future__ import annotations

from .catalog import (
    CATALOG_SCHEMA_VERSION,
    LocaleCatalogSchema,
    TranslationCatalogSchema,
    default_translations,
    freeze_table,
    load_locale_catalog,
    load_translation_catalog,
    merge_tables,
    recognized_locales,
)
from .resolver import (
    DEFAULT_LOCALE,
    TranslationResolver,
    locale_candidates,
    validate_locale,
)

__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "DEFAULT_LOCALE",
    "LocaleCatalogSchema",
    "TranslationCatalogSchema",
    "TranslationResolver",
    "default_translations",
    "freeze_table",
    "load_locale_catalog",
    "load_translation_catalog",
    "locale_candidates",
    "merge_tables",
    "recognized_locales",
    "validate_locale",
]
