"""
HolidayPilot Translation Resolver

Resolves a holiday's display name for a requested locale.

Resolution order (first match wins):
1. The holiday's own translations, exact locale
2. The jurisdiction's translation table, exact locale
3. Same two lookups with the region stripped (de_CH -> de)
4. Same two lookups for the default locale (en)

Anything else is a MissingTranslationError.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Mapping, Optional

from ..exceptions import MissingTranslationError, UnknownLocaleError
from .catalog import default_translations, recognized_locales

if TYPE_CHECKING:
    from ..models.holiday import Holiday


DEFAULT_LOCALE = "en"


def locale_candidates(locale: str, default_locale: str = DEFAULT_LOCALE) -> list[str]:
    """
    Locales to try, most specific first.

    Example:
        locale_candidates("sr_Latn_BA") -> ["sr_Latn_BA", "sr_Latn", "sr", "en"]
    """
    candidates = []
    current = locale
    while current:
        candidates.append(current)
        if "_" not in current:
            break
        current = current.rsplit("_", 1)[0]
    if default_locale not in candidates:
        candidates.append(default_locale)
    return candidates


def validate_locale(locale: str, recognized: Optional[AbstractSet[str]] = None) -> str:
    """
    Check a locale against the recognized set.

    Raises:
        UnknownLocaleError: If the locale is not recognized
    """
    known = recognized if recognized is not None else recognized_locales()
    if locale not in known:
        raise UnknownLocaleError(
            message=f"Locale '{locale}' is not recognized",
            details={"locale": locale},
        )
    return locale


class TranslationResolver:
    """
    Resolves display names against a jurisdiction translation table.

    Usage:
        resolver = TranslationResolver()
        resolver.resolve("newYearsDay", "de_CH")          # 'Neujahr'
        resolver.resolve_holiday(holiday, "fr_FR")
    """

    def __init__(
        self,
        table: Optional[Mapping[str, Mapping[str, str]]] = None,
        default_locale: str = DEFAULT_LOCALE,
    ):
        """
        Initialize the resolver.

        Args:
            table: Jurisdiction translation table (defaults to the built-in catalog)
            default_locale: Last-resort locale
        """
        self.table = table if table is not None else default_translations()
        self.default_locale = default_locale

    def resolve(
        self,
        key: str,
        locale: str,
        translations: Optional[Mapping[str, str]] = None,
        table_key: Optional[str] = None,
    ) -> str:
        """
        Resolve a name.

        Args:
            key: Holiday key (used in errors)
            locale: Requested locale
            translations: The holiday's own translations
            table_key: Key to look up in the jurisdiction table (defaults to key)

        Raises:
            MissingTranslationError: If no candidate locale has a name
        """
        own = translations or {}
        shared = self.table.get(table_key or key, {})
        candidates = locale_candidates(locale, self.default_locale)

        for candidate in candidates:
            if candidate in own:
                return own[candidate]
            if candidate in shared:
                return shared[candidate]

        raise MissingTranslationError(
            message=f"No translation for holiday '{key}' in locale '{locale}'",
            details={"key": key, "locale": locale, "tried": candidates},
        )

    def resolve_holiday(self, holiday: Holiday, locale: str) -> str:
        """Resolve a holiday's name; substitutes fall back to the original's table entry."""
        return self.resolve(
            holiday.key,
            locale,
            translations=holiday.translations,
            table_key=holiday.substitute_of or holiday.key,
        )
