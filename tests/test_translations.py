"""
Translation Tests

Tests cover:
- Locale candidate chains
- Locale validation
- Name resolution order (own translations, jurisdiction table, fallbacks)
- Catalog loading and validation
"""
import pytest
from datetime import date

from holidaypilot.exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    MissingTranslationError,
    UnknownLocaleError,
)
from holidaypilot.models import Holiday
from holidaypilot.translations import (
    TranslationResolver,
    default_translations,
    load_locale_catalog,
    load_translation_catalog,
    locale_candidates,
    merge_tables,
    recognized_locales,
    validate_locale,
)


# =============================================================================
# Locale Handling
# =============================================================================

class TestLocaleCandidates:
    """Tests for locale fallback chains."""

    def test_script_and_region(self):
        assert locale_candidates("sr_Latn_BA") == ["sr_Latn_BA", "sr_Latn", "sr", "en"]

    def test_region(self):
        assert locale_candidates("de_CH") == ["de_CH", "de", "en"]

    def test_default_not_repeated(self):
        assert locale_candidates("en_US") == ["en_US", "en"]
        assert locale_candidates("en") == ["en"]

    def test_custom_default(self):
        assert locale_candidates("fr_CH", "de") == ["fr_CH", "fr", "de"]


class TestValidateLocale:
    """Tests for the recognized locale set."""

    @pytest.mark.parametrize("locale", ["en", "en_US", "de_CH", "fr_CH", "ja_JP", "sr_Latn_BA"])
    def test_recognized(self, locale):
        assert validate_locale(locale) == locale

    @pytest.mark.parametrize("locale", ["xx_XX", "", "EN", "de-CH"])
    def test_unrecognized(self, locale):
        with pytest.raises(UnknownLocaleError):
            validate_locale(locale)

    def test_custom_set(self):
        assert validate_locale("tlh", frozenset({"tlh"})) == "tlh"

    def test_builtin_catalog_loaded(self):
        locales = recognized_locales()
        assert "en" in locales
        assert "rm_CH" in locales


# =============================================================================
# Resolver
# =============================================================================

class TestTranslationResolver:
    """Tests for name resolution order."""

    def test_table_lookup(self):
        resolver = TranslationResolver()
        assert resolver.resolve("newYearsDay", "de_CH") == "Neujahr"
        assert resolver.resolve("christmasDay", "fr_FR") == "Noël"

    def test_own_translation_wins(self):
        resolver = TranslationResolver()
        own = {"de": "Neujahrstag"}
        assert resolver.resolve("newYearsDay", "de", translations=own) == "Neujahrstag"

    def test_exact_locale_before_language(self):
        table = {"christmasDay": {"de": "Weihnachtstag", "de_CH": "Weihnachten"}}
        resolver = TranslationResolver(table)
        assert resolver.resolve("christmasDay", "de_CH") == "Weihnachten"
        assert resolver.resolve("christmasDay", "de_AT") == "Weihnachtstag"

    def test_table_exact_locale_before_own_language(self):
        table = {"christmasDay": {"de_CH": "Weihnachten"}}
        resolver = TranslationResolver(table)
        own = {"de": "Weihnachtstag"}
        assert resolver.resolve("christmasDay", "de_CH", translations=own) == "Weihnachten"

    def test_falls_back_to_english(self):
        resolver = TranslationResolver()
        assert resolver.resolve("stPatricksDay", "fr_FR") == "St. Patrick’s Day"

    def test_missing_translation(self):
        resolver = TranslationResolver({})
        with pytest.raises(MissingTranslationError) as exc_info:
            resolver.resolve("unknownDay", "de_CH")
        assert exc_info.value.details["tried"] == ["de_CH", "de", "en"]

    def test_substitute_uses_original_table_entry(self):
        resolver = TranslationResolver()
        holiday = Holiday(
            key="substitute:christmasDay",
            date=date(2022, 12, 27),
            substitute_of="christmasDay",
        )
        assert resolver.resolve_holiday(holiday, "ga_IE") == "Lá Nollag"


# =============================================================================
# Catalogs
# =============================================================================

class TestCatalogs:
    """Tests for catalog loading."""

    def test_default_translations(self):
        table = default_translations()
        assert table["pentecostMonday"]["de"] == "Pfingstmontag"
        assert table["cultureDay"]["ja"] == "文化の日"

    def test_default_translations_read_only(self):
        with pytest.raises(TypeError):
            default_translations()["newYearsDay"]["de"] = "Silvester"

    def test_merge_tables(self):
        merged = merge_tables(
            {"a": {"en": "A", "de": "A-de"}},
            {"a": {"de": "A-neu"}, "b": {"en": "B"}},
        )
        assert dict(merged["a"]) == {"en": "A", "de": "A-neu"}
        assert dict(merged["b"]) == {"en": "B"}

    def test_load_translation_catalog(self, tmp_path):
        path = tmp_path / "names.yaml"
        path.write_text(
            'schema_version: "1.0.0"\n'
            "translations:\n"
            "  harvestDay:\n"
            "    en: Harvest Day\n"
            "    de: Erntedank\n",
            encoding="utf-8",
        )
        table = load_translation_catalog(path)
        assert table["harvestDay"]["de"] == "Erntedank"

    def test_load_translation_catalog_json(self, tmp_path):
        path = tmp_path / "names.json"
        path.write_text('{"translations": {"harvestDay": {"en": "Harvest Day"}}}', encoding="utf-8")
        assert load_translation_catalog(path)["harvestDay"]["en"] == "Harvest Day"

    def test_invalid_locale_code(self, tmp_path):
        path = tmp_path / "names.yaml"
        path.write_text("translations:\n  harvestDay:\n    English: Harvest Day\n", encoding="utf-8")
        with pytest.raises(CatalogValidationError):
            load_translation_catalog(path)

    def test_empty_name(self, tmp_path):
        path = tmp_path / "names.yaml"
        path.write_text("translations:\n  harvestDay:\n    en: '  '\n", encoding="utf-8")
        with pytest.raises(CatalogValidationError):
            load_translation_catalog(path)

    def test_duplicate_locale(self, tmp_path):
        path = tmp_path / "locales.yaml"
        path.write_text("locales: [en, de, en]\n", encoding="utf-8")
        with pytest.raises(CatalogValidationError):
            load_locale_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_locale_catalog(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "locales.yaml"
        path.write_text("- en\n- de\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_locale_catalog(path)
