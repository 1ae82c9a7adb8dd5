"""
Provider Pack Tests

Validates:
- YAML and JSON packs load into working providers
- Parent jurisdictions resolve through the registry
- Malformed packs fail with PackLoadError / PackValidationError
- Incompatible schema versions fail with PackVersionMismatch
"""
import json
import pytest
import yaml
from datetime import date

from holidaypilot.calendars import CustomDate, NthWeekday, SUNDAY
from holidaypilot.exceptions import (
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
)
from holidaypilot.models import HolidayType, SearchDirection
from holidaypilot.packs import (
    ProviderPackLoader,
    load_provider_pack,
    load_provider_pack_from_string,
    validate_provider_pack,
)
from holidaypilot.providers import SWITZERLAND


# ============================================================================
# FIXTURES
# ============================================================================

VALAIS_YAML = """
schema_version: "1.0.0"
code: ch-vs
name: Switzerland/Valais
parent: Switzerland
sources:
  - https://de.wikipedia.org/wiki/Feiertage_in_der_Schweiz
rules:
  - key: newYearsDay
    type: other
    date: {fixed: {month: 1, day: 1}}
  - key: stJosephsDay
    type: other
    date: {fixed: {month: 3, day: 19}}
    translations:
      de: Josefstag
      fr: Saint-Joseph
      en: St. Joseph's Day
  - key: corpusChristi
    type: other
    date: {easter: {offset: 60}}
"""


@pytest.fixture
def minimal_root_pack():
    """Minimal root jurisdiction pack."""
    return {
        "schema_version": "1.0.0",
        "code": "FR-XX",
        "name": "Freedonia",
        "timezone": "Europe/Paris",
        "default_locale": "fr_FR",
        "rules": [
            {
                "key": "newYearsDay",
                "date": {"fixed": {"month": 1, "day": 1}},
            },
        ],
    }


@pytest.fixture
def full_root_pack(minimal_root_pack):
    """Root pack exercising every date kind and substitution."""
    pack = dict(minimal_root_pack)
    pack["translations"] = {"harvestDay": {"en": "Harvest Day", "fr": "Fête des vendanges"}}
    pack["rules"] = [
        {
            "key": "newYearsDay",
            "date": {"fixed": {"month": 1, "day": 1}},
            "substitution": {
                "non_working_days": ["saturday", "sunday"],
                "type": "bank",
                "translations": {"en": "New Year (observed)"},
            },
        },
        {"key": "easterMonday", "date": {"easter": {"offset": 1}}},
        {
            "key": "harvestDay",
            "type": "observance",
            "date": {
                "nth_weekday": {"month": 9, "weekday": "sunday", "ordinal": 3, "offset_days": 1},
            },
            "establishment_year": 1900,
        },
        {
            "key": "sportsDay",
            "date": {"custom": "japan.sports_day"},
            "translations": {"en": "Sports Day"},
        },
        {
            "key": "libertyDay",
            "date": {"fixed": {"month": 7, "day": 14}},
            "periods": [
                {"start": 1880, "end": 1950, "type": "observance"},
                {"start": 1950, "type": "official"},
            ],
            "translations": {"en": "Liberty Day"},
        },
    ]
    return pack


@pytest.fixture
def loader(registry):
    return ProviderPackLoader(registry=registry)


# ============================================================================
# LOADING
# ============================================================================

class TestLoading:
    """Tests for successful pack loading."""

    def test_load_subdivision_pack(self, loader):
        provider = loader.load_string(VALAIS_YAML)
        assert provider.code == "CH-VS"
        assert provider.parent is SWITZERLAND
        assert provider.timezone == "Europe/Zurich"
        assert provider.default_locale == "de_CH"

        holidays = provider.holidays(2024)
        assert holidays["stJosephsDay"].date == date(2024, 3, 19)
        assert holidays["stJosephsDay"].type == HolidayType.OTHER
        assert holidays["corpusChristi"].date == date(2024, 5, 30)
        assert "swissNationalDay" in holidays
        assert holidays.name("stJosephsDay") == "Josefstag"

    def test_loaded_pack_is_registered(self, loader, registry):
        provider = loader.load_string(VALAIS_YAML)
        assert registry.lookup("Switzerland/Valais") is provider
        assert provider in registry.subdivisions("CH")

    def test_register_disabled(self, registry):
        loader = ProviderPackLoader(registry=registry, register=False)
        loader.load_string(VALAIS_YAML)
        assert "CH-VS" not in registry

    def test_load_root_pack(self, loader, full_root_pack):
        provider = loader.load_data(full_root_pack)
        assert provider.parent is None
        assert provider.default_locale == "fr_FR"

        rules = {rule.key: rule for rule in provider.rules}
        assert rules["harvestDay"].date_spec == NthWeekday(9, SUNDAY, 3, 1)
        assert isinstance(rules["sportsDay"].date_spec, CustomDate)
        assert rules["newYearsDay"].substitution.direction == SearchDirection.FORWARD

        holidays = provider.holidays(2023)
        assert holidays["easterMonday"].date == date(2023, 4, 10)
        assert holidays["harvestDay"].date == date(2023, 9, 18)
        assert holidays["harvestDay"].type == HolidayType.OBSERVANCE
        assert holidays["sportsDay"].date == date(2023, 10, 9)
        assert holidays.name("harvestDay") == "Fête des vendanges"

    def test_substitution_from_pack(self, loader, full_root_pack):
        holidays = loader.load_data(full_root_pack).holidays(2023, "en")
        substitute = holidays["substitute:newYearsDay"]
        assert substitute.date == date(2023, 1, 2)
        assert substitute.type == HolidayType.BANK
        assert holidays.name("substitute:newYearsDay") == "New Year (observed)"

    def test_periods_from_pack(self, loader, full_root_pack):
        provider = loader.load_data(full_root_pack)
        assert provider.holidays(1900)["libertyDay"].type == HolidayType.OBSERVANCE
        assert provider.holidays(1950)["libertyDay"].type == HolidayType.OFFICIAL
        assert "libertyDay" not in provider.holidays(1879)

    def test_load_yaml_file(self, tmp_path, registry, minimal_root_pack):
        path = tmp_path / "freedonia.yaml"
        path.write_text(yaml.safe_dump(minimal_root_pack), encoding="utf-8")
        provider = load_provider_pack(path, registry=registry)
        assert provider.code == "FR-XX"
        assert "newYearsDay" in provider.holidays(2024)

    def test_load_json_file(self, tmp_path, registry, minimal_root_pack):
        path = tmp_path / "freedonia.json"
        path.write_text(json.dumps(minimal_root_pack), encoding="utf-8")
        assert load_provider_pack(path, registry=registry).name == "Freedonia"

    def test_load_json_string(self, registry, minimal_root_pack):
        provider = load_provider_pack_from_string(
            json.dumps(minimal_root_pack), format="json", registry=registry
        )
        assert provider.timezone == "Europe/Paris"

    def test_pack_parent_chain(self, loader, minimal_root_pack):
        loader.load_data(minimal_root_pack)
        region = loader.load_data(
            {
                "code": "FR-XX-N",
                "name": "Freedonia/North",
                "parent": "FR-XX",
                "removes": ["newYearsDay"],
                "rules": [
                    {"key": "northDay", "date": {"fixed": {"month": 6, "day": 1}}, "translations": {"en": "North Day"}},
                ],
            }
        )
        holidays = region.holidays(2024)
        assert holidays.keys() == ["northDay"]
        assert holidays.locale == "fr_FR"
        assert holidays.name("northDay") == "North Day"

    def test_custom_date_functions(self, registry, minimal_root_pack):
        loader = ProviderPackLoader(
            registry=registry,
            date_functions={"freedonia.midsummer": lambda year: date(year, 6, 24)},
        )
        pack = dict(minimal_root_pack)
        pack["rules"] = [{"key": "midsummer", "date": {"custom": "freedonia.midsummer"}}]
        assert loader.load_data(pack).holidays(2024)["midsummer"].date == date(2024, 6, 24)

    def test_default_registry_not_mutated(self, minimal_root_pack):
        loader = ProviderPackLoader()
        loader.load_data(minimal_root_pack)
        assert "FR-XX" in loader.registry
        assert "FR-XX" not in ProviderPackLoader().registry


# ============================================================================
# FAILURES
# ============================================================================

class TestFailures:
    """Tests for pack errors."""

    def test_malformed_yaml(self, loader):
        with pytest.raises(PackLoadError):
            loader.load_string("code: [unclosed")

    def test_malformed_json(self, loader):
        with pytest.raises(PackLoadError):
            loader.load_string("{not json", format="json")

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(PackLoadError):
            loader.load(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, loader):
        with pytest.raises(PackLoadError):
            loader.load_string("- just\n- a list\n")

    def test_version_mismatch(self, loader, minimal_root_pack):
        minimal_root_pack["schema_version"] = "2.0.0"
        with pytest.raises(PackVersionMismatch) as exc_info:
            loader.load_data(minimal_root_pack)
        assert exc_info.value.details["pack_version"] == "2.0.0"

    def test_version_mismatch_lenient(self, registry, minimal_root_pack):
        minimal_root_pack["schema_version"] = "2.0.0"
        loader = ProviderPackLoader(registry=registry, strict_version=False)
        assert loader.load_data(minimal_root_pack).code == "FR-XX"

    def test_minor_version_accepted(self, loader, minimal_root_pack):
        minimal_root_pack["schema_version"] = "1.4.0"
        assert loader.load_data(minimal_root_pack).code == "FR-XX"

    def test_missing_required_field(self, loader, minimal_root_pack):
        del minimal_root_pack["name"]
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_unknown_field(self, loader, minimal_root_pack):
        minimal_root_pack["colour"] = "blue"
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_root_without_timezone(self, loader, minimal_root_pack):
        del minimal_root_pack["timezone"]
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_two_date_kinds(self, loader, minimal_root_pack):
        minimal_root_pack["rules"][0]["date"]["easter"] = {"offset": 1}
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_bad_ordinal(self, loader, minimal_root_pack):
        minimal_root_pack["rules"][0]["date"] = {
            "nth_weekday": {"month": 1, "weekday": "monday", "ordinal": 0},
        }
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_bad_holiday_type(self, loader, minimal_root_pack):
        minimal_root_pack["rules"][0]["type"] = "mandatory"
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_every_day_non_working(self, loader, minimal_root_pack):
        minimal_root_pack["rules"][0]["substitution"] = {
            "non_working_days": [
                "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
            ],
        }
        with pytest.raises(PackValidationError):
            loader.load_data(minimal_root_pack)

    def test_unknown_custom_function(self, loader, minimal_root_pack):
        minimal_root_pack["rules"][0]["date"] = {"custom": "atlantis.sinking_day"}
        with pytest.raises(PackValidationError) as exc_info:
            loader.load_data(minimal_root_pack)
        assert "japan.sports_day" in exc_info.value.details["available"]

    def test_unknown_parent(self, loader):
        pack = {"code": "XX-YY", "name": "Atlantis/East", "parent": "Atlantis"}
        with pytest.raises(PackValidationError) as exc_info:
            loader.load_data(pack)
        assert exc_info.value.jurisdiction == "XX-YY"

    def test_schema_helper(self, minimal_root_pack):
        schema = validate_provider_pack(minimal_root_pack)
        assert schema.rules[0].type == "official"
        assert schema.removes == []
