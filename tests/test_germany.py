"""
Germany Provider Tests

Tests cover:
- National holidays and their gates
- Thuringia replacing Reformation Day, World Children's Day
- Saarland additions
"""
import pytest
from datetime import date

from holidaypilot.models import HolidayType
from holidaypilot.providers import GERMANY, SAARLAND, THURINGIA


class TestGermany:
    """Tests for nationwide holidays."""

    def test_holidays_2024(self):
        holidays = GERMANY.holidays(2024)
        assert holidays.keys() == [
            "newYearsDay",
            "goodFriday",
            "easterMonday",
            "internationalWorkersDay",
            "ascensionDay",
            "pentecostMonday",
            "germanUnityDay",
            "christmasDay",
            "secondChristmasDay",
        ]

    def test_reformation_day_only_in_2017(self):
        assert GERMANY.holidays(2017)["reformationDay"].date == date(2017, 10, 31)
        assert "reformationDay" not in GERMANY.holidays(2016)
        assert "reformationDay" not in GERMANY.holidays(2018)

    def test_german_unity_day_since_1990(self):
        assert "germanUnityDay" not in GERMANY.holidays(1989)
        assert GERMANY.holidays(1990)["germanUnityDay"].date == date(1990, 10, 3)

    def test_workers_day_since_1933(self):
        assert "internationalWorkersDay" not in GERMANY.holidays(1932)
        assert "internationalWorkersDay" in GERMANY.holidays(1933)

    def test_names(self):
        holidays = GERMANY.holidays(2024)
        assert holidays.name("pentecostMonday") == "Pfingstmontag"
        assert holidays.name("pentecostMonday", "en") == "Whit Monday"
        assert holidays.name("germanUnityDay", "fr_FR") == "German Unity Day"

    def test_working_days(self):
        holidays = GERMANY.holidays(2024)
        # Thursday October 3 is German Unity Day
        assert not holidays.is_working_day(date(2024, 10, 3))
        assert holidays.next_working_day(date(2024, 10, 2)) == date(2024, 10, 4)


class TestThuringia:
    """Tests for Thuringia."""

    def test_reformation_day_since_1517(self):
        assert "reformationDay" not in THURINGIA.holidays(1516)
        assert THURINGIA.holidays(1517)["reformationDay"].date == date(1517, 10, 31)

    def test_single_reformation_day_in_2017(self):
        holidays = THURINGIA.holidays(2017)
        assert [h.key for h in holidays.on(date(2017, 10, 31))] == ["reformationDay"]

    def test_world_childrens_day(self):
        assert "worldChildrensDay" not in THURINGIA.holidays(2018)
        holiday = THURINGIA.holidays(2019)["worldChildrensDay"]
        assert holiday.date == date(2019, 9, 20)
        assert holiday.type == HolidayType.OFFICIAL

    def test_inherits_national_holidays(self):
        holidays = THURINGIA.holidays(2024)
        assert "germanUnityDay" in holidays
        assert holidays.jurisdiction == "DE-TH"
        assert holidays.name("worldChildrensDay") == "Weltkindertag"
        assert holidays.name("reformationDay") == "Reformationstag"


class TestSaarland:
    """Tests for Saarland."""

    def test_additions(self):
        holidays = SAARLAND.holidays(2024)
        assert holidays["corpusChristi"].date == date(2024, 5, 30)
        assert holidays["allSaintsDay"].date == date(2024, 11, 1)

    def test_assumption_is_other(self):
        holidays = SAARLAND.holidays(2024)
        assert holidays["assumptionOfMary"].type == HolidayType.OTHER
        assert holidays.is_working_day(date(2024, 8, 15))

    @pytest.mark.parametrize("year,expected", [(1997, date(1997, 5, 29)), (2019, date(2019, 6, 20))])
    def test_corpus_christi(self, year, expected):
        assert SAARLAND.holidays(year)["corpusChristi"].date == expected
