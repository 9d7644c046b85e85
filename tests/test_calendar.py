"""
Test cases for the public holiday queries.
"""

from datetime import date, timedelta

import pytest

from ru_holidays import (
    holidays,
    is_business_day,
    is_holiday,
    is_ru_holiday,
    is_short_business_day,
)
from ru_holidays.calendar import HolidayCalendar
from ru_holidays.config import Settings
from ru_holidays.exceptions import DomainError, InvalidRegionError, ParameterError
from ru_holidays.store import MOVED_HOLIDAY_NAME


class TestIsHoliday:
    def test_new_year_holidays(self):
        assert is_holiday(2015, 1, 1) == "Новогодние каникулы"

    def test_new_year_before_2005(self):
        assert is_holiday(2001, 1, 1) == "Новый год"

    def test_rule_not_yet_in_force(self):
        assert is_holiday(2000, 2, 23) is None

    def test_rule_abolished(self):
        assert is_holiday(2014, 11, 7) is None

    def test_renamed_holiday(self):
        assert is_holiday(1995, 11, 7) == "Годовщина Великой Октябрьской социалистической революции"
        assert is_holiday(1996, 11, 7) == "День согласия и примирения"

    def test_moved_holiday(self):
        assert is_holiday(2014, 3, 10) == MOVED_HOLIDAY_NAME

    def test_ordinary_day(self):
        assert is_holiday(2006, 5, 2) is None

    def test_alias(self):
        assert is_ru_holiday(2015, 1, 1) == is_holiday(2015, 1, 1)

    @pytest.mark.parametrize("args", [(0, 1, 1), (2015, 0, 1), (2015, 1, 0), (None, 1, 1)])
    def test_missing_params(self, args):
        with pytest.raises(ParameterError):
            is_holiday(*args)

    def test_before_epoch(self):
        with pytest.raises(DomainError):
            is_holiday(1990, 1, 1)


class TestRegionalHolidays:
    def test_adygea_republic_day(self):
        assert is_holiday(2015, 10, 5, "AD") == "День образования Республики Адыгея"
        assert is_holiday(2015, 10, 5) is None
        assert is_holiday(2015, 10, 5, "BA") is None

    def test_tabulated_feast(self):
        assert is_holiday(2015, 2, 22, "AL") == "Чага-Байрам"
        assert is_holiday(2015, 2, 22) is None

    def test_eid_from_known_table(self):
        assert is_holiday(2013, 8, 8, "TA") == "Ураза-Байрам"
        assert is_holiday(2006, 12, 31, "BA") == "Курбан-Байрам"

    def test_beyond_table_is_absent(self, calendar):
        assert calendar.is_holiday(2030, 2, 22, "AL") is None

    @pytest.mark.parametrize("region", ["AD", "ad", "RU-AD", "ru-ad", "Ru-Ad"])
    def test_region_spellings(self, calendar, region):
        assert calendar.is_holiday(2015, 10, 5, region) == "День образования Республики Адыгея"

    @pytest.mark.parametrize("region", ["A", "ABCD", "RU-", "A-B", "RU-ADYG"])
    def test_malformed_region(self, calendar, region):
        with pytest.raises(InvalidRegionError):
            calendar.is_holiday(2015, 10, 5, region)

    def test_unknown_region_is_lenient(self, calendar):
        assert dict(calendar.holidays(2015, "ZZ")) == dict(calendar.holidays(2015))

    def test_unknown_region_in_strict_mode(self, strict_calendar):
        with pytest.raises(InvalidRegionError):
            strict_calendar.holidays(2015, "ZZ")

        assert strict_calendar.is_holiday(2015, 10, 5, "RU-AD") == "День образования Республики Адыгея"


class TestHolidays:
    def test_returns_year_map(self):
        result = holidays(2014)

        assert result["0310"] == MOVED_HOLIDAY_NAME
        assert result["0101"] == "Новогодние каникулы"

    def test_idempotent(self):
        assert holidays(2015, "TA") is holidays(2015, "TA")
        assert is_holiday(2015, 1, 1) == is_holiday(2015, 1, 1)

    def test_missing_year(self):
        with pytest.raises(ParameterError):
            holidays(0)

    @pytest.mark.parametrize("region", [None, "AD", "AL", "BA", "DA", "KL", "SAR", "TA", "TY"])
    def test_keys_are_valid_dates(self, calendar, region):
        for year in range(1991, 2031):
            for key in calendar.holidays(year, region):
                assert len(key) == 4
                date(year, int(key[:2]), int(key[2:]))


class TestBusinessDays:
    def test_working_sunday(self):
        assert is_business_day(2012, 3, 11) is True

    def test_working_saturday(self):
        assert is_business_day(2012, 5, 5) is True

    def test_regular_weekend(self):
        assert is_business_day(2015, 1, 10) is False

    def test_weekday(self):
        assert is_business_day(2015, 1, 13) is True

    def test_holiday(self):
        assert is_business_day(2015, 1, 1) is False
        assert is_business_day(2014, 3, 10) is False

    def test_regional_holiday(self):
        # 2015-10-05 is a Monday
        assert is_business_day(2015, 10, 5) is True
        assert is_business_day(2015, 10, 5, "AD") is False

    def test_missing_params(self):
        with pytest.raises(ParameterError):
            is_business_day(2015, 0, 5)

    @pytest.mark.parametrize("year", [2012, 2015])
    def test_consistent_with_holidays(self, calendar, year):
        year_holidays = calendar.holidays(year)
        d = date(year, 1, 1)
        while d.year == year:
            name = calendar.is_holiday(d.year, d.month, d.day)
            business = calendar.is_business_day(d.year, d.month, d.day)

            assert (name is not None) == (f"{d.month:02d}{d.day:02d}" in year_holidays)
            assert not (name and business)
            d += timedelta(days=1)


class TestShortBusinessDays:
    def test_short_day(self):
        assert is_short_business_day(2015, 4, 30) is True

    def test_regular_day(self):
        assert is_short_business_day(2015, 5, 1) is False

    def test_year_without_table(self):
        assert is_short_business_day(2030, 12, 31) is False


class TestFromSettings:
    def test_extra_overrides(self, extra_overrides_file):
        calendar = HolidayCalendar.from_settings(
            Settings(overrides_path=str(extra_overrides_file))
        )

        assert calendar.is_holiday(2018, 3, 9) == MOVED_HOLIDAY_NAME
        assert calendar.is_business_day(2018, 4, 28) is True
        assert calendar.is_short_business_day(2018, 3, 7) is True

    def test_strict_regions(self):
        calendar = HolidayCalendar.from_settings(Settings(strict_regions=True))

        with pytest.raises(InvalidRegionError):
            calendar.is_holiday(2015, 1, 1, "ZZ")
