"""
Test cases for floating holiday dates.
"""

from datetime import date

import pytest

from ru_holidays.exceptions import DomainError
from ru_holidays.floating import (
    Tabulator,
    eid_al_adha,
    eid_al_fitr,
    hijri_approximation,
    orthodox_easter_offset,
    radonitsa,
)


def _as_date(year: int, key: str) -> date:
    return date(year, int(key[:2]), int(key[2:]))


class TestOrthodoxEaster:
    def test_easter_itself(self):
        assert orthodox_easter_offset(2015, 0) == "0412"

    def test_radonitsa(self):
        assert radonitsa(2012) == "0424"
        assert radonitsa(2015) == "0421"
        assert radonitsa(2020) == "0428"

    @pytest.mark.parametrize("year", [1500, 5000])
    def test_outside_supported_years(self, year):
        with pytest.raises(DomainError):
            radonitsa(year)


class TestHijriApproximation:
    def test_date_falling_twice_in_a_year(self):
        # 10 Dhu al-Hijjah of 1426 and 1427 AH
        assert hijri_approximation(2006, 12, 10) == ["0110", "1231"]

    def test_eid_al_fitr_approximation_within_a_day(self):
        days = eid_al_fitr(2020)

        # Observed on 2020-05-24
        assert len(days) == 1
        assert abs((_as_date(2020, days[0]) - date(2020, 5, 24)).days) <= 1

    def test_eid_al_adha_approximation_within_a_day(self):
        days = eid_al_adha(2021)

        # Observed on 2021-07-20
        assert len(days) == 1
        assert abs((_as_date(2021, days[0]) - date(2021, 7, 20)).days) <= 1

    def test_known_dates_take_precedence(self):
        assert eid_al_fitr(2013) == "0808"
        assert eid_al_adha(2015) == "0924"
        assert eid_al_adha(2006) == ["0110", "1231"]


class TestTabulator:
    def test_known_year(self):
        tabulator = Tabulator({2013: "0217", 2014: "0202"})

        assert tabulator(2013) == "0217"
        assert tabulator(2014) == "0202"

    def test_unknown_year_without_default(self):
        assert Tabulator({2013: "0217"})(2020) is None
        assert Tabulator({})(2020) is None

    def test_default_value(self):
        tabulator = Tabulator({2013: "0217"}, default="0301")

        assert tabulator(2013) == "0217"
        assert tabulator(2020) == "0301"

    def test_default_function(self):
        tabulator = Tabulator({}, default=lambda year: ["0101"] if year > 2000 else None)

        assert tabulator(2010) == ["0101"]
        assert tabulator(1999) is None

    def test_rejects_non_mapping(self):
        with pytest.raises(TypeError, match="Unsupported table type"):
            Tabulator([2013, "0217"])
