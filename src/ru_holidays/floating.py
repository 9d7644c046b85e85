"""
Floating holiday dates.

Orthodox Easter based observances, approximate Islamic feasts and
manually compiled year tables.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Mapping, Optional, Union

from convertdate import islamic
from dateutil.easter import EASTER_ORTHODOX, easter

from .exceptions import DomainError
from .versioned import DaySet, date_key

logger = logging.getLogger(__name__)

# dateutil's Easter algorithms are defined for this range
EASTER_MIN_YEAR = 1583
EASTER_MAX_YEAR = 4099

RADONITSA_OFFSET_DAYS = 9

SHAWWAL = 10
DHU_AL_HIJJAH = 12

# Exact dates as observed in Tatarstan and Bashkortostan
KNOWN_EID_AL_FITR: dict[int, DaySet] = {
    2006: "1023",
    2007: "1012",
    2008: "0930",
    2009: "0920",
    2010: "0909",
    2011: "0830",
    2012: "0819",
    2013: "0808",
    2014: "0728",
    2015: "0717",
}

KNOWN_EID_AL_ADHA: dict[int, DaySet] = {
    2006: ["0110", "1231"],
    2007: "1220",
    2008: "1208",
    2009: "1127",
    2010: "1116",
    2011: "1106",
    2012: "1025",
    2013: "1015",
    2014: "1004",
    2015: "0924",
}


def orthodox_easter_offset(year: int, offset_days: int) -> str:
    """Day key of Orthodox Easter (Gregorian calendar) plus offset_days."""
    if not EASTER_MIN_YEAR <= year <= EASTER_MAX_YEAR:
        raise DomainError(
            f"Easter is computed for {EASTER_MIN_YEAR}-{EASTER_MAX_YEAR}, got {year}"
        )
    d = easter(year, EASTER_ORTHODOX) + timedelta(days=offset_days)
    return date_key(d.month, d.day)


def radonitsa(year: int) -> str:
    """Radonitsa, the 9th day after Orthodox Easter."""
    return orthodox_easter_offset(year, RADONITSA_OFFSET_DAYS)


def hijri_approximation(
    year: int, hijri_month: int, hijri_day: int, shift_days: int = 0
) -> list[str]:
    """Gregorian day keys in year for a Hijri month and day.

    Uses the arithmetic Islamic calendar, so the result may differ by a day
    from dates fixed by moon sighting. A Hijri date can fall twice in one
    Gregorian year, or not at all.
    """
    hijri_year, _, _ = islamic.from_gregorian(year, 1, 1)

    results: list[str] = []
    for delta in range(3):
        gy, gm, gd = islamic.to_gregorian(hijri_year + delta, hijri_month, hijri_day)
        d = date(gy, gm, gd) + timedelta(days=shift_days)
        if d.year != year:
            continue
        results.append(date_key(d.month, d.day))

    return results


def eid_al_fitr(year: int) -> DaySet:
    """Uraza Bayram: known date, or the approximation of 1 Shawwal."""
    known = KNOWN_EID_AL_FITR.get(year)
    if known:
        return known
    logger.debug("No known Eid al-Fitr date for %d, approximating", year)
    # A day earlier matches observed dates better
    return hijri_approximation(year, SHAWWAL, 1, shift_days=-1)


def eid_al_adha(year: int) -> DaySet:
    """Kurban Bayram: known date, or the approximation of 10 Dhu al-Hijjah."""
    known = KNOWN_EID_AL_ADHA.get(year)
    if known:
        return known
    logger.debug("No known Eid al-Adha date for %d, approximating", year)
    return hijri_approximation(year, DHU_AL_HIJJAH, 10, shift_days=-1)


Default = Union[DaySet, Callable[[int], Optional[DaySet]], None]


class Tabulator:
    """Year lookup for observances whose dates are compiled by hand.

    Returns None for years that have not been compiled yet, unless a
    default (a day set or a function of the year) is given.
    """

    def __init__(self, table: Mapping[int, DaySet], default: Default = None):
        if not isinstance(table, Mapping):
            raise TypeError(f"Unsupported table type: {type(table).__name__}")
        self.table = dict(table)
        self.default = default

    def __call__(self, year: int) -> Optional[DaySet]:
        value = self.table.get(year)
        if value is None and self.default is not None:
            value = self.default(year) if callable(self.default) else self.default
        return value

    def __repr__(self) -> str:
        return f"Tabulator({self.table!r})"
