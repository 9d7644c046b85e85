"""
Resolution of the rule tables into the holidays of one year.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import DomainError, TableInvariantViolation
from .rules import NATIONWIDE_HOLIDAYS, REGIONAL_HOLIDAYS, HolidayRule
from .store import MOVED_HOLIDAY_NAME, OverridesStore, SpecialOverrides
from .versioned import Fixed

logger = logging.getLogger(__name__)

HOLIDAYS_VALID_SINCE = 1991

# "MMDD" -> holiday name, read-only
ResolvedHolidayMap = Mapping[str, str]


class HolidayCache:
    """Resolved holiday maps keyed by (year, region).

    Entries are kept for the lifetime of the cache and never invalidated,
    as the tables they are computed from are constant. Safe to share
    between threads: a map may be computed twice, but only the first one
    stored is ever returned.
    """

    def __init__(self):
        self._maps: dict[tuple[int, str], ResolvedHolidayMap] = {}
        self._lock = threading.Lock()

    def get(self, key: tuple[int, str]) -> Optional[ResolvedHolidayMap]:
        return self._maps.get(key)

    def setdefault(
        self, key: tuple[int, str], value: ResolvedHolidayMap
    ) -> ResolvedHolidayMap:
        """Stores value unless key is present. Returns the stored map."""
        with self._lock:
            return self._maps.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            self._maps.clear()

    def __contains__(self, key: tuple[int, str]) -> bool:
        return key in self._maps

    def __len__(self) -> int:
        return len(self._maps)


class RuleResolver:
    """Computes the holiday map of a year for the whole country or a region."""

    def __init__(
        self,
        nationwide: Mapping[str, HolidayRule] = NATIONWIDE_HOLIDAYS,
        regional: Mapping[str, Mapping[str, HolidayRule]] = REGIONAL_HOLIDAYS,
        overrides: Optional[SpecialOverrides] = None,
        cache: Optional[HolidayCache] = None,
    ):
        self.nationwide = nationwide
        self.regional = regional
        self.overrides = overrides if overrides is not None else OverridesStore().load()
        self.cache = cache if cache is not None else HolidayCache()

    def resolve(self, year: int, region: str = "") -> ResolvedHolidayMap:
        """Holidays of year, region being a normalized code or "".

        Raises:
            DomainError: year is before 1991
            TableInvariantViolation: a rule has days but no name for year
        """
        key = (year, region)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        holidays = self._regular_holidays(year, region)

        for day in self.overrides.moved(year):
            holidays[day] = MOVED_HOLIDAY_NAME

        return self.cache.setdefault(key, MappingProxyType(holidays))

    def _regular_holidays(self, year: int, region: str) -> dict[str, str]:
        if year < HOLIDAYS_VALID_SINCE:
            raise DomainError(f"RU holidays are not valid before {HOLIDAYS_VALID_SINCE}")

        rules = [*self.nationwide.values(), *self.regional.get(region, {}).values()]

        result: dict[str, str] = {}
        for rule in rules:
            days = self._resolve_days(rule, year)
            if not days:
                continue

            name = rule.name.resolve(year)
            if not name:
                raise TableInvariantViolation(
                    f"Holiday {rule.key!r} has days in {year} but no name"
                )

            for day in days:
                previous = result.get(day)
                if previous is not None and previous != name:
                    logger.debug(
                        "%s %s: %r replaces %r", year, day, name, previous
                    )
                result[day] = name

        return result

    @staticmethod
    def _resolve_days(rule: HolidayRule, year: int) -> list[str]:
        source = rule.days.resolve(year)
        if source is None:
            return []

        if isinstance(source, Fixed):
            return list(source.days)

        days = source(year)
        if days is None:
            logger.warning(
                "Value for %d is expected but not defined (holiday %r)", year, rule.key
            )
            return []
        if isinstance(days, str):
            return [days]
        return list(days)
