"""
Holiday and business day queries for the Russian Federation.

    >>> from ru_holidays import is_holiday, is_business_day
    >>> is_holiday(2015, 1, 1)
    'Новогодние каникулы'
    >>> is_business_day(2012, 3, 11)
    True
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .config import Settings
from .exceptions import ParameterError
from .regions import normalize_region
from .resolver import ResolvedHolidayMap, RuleResolver
from .store import SpecialOverrides, load_overrides
from .versioned import date_key


def _check_params(year: int, month: int, day: int) -> None:
    if not (year and month and day):
        raise ParameterError("Bad params: year, month and day are required")


class HolidayCalendar:
    """Answers holiday, business day and shortened day questions."""

    def __init__(
        self, resolver: Optional[RuleResolver] = None, strict_regions: bool = False
    ):
        self.resolver = resolver or RuleResolver()
        self.strict_regions = strict_regions

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "HolidayCalendar":
        """Calendar configured from the environment."""
        settings = settings or Settings.from_env()
        overrides = load_overrides(settings.overrides_path)
        return cls(RuleResolver(overrides=overrides), strict_regions=settings.strict_regions)

    @property
    def overrides(self) -> SpecialOverrides:
        return self.resolver.overrides

    def holidays(self, year: int, region: Optional[str] = None) -> ResolvedHolidayMap:
        """All holidays of the year as a read-only "MMDD" -> name mapping."""
        if not year:
            raise ParameterError("Bad year")
        return self.resolver.resolve(year, normalize_region(region, self.strict_regions))

    def is_holiday(
        self, year: int, month: int, day: int, region: Optional[str] = None
    ) -> Optional[str]:
        """Returns the holiday name or None."""
        _check_params(year, month, day)
        return self.holidays(year, region).get(date_key(month, day))

    is_ru_holiday = is_holiday

    def is_business_day(
        self, year: int, month: int, day: int, region: Optional[str] = None
    ) -> bool:
        """Checks holidays, weekends and weekends declared working days."""
        _check_params(year, month, day)

        if self.is_holiday(year, month, day, region):
            return False

        if date(year, month, day).isoweekday() < 6:
            return True

        return self.overrides.is_business_weekend(year, date_key(month, day))

    def is_short_business_day(self, year: int, month: int, day: int) -> bool:
        """Checks whether the day has officially reduced working hours."""
        _check_params(year, month, day)
        return self.overrides.is_short(year, date_key(month, day))


default_calendar = HolidayCalendar.from_settings()


def holidays(year: int, region: Optional[str] = None) -> ResolvedHolidayMap:
    return default_calendar.holidays(year, region)


def is_holiday(
    year: int, month: int, day: int, region: Optional[str] = None
) -> Optional[str]:
    return default_calendar.is_holiday(year, month, day, region)


is_ru_holiday = is_holiday


def is_business_day(
    year: int, month: int, day: int, region: Optional[str] = None
) -> bool:
    return default_calendar.is_business_day(year, month, day, region)


def is_short_business_day(year: int, month: int, day: int) -> bool:
    return default_calendar.is_short_business_day(year, month, day)
