"""
Holiday checks for datetime.date values.
"""

from datetime import date
from typing import Optional

import pandas as pd

from .calendar import HolidayCalendar, default_calendar
from .regions import normalize_region
from .versioned import split_date_key


class HolidayChecker:
    """Checks if a date is a holiday, optionally for a region."""

    def __init__(
        self, region: Optional[str] = None, calendar: Optional[HolidayCalendar] = None
    ):
        self.calendar = calendar or default_calendar
        self.region = normalize_region(region, self.calendar.strict_regions)

    def is_holiday(self, d: date) -> bool:
        """Checks if date is a holiday."""
        return self.get_holiday_name(d) is not None

    def get_holiday_name(self, d: date) -> Optional[str]:
        """Returns holiday name or None."""
        return self.calendar.is_holiday(d.year, d.month, d.day, self.region)

    def is_business_day(self, d: date) -> bool:
        return self.calendar.is_business_day(d.year, d.month, d.day, self.region)

    def is_short_business_day(self, d: date) -> bool:
        return self.calendar.is_short_business_day(d.year, d.month, d.day)

    def holidays_between(self, start: date, end: date) -> pd.Series:
        """Holiday names indexed by date, both ends included."""
        entries: dict[pd.Timestamp, str] = {}

        for year in range(start.year, end.year + 1):
            for key, name in self.calendar.holidays(year, self.region).items():
                month, day = split_date_key(key)
                ts = pd.Timestamp(year=year, month=month, day=day)
                if start <= ts.date() <= end:
                    entries[ts] = name

        index = pd.DatetimeIndex(sorted(entries), name="date")
        return pd.Series(
            [entries[ts] for ts in index], index=index, name="holiday", dtype=object
        )
