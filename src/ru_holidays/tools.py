"""
MCP tool implementations for the holiday calendar.
"""

import logging
from datetime import date
from typing import Annotated, Dict, List

from pydantic import Field

from .calendar import HolidayCalendar, default_calendar
from .regions import normalize_region
from .versioned import split_date_key

logger = logging.getLogger(__name__)


def _check_date_internal(
    date_str: str, region: str = "", calendar: HolidayCalendar | None = None
) -> Dict[str, str | bool | None]:
    """Internal function for testing with dependency injection support."""
    calendar = calendar or default_calendar
    try:
        d = date.fromisoformat(date_str)
        code = normalize_region(region, calendar.strict_regions)
        holiday = calendar.is_holiday(d.year, d.month, d.day, code)
        return {
            "date": d.isoformat(),
            "region": code,
            "holiday": holiday,
            "is_holiday": holiday is not None,
            "is_business_day": calendar.is_business_day(d.year, d.month, d.day, code),
            "is_short_business_day": calendar.is_short_business_day(d.year, d.month, d.day),
        }
    except ValueError as e:
        logger.error("Failed to check date %s: %s", date_str, e)
        return {"error": f"Invalid request: {e}"}
    except Exception as e:
        logger.error("Unexpected error checking date %s: %s", date_str, e)
        return {"error": f"Unexpected error: {e}"}


def _get_holidays_internal(
    year: int, region: str = "", calendar: HolidayCalendar | None = None
) -> Dict[str, int | str | List[Dict[str, str]]]:
    """Internal function for testing with dependency injection support."""
    calendar = calendar or default_calendar
    try:
        code = normalize_region(region, calendar.strict_regions)
        result = []
        for key, name in sorted(calendar.holidays(year, code).items()):
            month, day = split_date_key(key)
            result.append({"date": date(year, month, day).isoformat(), "name": name})
        return {"year": year, "region": code, "holidays": result}
    except ValueError as e:
        logger.error("Failed to list holidays for %s: %s", year, e)
        return {"error": f"Invalid request: {e}"}
    except Exception as e:
        logger.error("Unexpected error listing holidays for %s: %s", year, e)
        return {"error": f"Unexpected error: {e}"}


def check_date(
    date: Annotated[
        str,
        Field(
            description="Date to check in ISO 8601 format YYYY-MM-DD, e.g. 2015-01-01. Dates before 1991 are not supported."
        ),
    ],
    region: Annotated[
        str,
        Field(
            description='Optional ISO 3166-2:RU region code with or without the "RU-" prefix, e.g. TA, RU-BA, SAR. Leave empty for federal holidays only.',
            default="",
        ),
    ] = "",
) -> Dict[str, str | bool | None]:
    """Check a date in the Russian Federation production calendar: returns the holiday name (federal and, if a region is given, regional), whether it is a business day (taking moved holidays and working weekends into account) and whether it is a shortened pre-holiday business day."""
    return _check_date_internal(date, region)


def get_holidays(
    year: Annotated[
        int,
        Field(description="Calendar year, 1991 or later.", ge=1991),
    ],
    region: Annotated[
        str,
        Field(
            description='Optional ISO 3166-2:RU region code with or without the "RU-" prefix, e.g. AD, RU-TA. Leave empty for federal holidays only.',
            default="",
        ),
    ] = "",
) -> Dict[str, int | str | List[Dict[str, str]]]:
    """List all non-working holidays of a year in the Russian Federation, including days off moved from weekends and, if a region is given, regional holidays such as Uraza Bayram or republic days. Returns dates in ISO 8601 format sorted chronologically."""
    return _get_holidays_internal(year, region)


def get_today_status(
    region: Annotated[
        str,
        Field(
            description='Optional ISO 3166-2:RU region code with or without the "RU-" prefix. Leave empty for federal holidays only.',
            default="",
        ),
    ] = "",
) -> Dict[str, str | bool | None]:
    """Check whether today is a holiday, a business day or a shortened business day in the Russian Federation."""
    return _check_date_internal(date.today().isoformat(), region)


__all__ = [
    "check_date",
    "get_holidays",
    "get_today_status",
    "_check_date_internal",
    "_get_holidays_internal",
]
