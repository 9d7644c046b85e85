"""
Russian Federation holidays and business days.
"""

from fastmcp import FastMCP

from .calendar import (
    HolidayCalendar,
    holidays,
    is_business_day,
    is_holiday,
    is_ru_holiday,
    is_short_business_day,
)
from .exceptions import (
    DomainError,
    HolidayCalendarError,
    InvalidRegionError,
    ParameterError,
    TableInvariantViolation,
)
from .checker import HolidayChecker
from .tools import check_date, get_holidays, get_today_status

# Initialize FastMCP instance
mcp = FastMCP(
    name="Russian Holidays",
    instructions="Answers whether a date is a holiday, a business day or a shortened business day in the Russian Federation, including regional holidays and days off moved from weekends.",
)

# Register tools
mcp.tool(check_date)
mcp.tool(get_holidays)
mcp.tool(get_today_status)

__all__ = [
    "mcp",
    "HolidayCalendar",
    "HolidayChecker",
    "holidays",
    "is_holiday",
    "is_ru_holiday",
    "is_business_day",
    "is_short_business_day",
    "HolidayCalendarError",
    "ParameterError",
    "DomainError",
    "InvalidRegionError",
    "TableInvariantViolation",
]
