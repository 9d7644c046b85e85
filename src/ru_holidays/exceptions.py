"""
Errors raised by the holiday calendar.
"""


class HolidayCalendarError(Exception):
    """Base class for calendar errors."""


class ParameterError(HolidayCalendarError, ValueError):
    """Year, month or day is missing or zero."""


class DomainError(HolidayCalendarError, ValueError):
    """Year lies outside the range the calendar is defined for."""


class InvalidRegionError(HolidayCalendarError, ValueError):
    """Region code is malformed or, in strict mode, unknown."""


class TableInvariantViolation(HolidayCalendarError, RuntimeError):
    """Static rule data is inconsistent."""
