"""
Pytest fixtures for holiday calendar tests.
"""

from pathlib import Path

import pytest

from ru_holidays.calendar import HolidayCalendar
from ru_holidays.resolver import RuleResolver
from ru_holidays.store import SpecialOverrides

EXTRA_OVERRIDES = """\
moved_holidays:
  2014: ["0310"]
  2018: ["0309", "0430", "0502", "0611", "1105", "1231"]
business_days_on_weekends:
  2018: ["0428", "0609", "1229"]
short_business_days:
  2018: ["0222", "0307", "0428", "0509", "0611", "1103"]
"""


@pytest.fixture
def resolver() -> RuleResolver:
    """Resolver with its own, empty cache."""
    return RuleResolver()


@pytest.fixture
def calendar(resolver: RuleResolver) -> HolidayCalendar:
    return HolidayCalendar(resolver)


@pytest.fixture
def strict_calendar() -> HolidayCalendar:
    return HolidayCalendar(RuleResolver(), strict_regions=True)


@pytest.fixture
def no_overrides() -> SpecialOverrides:
    return SpecialOverrides()


@pytest.fixture
def extra_overrides_file(tmp_path: Path) -> Path:
    """User overrides file adding 2018."""
    path = tmp_path / "overrides.yaml"
    path.write_text(EXTRA_OVERRIDES, encoding="utf-8")
    return path
