"""
Special overrides: moved holidays, working weekends and shortened days.
Loaded from YAML files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .versioned import validate_date_key

logger = logging.getLogger(__name__)

BUNDLED_OVERRIDES_PATH = Path(__file__).parent / "data" / "overrides.yaml"

MOVED_HOLIDAY_NAME = "Перенос праздничного дня"


class SpecialOverrides(BaseModel):
    """Year-indexed day lists that override the regular rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    moved_holidays: dict[int, tuple[str, ...]] = Field(default_factory=dict)
    business_days_on_weekends: dict[int, tuple[str, ...]] = Field(default_factory=dict)
    short_business_days: dict[int, tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("moved_holidays", "business_days_on_weekends", "short_business_days")
    @classmethod
    def validate_day_keys(cls, v: dict[int, tuple[str, ...]]) -> dict[int, tuple[str, ...]]:
        for days in v.values():
            for day in days:
                validate_date_key(day)
        return v

    def moved(self, year: int) -> tuple[str, ...]:
        return self.moved_holidays.get(year, ())

    def is_business_weekend(self, year: int, key: str) -> bool:
        return key in self.business_days_on_weekends.get(year, ())

    def is_short(self, year: int, key: str) -> bool:
        return key in self.short_business_days.get(year, ())

    def merged(self, other: "SpecialOverrides") -> "SpecialOverrides":
        """Overlays other on top of self. A year in other replaces the year in self."""
        return SpecialOverrides(
            moved_holidays={**self.moved_holidays, **other.moved_holidays},
            business_days_on_weekends={
                **self.business_days_on_weekends,
                **other.business_days_on_weekends,
            },
            short_business_days={**self.short_business_days, **other.short_business_days},
        )


class OverridesStore:
    """Loads overrides from a YAML file."""

    def __init__(self, path: Path | str = BUNDLED_OVERRIDES_PATH):
        self.path = Path(path)

    def load(self) -> SpecialOverrides:
        """Load overrides from YAML."""
        with open(self.path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return SpecialOverrides.model_validate(data)


def load_overrides(extra_path: Optional[Path | str] = None) -> SpecialOverrides:
    """Bundled overrides, optionally extended by a user file."""
    overrides = OverridesStore().load()
    if extra_path:
        logger.info("Loading additional overrides from %s", extra_path)
        overrides = overrides.merged(OverridesStore(extra_path).load())
    return overrides
