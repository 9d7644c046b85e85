"""
Day keys and year-versioned values.

A day key is a fixed-width "MMDD" string. Historical rule data maps the
year since which a value applies to that value.
"""

from __future__ import annotations

import calendar
from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

DaySet = Union[str, list[str]]


def date_key(month: int, day: int) -> str:
    """Encodes month and day as "MMDD"."""
    return f"{month:02d}{day:02d}"


def split_date_key(key: str) -> tuple[int, int]:
    """Decodes "MMDD" into (month, day)."""
    return int(key[:2]), int(key[2:])


def validate_date_key(key: str) -> str:
    """Checks that key is "MMDD" with a day that exists in a leap year."""
    if len(key) != 4 or not key.isdigit():
        raise ValueError(f"Day key must be MMDD, got {key!r}")
    month, day = split_date_key(key)
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in day key {key!r}")
    # 2000 is a leap year, so 0229 is accepted
    if not 1 <= day <= calendar.monthrange(2000, month)[1]:
        raise ValueError(f"Invalid day in day key {key!r}")
    return key


class YearVersionedValue(Generic[T]):
    """Value that changes over the years.

    Entries are keyed by the first year they apply to. Lookup for a year
    picks the entry with the greatest key not after that year.

        >>> name = YearVersionedValue({1948: "a", 1992: "b", 2005: "c"})
        >>> name.resolve(2000)
        'b'
    """

    __slots__ = ("_years", "_values")

    def __init__(self, entries: Mapping[int, Optional[T]]):
        items = sorted(entries.items())
        self._years = [year for year, _ in items]
        self._values = [value for _, value in items]

    @classmethod
    def constant(cls, value: T) -> "YearVersionedValue[T]":
        """A value that applies to every year."""
        return cls({0: value})

    def resolve(self, year: int) -> Optional[T]:
        """Returns the value in effect for year, or None."""
        idx = bisect_right(self._years, year)
        if idx == 0:
            return None
        return self._values[idx - 1]

    def items(self) -> Iterator[tuple[int, Optional[T]]]:
        return zip(self._years, self._values)

    def __len__(self) -> int:
        return len(self._years)

    def __repr__(self) -> str:
        return f"YearVersionedValue({dict(self.items())!r})"


@dataclass(frozen=True, slots=True)
class Fixed:
    """Days listed explicitly."""

    days: tuple[str, ...]

    @classmethod
    def of(cls, days: Union[str, Iterable[str]]) -> "Fixed":
        if isinstance(days, str):
            return cls((validate_date_key(days),))
        return cls(tuple(validate_date_key(d) for d in days))


@dataclass(frozen=True, slots=True)
class Computed:
    """Days computed from the year."""

    func: Callable[[int], Optional[DaySet]]

    def __call__(self, year: int) -> Optional[DaySet]:
        return self.func(year)


DaySetSource = Union[Fixed, Computed]
