"""Calendar values outside the datetime range.

EJSON years run 0-9999 on the proleptic Gregorian calendar, but
datetime.date starts at year 1. Dates and timestamps in year 0 are held by
the small value types below; every other date uses datetime directly.

Year 0 is a leap year (divisible by 400), so 0-02-29 exists.

Python 3.13+. Zero external dependencies.
"""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, UTC, date, datetime, time

__all__ = ["ProlepticDate", "ProlepticTimestamp", "make_date", "make_timestamp"]

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return _MONTH_DAYS[month - 1]


@dataclass(frozen=True, slots=True)
class ProlepticDate:
    """Proleptic Gregorian date, including year 0.

    Raises ValueError with datetime's wording when the date does not exist.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 0 <= self.year <= MAXYEAR:
            msg = f"year {self.year} is out of range"
            raise ValueError(msg)
        if not 1 <= self.month <= 12:
            msg = "month must be in 1..12"
            raise ValueError(msg)
        if not 1 <= self.day <= _days_in_month(self.year, self.month):
            msg = "day is out of range for month"
            raise ValueError(msg)

    def isoformat(self) -> str:
        """YYYY-MM-DD"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True)
class ProlepticTimestamp:
    """UTC timestamp whose date datetime cannot hold."""

    day: ProlepticDate
    clock: time

    def isoformat(self) -> str:
        """YYYY-MM-DDTHH:MM:SSZ"""
        return f"{self.day.isoformat()}T{self.clock.isoformat()}Z"


def make_date(year: int, month: int, day: int) -> date | ProlepticDate:
    """Build an exact date, as datetime.date where the year allows it.

    Raises:
        ValueError: If the date does not exist
    """
    if year == 0:
        return ProlepticDate(year, month, day)
    return date(year, month, day)


def make_timestamp(day: date | ProlepticDate, clock: time) -> datetime | ProlepticTimestamp:
    """Combine a parsed date and time into a UTC timestamp."""
    if isinstance(day, ProlepticDate):
        return ProlepticTimestamp(day, clock)
    return datetime.combine(day, clock, tzinfo=UTC)
