"""Month and year aggregates built on :mod:`yearcal.domain.datemath`.

``MonthInfo`` and ``YearStatistics`` are frozen values computed on demand.
They carry no identity beyond ``(year, month)`` / ``year``.

INVARIANT: ``weekend_days + weekday_days == total_days`` for every year.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from yearcal.domain.datemath import (
    InvalidArgument,
    days_in_month,
    first_weekday_of_month,
    is_leap_year,
)
from yearcal.domain.types import Weekday

MIN_YEAR = 1900
MAX_YEAR = 2100


@dataclass(frozen=True)
class MonthInfo:
    """Derived facts for one month."""

    year: int
    month: int
    day_count: int
    start_weekday: int  # 0=Sunday
    weekend_days: int
    week_rows: int  # rows in a Sunday-first grid

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class YearStatistics:
    """Aggregate over all twelve months of a year."""

    year: int
    is_leap: bool
    total_days: int
    weekend_days: int
    weekday_days: int
    month_lengths: tuple[int, ...]  # month order, January first
    min_month_length: int
    max_month_length: int
    average_month_length: float
    weekend_percentage: float
    months: tuple[MonthInfo, ...]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["month_lengths"] = list(self.month_lengths)
        data["months"] = [m.to_dict() for m in self.months]
        return data


def is_valid_date_input(
    month: int,
    year: int,
    *,
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
) -> bool:
    """Return True if *month* is in [1, 12] and *year* in [min_year, max_year].

    This is the acceptance gate for interfaces. The arithmetic functions
    themselves accept any year.
    """
    return 1 <= month <= 12 and min_year <= year <= max_year


def analyze_month(month: int, year: int) -> MonthInfo:
    """Compute day count, starting weekday, and weekend count for a month.

    Raises:
        InvalidArgument: If *month* is outside [1, 12].
    """
    day_count = days_in_month(month, year)
    start = int(first_weekday_of_month(month, year))
    weekend_days = 0
    for day in range(1, day_count + 1):
        if Weekday((start + day - 1) % 7).is_weekend:
            weekend_days += 1
    return MonthInfo(
        year=year,
        month=month,
        day_count=day_count,
        start_weekday=start,
        weekend_days=weekend_days,
        week_rows=(day_count + start + 6) // 7,
    )


def analyze_year(
    year: int,
    *,
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
) -> YearStatistics:
    """Compute weekend/weekday counts and the month-length distribution.

    Raises:
        InvalidArgument: If *year* is outside [min_year, max_year]. Nothing
            is computed in that case.
    """
    if not min_year <= year <= max_year:
        msg = f"Year must be in [{min_year}, {max_year}], got {year}"
        raise InvalidArgument(msg)

    months = tuple(analyze_month(month, year) for month in range(1, 13))
    month_lengths = tuple(m.day_count for m in months)
    total_days = sum(month_lengths)
    weekend_days = sum(m.weekend_days for m in months)

    # Sorted copy; month_lengths keeps calendar order.
    ordered = sorted(month_lengths)

    return YearStatistics(
        year=year,
        is_leap=is_leap_year(year),
        total_days=total_days,
        weekend_days=weekend_days,
        weekday_days=total_days - weekend_days,
        month_lengths=month_lengths,
        min_month_length=ordered[0],
        max_month_length=ordered[-1],
        average_month_length=total_days / 12.0,
        weekend_percentage=100.0 * weekend_days / total_days,
        months=months,
    )


def day_of_year(day: int, month: int, year: int) -> int:
    """Return the 1-based ordinal of a date within its year.

    Sums :func:`days_in_month` over the months before *month* and adds
    *day* as given, so ``day_of_year(32, 1, y)`` is 32. Neither argument is
    range-checked: month 13 counts the whole year, month 0 or below counts
    nothing. Interfaces gate input with :func:`is_valid_date_input` first.
    """
    return sum(days_in_month(m, year) for m in range(1, month)) + day
