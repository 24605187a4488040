"""Domain layer — Gregorian date arithmetic and year aggregates.

This layer depends only on the standard library.
It must never import from services, output, commands, or config.
"""

from yearcal.domain.analysis import (
    MAX_YEAR,
    MIN_YEAR,
    MonthInfo,
    YearStatistics,
    analyze_month,
    analyze_year,
    day_of_year,
    is_valid_date_input,
)
from yearcal.domain.datemath import (
    InvalidArgument,
    days_in_month,
    days_in_year,
    first_weekday_of_month,
    is_leap_year,
    weekday,
)
from yearcal.domain.types import Weekday

__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "InvalidArgument",
    "MonthInfo",
    "Weekday",
    "YearStatistics",
    "analyze_month",
    "analyze_year",
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "first_weekday_of_month",
    "is_leap_year",
    "is_valid_date_input",
    "weekday",
]
