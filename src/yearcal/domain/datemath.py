"""Gregorian date arithmetic — leap years, month lengths, weekdays.

Pure functions with no range policy: every function here accepts any
integer year (proleptic Gregorian, including zero and negative years).
The [1900, 2100] acceptance window lives in :mod:`yearcal.domain.analysis`.

Weekdays are numbered 0=Sunday through 6=Saturday.
"""

from __future__ import annotations

from yearcal.domain.types import Weekday

FEBRUARY = 2

# Non-leap month lengths, January first.
MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class InvalidArgument(ValueError):
    """Raised when a month or year falls outside the accepted range."""


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        msg = f"Month must be in [1, 12], got {month}"
        raise InvalidArgument(msg)


def is_leap_year(year: int) -> bool:
    """Return True if *year* has 366 days under the Gregorian rule.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in *month* of *year*.

    Raises:
        InvalidArgument: If *month* is outside [1, 12].
    """
    _check_month(month)
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return MONTH_LENGTHS[month - 1]


def weekday(day: int, month: int, year: int) -> Weekday:
    """Return the weekday of a date via Zeller's congruence.

    January and February count as months 13 and 14 of the previous year,
    so the leap day falls at the end of the shifted year. *day* is not
    checked against the month length: ``weekday(d + 1, m, y)`` is always
    one day after ``weekday(d, m, y)``.

    Raises:
        InvalidArgument: If *month* is outside [1, 12].
    """
    _check_month(month)
    if month < 3:
        month += 12
        year -= 1
    century, year_of_century = divmod(year, 100)
    # h: 0=Saturday, 1=Sunday, ... 6=Friday
    h = (
        day
        + (13 * (month + 1)) // 5
        + year_of_century
        + year_of_century // 4
        + century // 4
        + 5 * century
    ) % 7
    return Weekday((h + 6) % 7)


def first_weekday_of_month(month: int, year: int) -> Weekday:
    """Return the weekday of day 1 of *month* in *year* (0=Sunday).

    Raises:
        InvalidArgument: If *month* is outside [1, 12].
    """
    return weekday(1, month, year)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365
