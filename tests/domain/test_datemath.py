"""Tests for leap years, month lengths, and Zeller weekday arithmetic."""

import calendar
import datetime

import pytest

from tests.conftest import reference_weekday
from yearcal.domain.datemath import (
    MONTH_LENGTHS,
    InvalidArgument,
    days_in_month,
    days_in_year,
    first_weekday_of_month,
    is_leap_year,
    weekday,
)
from yearcal.domain.types import Weekday


class TestIsLeapYear:
    @pytest.mark.parametrize(
        "year,expected",
        [
            (2000, True),
            (1900, False),
            (2024, True),
            (2023, False),
            (2100, False),
            (2400, True),
        ],
    )
    def test_known_years(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    def test_matches_stdlib_for_all_four_digit_years(self) -> None:
        mismatches = [y for y in range(1, 10000) if is_leap_year(y) != calendar.isleap(y)]
        assert mismatches == []

    def test_no_range_restriction(self) -> None:
        """Proleptic years: 0 and -400 are leap, -100 is not."""
        assert is_leap_year(0) is True
        assert is_leap_year(-400) is True
        assert is_leap_year(-100) is False
        assert is_leap_year(-44) is True


class TestDaysInMonth:
    @pytest.mark.parametrize(
        "year,expected",
        [(2000, 29), (1900, 28), (2100, 28), (2024, 29), (2023, 28)],
    )
    def test_february(self, year: int, expected: int) -> None:
        assert days_in_month(2, year) == expected

    def test_matches_stdlib(self) -> None:
        for year in range(1900, 2101):
            for month in range(1, 13):
                assert days_in_month(month, year) == calendar.monthrange(year, month)[1]

    @pytest.mark.parametrize("year", [1900, 1999, 2000, 2023, 2024, 2100])
    def test_months_sum_to_year_length(self, year: int) -> None:
        lengths = [days_in_month(m, year) for m in range(1, 13)]
        assert set(lengths) <= {28, 29, 30, 31}
        assert sum(lengths) == (366 if is_leap_year(year) else 365)
        assert sum(lengths) == days_in_year(year)

    @pytest.mark.parametrize("month", [0, 13, -1, 100])
    def test_invalid_month_raises(self, month: int) -> None:
        with pytest.raises(InvalidArgument, match="Month must be in"):
            days_in_month(month, 2024)

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            days_in_month(13, 2024)

    def test_table_is_immutable(self) -> None:
        assert isinstance(MONTH_LENGTHS, tuple)
        assert len(MONTH_LENGTHS) == 12
        assert days_in_month(2, 2024) == 29
        assert MONTH_LENGTHS[1] == 28


class TestFirstWeekdayOfMonth:
    def test_january_2000_is_saturday(self) -> None:
        assert first_weekday_of_month(1, 2000) == 6
        assert first_weekday_of_month(1, 2000) is Weekday.SATURDAY

    def test_january_1900_is_monday(self) -> None:
        assert first_weekday_of_month(1, 1900) == 1

    def test_march_2024_is_friday(self) -> None:
        assert first_weekday_of_month(3, 2024) == 5

    def test_matches_reference_calendar(self) -> None:
        for year in range(1900, 2101):
            for month in range(1, 13):
                assert first_weekday_of_month(month, year) == reference_weekday(1, month, year), (
                    month,
                    year,
                )

    def test_matches_reference_outside_validation_window(self) -> None:
        for year in range(1, 10000, 37):
            for month in (1, 2, 3, 12):
                assert first_weekday_of_month(month, year) == reference_weekday(1, month, year)

    def test_range(self) -> None:
        results = {first_weekday_of_month(m, y) for y in range(1900, 2101) for m in range(1, 13)}
        assert results == set(range(7))

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month_raises(self, month: int) -> None:
        with pytest.raises(InvalidArgument):
            first_weekday_of_month(month, 2024)

    def test_idempotent(self) -> None:
        assert first_weekday_of_month(7, 1969) == first_weekday_of_month(7, 1969)


class TestWeekday:
    def test_every_day_of_leap_year(self) -> None:
        day = datetime.date(2024, 1, 1)
        while day.year == 2024:
            assert weekday(day.day, day.month, day.year) == reference_weekday(
                day.day, day.month, day.year
            )
            day += datetime.timedelta(days=1)

    @pytest.mark.parametrize("month,year", [(1, 2000), (2, 2024), (2, 1900), (12, 2099)])
    def test_next_day_advances_by_one(self, month: int, year: int) -> None:
        for day in range(1, days_in_month(month, year)):
            assert weekday(day + 1, month, year) == (weekday(day, month, year) + 1) % 7

    def test_day_past_month_end_is_not_clamped(self) -> None:
        """Day 32 of January lands on the weekday of February 1st."""
        assert weekday(32, 1, 2024) == weekday(1, 2, 2024)

    def test_year_boundaries_are_continuous(self) -> None:
        for year in range(-500, 2500, 7):
            assert weekday(1, 1, year + 1) == (weekday(31, 12, year) + 1) % 7

    def test_year_zero(self) -> None:
        """Proleptic 1 Jan of year 1 was a Monday, so year 0 began on Saturday."""
        assert weekday(1, 1, 1) is Weekday.MONDAY
        assert weekday(1, 1, 0) is Weekday.SATURDAY
        assert weekday(31, 12, -1) is Weekday.FRIDAY

    def test_returns_weekday_enum(self) -> None:
        result = weekday(4, 7, 1776)
        assert isinstance(result, Weekday)
        assert result is Weekday.THURSDAY
