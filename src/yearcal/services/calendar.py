"""CalendarService — leap years, month facts, year statistics, day ordinals.

Wraps the pure functions in :mod:`yearcal.domain` in the ServiceResult
contract. Month and day operations pass through
:func:`~yearcal.domain.is_valid_date_input` first; ``leap_year`` accepts
any year since the leap rule has no range.
"""

from __future__ import annotations

from yearcal.domain import (
    InvalidArgument,
    analyze_month,
    analyze_year,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    is_valid_date_input,
)
from yearcal.services.base import BaseService
from yearcal.services.result import ServiceResult
from yearcal.services.telemetry import trace_span, traced

INVALID_ARGUMENT = "INVALID_ARGUMENT"


class CalendarService(BaseService):
    """Computes calendar facts for the configured year window."""

    def _reject_date(self, op: str, month: int, year: int) -> ServiceResult | None:
        """Return a failure result if (month, year) fails the input gate."""
        if is_valid_date_input(month, year, min_year=self.min_year, max_year=self.max_year):
            return None
        if not 1 <= month <= 12:
            message = f"Month must be in [1, 12], got {month}"
        else:
            message = f"Year must be in [{self.min_year}, {self.max_year}], got {year}"
        return self._failure(
            op,
            INVALID_ARGUMENT,
            message,
            month=month,
            year=year,
            min_year=self.min_year,
            max_year=self.max_year,
        )

    @traced
    def leap_year(self, year: int) -> ServiceResult:
        """Report leap-year status and the year's length."""
        return ServiceResult(
            ok=True,
            op="leap_year",
            data={
                "year": year,
                "is_leap": is_leap_year(year),
                "total_days": days_in_year(year),
            },
        )

    @traced
    def month(self, month: int, year: int) -> ServiceResult:
        """Day count, starting weekday, and weekend count for one month."""
        op = "month"
        rejected = self._reject_date(op, month, year)
        if rejected is not None:
            return rejected

        with trace_span("analyze_month"):
            info = analyze_month(month, year)
        data = info.to_dict()
        data["is_leap"] = is_leap_year(year)
        data["days_before"] = day_of_year(0, month, year)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def year_statistics(self, year: int) -> ServiceResult:
        """Weekend/weekday totals and the month-length distribution."""
        return self._analyze("year_statistics", year)

    @traced
    def year_calendar(self, year: int) -> ServiceResult:
        """Same payload as ``year_statistics``, rendered with all twelve grids."""
        return self._analyze("year_calendar", year)

    def _analyze(self, op: str, year: int) -> ServiceResult:
        try:
            with trace_span("analyze_year") as span:
                stats = analyze_year(year, min_year=self.min_year, max_year=self.max_year)
                if span is not None:
                    span.annotate("months", len(stats.months))
        except InvalidArgument as exc:
            return self._failure(
                op,
                INVALID_ARGUMENT,
                str(exc),
                year=year,
                min_year=self.min_year,
                max_year=self.max_year,
            )
        return ServiceResult(ok=True, op=op, data=stats.to_dict())

    @traced
    def day_of_year(self, day: int, month: int, year: int) -> ServiceResult:
        """Ordinal of a date within its year.

        A *day* outside the month still produces an ordinal, with a warning.
        """
        op = "day_of_year"
        rejected = self._reject_date(op, month, year)
        if rejected is not None:
            return rejected

        warnings: list[str] = []
        month_length = days_in_month(month, year)
        if not 1 <= day <= month_length:
            warnings.append(f"Day {day} is outside month {month} of {year} (1-{month_length})")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "day": day,
                "month": month,
                "year": year,
                "day_of_year": day_of_year(day, month, year),
                "days_in_year": days_in_year(year),
            },
            warnings=warnings,
        )
