"""Command: ordinal day within the year."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yearcal.commands._base import YearcalCommand

if TYPE_CHECKING:
    from yearcal.commands._context import AppContext


@click.command(
    "day-of-year",
    cls=YearcalCommand,
    examples="""\
  yearcal day-of-year 31 12 2024
  yearcal -q day-of-year 1 3
  yearcal --json day-of-year 29 2 2000""",
)
@click.argument("day_value", metavar="DAY", type=int)
@click.argument("month_value", metavar="MONTH", type=int)
@click.argument("year_value", metavar="[YEAR]", type=int, required=False)
@click.pass_obj
def day_of_year(app: AppContext, day_value: int, month_value: int, year_value: int | None) -> None:
    """Print the 1-based position of DAY/MONTH within YEAR."""
    app.emit(app.service.day_of_year(day_value, month_value, app.resolve_year(year_value)))
