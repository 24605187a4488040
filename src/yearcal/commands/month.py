"""Command: single month calendar grid and analysis."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yearcal.commands._base import YearcalCommand

if TYPE_CHECKING:
    from yearcal.commands._context import AppContext


@click.command(
    cls=YearcalCommand,
    examples="""\
  yearcal month 2 2024
  yearcal month 7
  yearcal --json month 12 1999""",
)
@click.argument("month_value", metavar="MONTH", type=int)
@click.argument("year_value", metavar="[YEAR]", type=int, required=False)
@click.pass_obj
def month(app: AppContext, month_value: int, year_value: int | None) -> None:
    """Print the calendar grid for MONTH of YEAR (default: configured year)."""
    app.emit(app.service.month(month_value, app.resolve_year(year_value)))
