"""Commands: whole-year calendar and annual statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yearcal.commands._base import YearcalCommand

if TYPE_CHECKING:
    from yearcal.commands._context import AppContext


@click.command(
    cls=YearcalCommand,
    examples="""\
  yearcal year 2025
  yearcal year 2024 --no-grid
  yearcal --json year 2000""",
)
@click.argument("year_value", metavar="[YEAR]", type=int, required=False)
@click.option("--no-grid", is_flag=True, help="Skip the monthly grids; statistics only.")
@click.pass_obj
def year(app: AppContext, year_value: int | None, no_grid: bool) -> None:
    """Print all twelve month grids followed by the annual statistics."""
    resolved = app.resolve_year(year_value)
    if no_grid:
        app.emit(app.service.year_statistics(resolved))
    else:
        app.emit(app.service.year_calendar(resolved))


@click.command(
    cls=YearcalCommand,
    examples="""\
  yearcal stats 2024
  yearcal -q stats 2023
  yearcal --json stats""",
)
@click.argument("year_value", metavar="[YEAR]", type=int, required=False)
@click.pass_obj
def stats(app: AppContext, year_value: int | None) -> None:
    """Weekend/weekday counts and month-length distribution for YEAR."""
    app.emit(app.service.year_statistics(app.resolve_year(year_value)))
