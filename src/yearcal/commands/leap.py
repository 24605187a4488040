"""Command: leap-year status for any year."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yearcal.commands._base import YearcalCommand

if TYPE_CHECKING:
    from yearcal.commands._context import AppContext


@click.command(
    cls=YearcalCommand,
    examples="""\
  yearcal leap 2024
  yearcal -q leap 1900
  yearcal --json leap 2400
  yearcal leap -- -44""",
)
@click.argument("year_value", metavar="YEAR", type=int)
@click.pass_obj
def leap(app: AppContext, year_value: int) -> None:
    """Report whether YEAR is a Gregorian leap year (no range limit)."""
    app.emit(app.service.leap_year(year_value))
