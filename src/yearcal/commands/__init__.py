"""Subcommand modules for yearcal.

Provides register_commands() which uses deferred imports to keep
``yearcal --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from yearcal.commands.day import day_of_year
    from yearcal.commands.leap import leap
    from yearcal.commands.month import month
    from yearcal.commands.year import stats, year

    cli.add_command(leap)
    cli.add_command(month)
    cli.add_command(year)
    cli.add_command(stats)
    cli.add_command(day_of_year)
