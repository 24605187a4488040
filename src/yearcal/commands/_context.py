"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the calendar service, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from yearcal.config.logging import configure_logging
from yearcal.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from yearcal.config.settings import YearcalSettings
    from yearcal.services.calendar import CalendarService
    from yearcal.services.result import ServiceResult

log = structlog.get_logger("yearcal.cli")


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: YearcalSettings) -> None:
        self.settings = settings
        self._service: CalendarService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from yearcal.services.telemetry import enable_telemetry

            enable_telemetry()

        log.debug(
            "settings.loaded",
            config_path=str(settings.config_path) if settings.config_path else None,
            min_year=settings.validation.min_year,
            max_year=settings.validation.max_year,
        )

    @property
    def service(self) -> CalendarService:
        """The calendar service (created lazily on first access)."""
        if self._service is None:
            from yearcal.services.calendar import CalendarService

            self._service = CalendarService(self.settings)
        return self._service

    def resolve_year(self, year: int | None) -> int:
        """Fall back to ``[display] default_year`` when no year was given."""
        return self.settings.display.default_year if year is None else year

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            month_analysis=self.settings.display.show_month_analysis,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
