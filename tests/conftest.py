"""Shared pytest fixtures and test helpers for yearcal tests."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from yearcal.config.settings import YearcalSettings
from yearcal.services.calendar import CalendarService
from yearcal.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_global_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate env config, root logging handlers, and telemetry per test."""
    for var in (
        "YEARCAL_CONFIG",
        "YEARCAL_VERBOSE",
        "YEARCAL_QUIET",
        "YEARCAL_JSON_OUTPUT",
        "YEARCAL_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yearcal_level = logging.getLogger("yearcal").level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("yearcal").setLevel(yearcal_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no yearcal.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes; tests that write a config request ``tmp_path`` too.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> YearcalSettings:
    """Default settings with config discovery rooted in an empty directory."""
    return YearcalSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: YearcalSettings) -> CalendarService:
    return CalendarService(settings)


# ---------------------------------------------------------------------------
# Reference calendar helpers (stdlib datetime as the independent oracle)
# ---------------------------------------------------------------------------


def reference_weekday(day: int, month: int, year: int) -> int:
    """Weekday from ``datetime`` converted to 0=Sunday."""
    return (datetime.date(year, month, day).weekday() + 1) % 7


def brute_force_weekend_days(year: int) -> int:
    """Count Saturdays and Sundays by walking every date of *year*."""
    day = datetime.date(year, 1, 1)
    count = 0
    while day.year == year:
        if day.weekday() >= 5:
            count += 1
        day += datetime.timedelta(days=1)
    return count
