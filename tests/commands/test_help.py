"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from yearcal.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["leap", "month", "year", "stats", "day-of-year", "--json", "--config"]),
    (["leap", "--help"], ["YEAR", "--examples"]),
    (["month", "--help"], ["MONTH", "[YEAR]"]),
    (["year", "--help"], ["[YEAR]", "--no-grid"]),
    (["stats", "--help"], ["[YEAR]"]),
    (["day-of-year", "--help"], ["DAY", "MONTH", "[YEAR]"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize("command", ["leap", "month", "year", "stats", "day-of-year"])
def test_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"yearcal {command}" in result.output
