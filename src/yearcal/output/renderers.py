"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from yearcal.domain import Weekday
from yearcal.output.calendar_text import WEEKDAY_HEADER, month_grid, month_name
from yearcal.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from yearcal.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    month_analysis: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, month_analysis=month_analysis)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# Primary value printed per op in --quiet mode.
_QUIET_KEYS: dict[str, str] = {
    "leap_year": "is_leap",
    "month": "day_count",
    "day_of_year": "day_of_year",
    "year_statistics": "weekend_days",
    "year_calendar": "weekend_days",
}


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cal.ok"), Text(f"  {result.op}", style="cal.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cal.key")
    if isinstance(value, bool):
        v = Text("TRUE" if value else "FALSE", style="cal.leap" if value else "")
    elif isinstance(value, float):
        v = Text(f"{value:.1f}", style="cal.number")
    elif isinstance(value, int):
        v = Text(str(value), style="cal.number")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = Text(" " * indent)
    line.append(f"{span.get('duration_ms', 0.0):>8.3f}ms", style="dim")
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations")
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _print_month(
    console: Console,
    info: dict[str, Any],
    *,
    month_analysis: bool,
) -> None:
    """Print one month grid, optionally followed by its analysis block."""
    console.print()
    title = f"{month_name(info['month'])} {info['year']}"
    console.print(Text(title.center(len(WEEKDAY_HEADER)), style="cal.title"))
    console.print(Text(WEEKDAY_HEADER, style="cal.key"))
    for row in month_grid(info["day_count"], info["start_weekday"]):
        console.print(Text(row))

    if month_analysis:
        console.print()
        console.print(Text("  Month Analysis:", style="cal.title"))
        _field(console, "total_days", info["day_count"])
        start = Weekday(info["start_weekday"])
        _field(console, "starting_day", f"{int(start)} ({start.name.title()})")
        _field(console, "weekend_days", info["weekend_days"])
        _field(console, "week_rows", info["week_rows"])


def _month_table(months: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Month", style="cal.title")
    table.add_column("Days", justify="right")
    table.add_column("Starts")
    table.add_column("Weekends", style="cal.weekend", justify="right")
    for info in months:
        table.add_row(
            month_name(info["month"]),
            str(info["day_count"]),
            Weekday(info["start_weekday"]).name.title(),
            str(info["weekend_days"]),
        )
    return table


def _print_statistics(console: Console, d: dict[str, Any]) -> None:
    console.print(Text("  Annual Calendar Statistics", style="cal.title"))
    _field(console, "year", d["year"])
    _field(console, "leap_year", d["is_leap"])
    _field(console, "total_days", d["total_days"])
    _field(console, "weekend_days", d["weekend_days"])
    _field(console, "weekday_days", d["weekday_days"])
    _field(console, "weekend_percentage", f"{d['weekend_percentage']:.1f}%")
    console.print()
    console.print(Text("  Month Length Distribution", style="cal.title"))
    _field(console, "shortest_month", f"{d['min_month_length']} days")
    _field(console, "longest_month", f"{d['max_month_length']} days")
    _field(console, "average_month_length", f"{d['average_month_length']:.1f} days")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cal.error"),
        Text(f"  {result.op}", style="cal.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_leap_year(
    result: ServiceResult, console: Console, *, verbose: bool, month_analysis: bool
) -> None:
    _status_line(console, result)
    for key in ("year", "is_leap", "total_days"):
        _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_month(
    result: ServiceResult, console: Console, *, verbose: bool, month_analysis: bool
) -> None:
    _status_line(console, result)
    _print_month(console, result.data, month_analysis=month_analysis)
    if verbose:
        _field(console, "days_before", result.data["days_before"])
        _render_meta(console, result)


def _render_year_statistics(
    result: ServiceResult, console: Console, *, verbose: bool, month_analysis: bool
) -> None:
    _status_line(console, result)
    _print_statistics(console, result.data)
    console.print()
    console.print(_month_table(result.data["months"]))
    if verbose:
        _render_meta(console, result)


def _render_year_calendar(
    result: ServiceResult, console: Console, *, verbose: bool, month_analysis: bool
) -> None:
    _status_line(console, result)
    for info in result.data["months"]:
        _print_month(console, info, month_analysis=month_analysis)
    console.print()
    _print_statistics(console, result.data)
    if verbose:
        _render_meta(console, result)


def _render_day_of_year(
    result: ServiceResult, console: Console, *, verbose: bool, month_analysis: bool
) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "date", f"{month_name(d['month'])} {d['day']}, {d['year']}")
    _field(console, "day_of_year", d["day_of_year"])
    _field(console, "days_in_year", d["days_in_year"])
    if verbose:
        _render_meta(console, result)


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool, month_analysis: bool
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "leap_year": _render_leap_year,
    "month": _render_month,
    "year_statistics": _render_year_statistics,
    "year_calendar": _render_year_calendar,
    "day_of_year": _render_day_of_year,
}
