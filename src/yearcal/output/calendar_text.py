"""Plain-text calendar pieces: month names and the Sunday-first grid.

Presentation only. Day counts and starting weekdays come from the domain
layer; nothing here does date arithmetic.
"""

from __future__ import annotations

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_HEADER = " Su Mo Tu We Th Fr Sa"
CELL_WIDTH = 3


def month_name(month: int) -> str:
    """Return the English name of *month*, or ``"Invalid Month"``."""
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return "Invalid Month"


def month_grid(day_count: int, start_weekday: int) -> list[str]:
    """Lay out days 1..*day_count* in rows of seven, Sunday first.

    The first row is padded with ``start_weekday`` blank cells. Each cell
    is right-aligned in three columns, matching :data:`WEEKDAY_HEADER`.

    Examples:
        >>> month_grid(3, 5) == [" " * 17 + "1  2", "  3"]
        True
    """
    rows: list[str] = []
    cells = ["   "] * start_weekday
    for day in range(1, day_count + 1):
        cells.append(f"{day:>{CELL_WIDTH}}")
        if len(cells) == 7:
            rows.append("".join(cells))
            cells = []
    if cells:
        rows.append("".join(cells))
    return rows
