"""Calendar enums shared across the domain layer."""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def is_weekend(self) -> bool:
        return self in WEEKEND


WEEKEND: frozenset[Weekday] = frozenset({Weekday.SUNDAY, Weekday.SATURDAY})
