"""yearcal — Gregorian year calendar facts and statistics."""

__version__ = "0.1.0"
