"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, yearcal.toml only contains overrides.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, model_validator

from yearcal.domain import MAX_YEAR, MIN_YEAR


class ValidationConfig(BaseModel):
    """[validation] section — the accepted year window for interfaces."""

    model_config = {"frozen": True}

    min_year: int = MIN_YEAR
    max_year: int = MAX_YEAR

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min_year > self.max_year:
            msg = f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})"
            raise ValueError(msg)
        return self


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    default_year: int = 2025
    show_month_analysis: bool = True
