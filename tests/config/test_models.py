"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from yearcal.config.models import DisplayConfig, ValidationConfig


class TestDefaults:
    def test_validation_window(self) -> None:
        cfg = ValidationConfig()
        assert cfg.min_year == 1900
        assert cfg.max_year == 2100

    def test_display(self) -> None:
        cfg = DisplayConfig()
        assert cfg.default_year == 2025
        assert cfg.show_month_analysis is True


class TestValidation:
    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed"):
            ValidationConfig(min_year=2200, max_year=2100)

    def test_single_year_window_allowed(self) -> None:
        cfg = ValidationConfig(min_year=2000, max_year=2000)
        assert cfg.min_year == cfg.max_year

    def test_frozen(self) -> None:
        cfg = ValidationConfig()
        with pytest.raises(ValidationError):
            cfg.min_year = 1000  # type: ignore[misc]

    def test_model_validate_sparse(self) -> None:
        cfg = DisplayConfig.model_validate({"default_year": 1999})
        assert cfg.default_year == 1999
        assert cfg.show_month_analysis is True
