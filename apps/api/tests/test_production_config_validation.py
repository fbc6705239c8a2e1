"""
Startup config validation and settings parsing tests.

Verifies that unsafe production config causes startup failure,
and that valid prod / non-prod configs work.
"""

from __future__ import annotations

import pytest

from core.config import Settings, validate_production_config


class TestProductionConfigValidation:
    """validate_production_config raises for bad prod config."""

    def test_production_debug_true_fails(self):
        with pytest.raises(ValueError, match="DEBUG must be False"):
            validate_production_config(
                environment="production",
                debug=True,
                cors_origins="https://calc.example.com",
            )

    def test_production_cors_empty_fails(self):
        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            validate_production_config(
                environment="production",
                debug=False,
                cors_origins="",
            )

    def test_production_cors_none_fails(self):
        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            validate_production_config(
                environment="production",
                debug=False,
                cors_origins=None,
            )

    def test_production_cors_whitespace_only_fails(self):
        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            validate_production_config(
                environment="production",
                debug=False,
                cors_origins="   ",
            )

    def test_production_valid_config_passes(self):
        validate_production_config(
            environment="production",
            debug=False,
            cors_origins="https://calc.example.com,https://www.calc.example.com",
        )


class TestNonProductionNotValidated:
    """Non-production configs are not validated."""

    def test_development_debug_true_passes(self):
        validate_production_config(
            environment="development",
            debug=True,
            cors_origins=None,
        )

    def test_test_env_passes(self):
        validate_production_config(
            environment="test",
            debug=True,
            cors_origins="",
        )


class TestSettings:
    """Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HEALTH_CALCULATOR_PREFIX", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        s = Settings(_env_file=None)

        assert s.HEALTH_CALCULATOR_PREFIX == "/api/healthcalculator"
        assert s.LOG_FORMAT == "json"
        assert s.cors_origin_list() == []

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "9000")
        monkeypatch.setenv("DEBUG", "true")
        s = Settings(_env_file=None)

        assert s.API_PORT == 9000
        assert s.DEBUG is True

    def test_cors_origin_list_strips_entries(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com ,")
        s = Settings(_env_file=None)

        assert s.cors_origin_list() == ["https://a.example.com", "https://b.example.com"]
