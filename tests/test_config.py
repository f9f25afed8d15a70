"""Tests for environment and dotenv configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from near_units.call import check_call, validate_call
from near_units.config import Settings, get_settings
from near_units.models import QuantityKind
from near_units.parser import parse_gas, safe_parse
from near_units.plausibility import check_plausible


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.gas_warn_threshold == 300
        assert settings.near_warn_threshold == 10**20
        assert settings.plausibility_warnings is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NEAR_UNITS_GAS_WARN_THRESHOLD", "5000")
        monkeypatch.setenv("NEAR_UNITS_PLAUSIBILITY_WARNINGS", "false")
        settings = Settings.from_env()
        assert settings.gas_warn_threshold == 5000
        assert settings.plausibility_warnings is False

    def test_reads_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("NEAR_UNITS_NEAR_WARN_THRESHOLD=42\n", encoding="utf-8")
        assert Settings.from_env(env_file).near_warn_threshold == 42

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("NEAR_UNITS_GAS_WARN_THRESHOLD=1\n", encoding="utf-8")
        monkeypatch.setenv("NEAR_UNITS_GAS_WARN_THRESHOLD", "2")
        assert Settings.from_env(env_file).gas_warn_threshold == 2

    def test_blank_values_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("NEAR_UNITS_GAS_WARN_THRESHOLD", "  ")
        assert Settings.from_env().gas_warn_threshold == 300

    def test_negative_threshold_is_rejected(self, monkeypatch):
        monkeypatch.setenv("NEAR_UNITS_GAS_WARN_THRESHOLD", "-1")
        with pytest.raises(ValidationError):
            Settings.from_env()

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("NEAR_UNITS_GAS_WARN_THRESHOLD", "9999")
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings().gas_warn_threshold == 9999

    def test_plausibility_uses_process_settings(self, monkeypatch):
        monkeypatch.setenv("NEAR_UNITS_PLAUSIBILITY_WARNINGS", "0")
        assert check_plausible(QuantityKind.GAS, 1) is None


class TestInvalidSettings:
    """A bad NEAR_UNITS_* value must not break parsing, only the override."""

    @pytest.fixture(params=["3e2", "-1", "lots"])
    def bad_threshold(self, request, monkeypatch):
        monkeypatch.setenv("NEAR_UNITS_GAS_WARN_THRESHOLD", request.param)
        return request.param

    def test_get_settings_falls_back_to_defaults(self, bad_threshold, caplog):
        with caplog.at_level(logging.ERROR, logger="near_units.config"):
            settings = get_settings()
        assert settings == Settings()
        assert any(
            r.levelno == logging.ERROR and "NEAR_UNITS_" in r.getMessage()
            for r in caplog.records
        )

    def test_parse_gas_still_returns_raw_input(self, bad_threshold):
        assert parse_gas(30 * 10**12) == 30 * 10**12

    def test_safe_parse_and_calls_still_succeed(self, bad_threshold):
        assert safe_parse(QuantityKind.GAS, 30 * 10**12).ok
        assert check_call(30 * 10**12, 10**24).is_valid
        assert validate_call("30 TGas", "1 NEAR").gas_limit == 30 * 10**12

    def test_default_threshold_still_applies(self, bad_threshold):
        assert check_plausible(QuantityKind.GAS, 10) is not None
