"""Tests for configuration loading and validation."""

import pytest

from nailbook.config import AppConfig, SalonConfig, ScheduleConfig, _validate_config


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_invalid_low_seats_threshold(self):
        config = AppConfig(schedule=ScheduleConfig(low_seats_threshold=0, booking_window_days=0))
        with pytest.raises(ValueError, match="LOW_SEATS_THRESHOLD"):
            _validate_config(config)

    def test_invalid_booking_window(self):
        config = AppConfig(schedule=ScheduleConfig(low_seats_threshold=2, booking_window_days=-1))
        with pytest.raises(ValueError, match="BOOKING_WINDOW_DAYS"):
            _validate_config(config)

    def test_blank_currency(self):
        config = AppConfig(salon=SalonConfig(name="Test", currency="  "))
        with pytest.raises(ValueError, match="SALON_CURRENCY"):
            _validate_config(config)

    def test_safe_int_parsing(self):
        from nailbook.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_int_bad_value(self, monkeypatch):
        from nailbook.config import _safe_int

        monkeypatch.setenv("LOW_SEATS_THRESHOLD_TEST", "two")
        with pytest.raises(ValueError, match="LOW_SEATS_THRESHOLD_TEST"):
            _safe_int("LOW_SEATS_THRESHOLD_TEST", "2")


class TestSettingsSingleton:
    def test_settings_loaded(self):
        from nailbook.config import settings

        assert settings.salon.name
        assert settings.schedule.low_seats_threshold >= 1
