"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest

from slotavailability.config import AppConfig, SchedulingSettings
from slotavailability.domain.models import SchedulingConfig


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.timezone == "Asia/Manila"
        assert config.log_level == "WARNING"
        assert config.scheduling_config() == SchedulingConfig()

    def test_load_from_yaml(self, tmp_path):
        path = _write(
            tmp_path,
            "timezone: Europe/Berlin\n"
            "log_level: debug\n"
            "events_file: bookings.json\n"
            "scheduling:\n"
            "  work_start_hour: 9\n"
            "  work_end_hour: 18\n"
            "  required_gap_hours: 2\n"
            "  advance_booking_days: 1\n",
        )

        config = AppConfig.load_from_yaml(path)

        assert config.timezone == "Europe/Berlin"
        assert config.log_level == "DEBUG"
        assert config.events_file == tmp_path / "bookings.json"
        assert config.scheduling_config() == SchedulingConfig(
            work_start_hour=9,
            work_end_hour=18,
            required_gap_hours=2,
            advance_booking_days=1,
        )

    def test_empty_file_uses_defaults(self, tmp_path):
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))

        assert config.scheduling.work_start_hour == 8

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "scheduling: [unclosed"))

    def test_non_mapping_root_raises(self, tmp_path):
        with pytest.raises(ValueError, match="mapping at the root level"):
            AppConfig.load_from_yaml(_write(tmp_path, "- just\n- a list\n"))

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            AppConfig(timezone="Mars/Olympus_Mons")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            AppConfig(log_level="chatty")


class TestSchedulingSettings:
    """Tests for SchedulingSettings validation."""

    def test_reversed_hours_rejected(self):
        with pytest.raises(ValueError, match="must not be earlier"):
            SchedulingSettings(work_start_hour=17, work_end_hour=8)

    def test_empty_working_day_allowed(self):
        settings = SchedulingSettings(work_start_hour=9, work_end_hour=9)

        assert settings.work_end_hour == 9

    def test_hour_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="between 0 and 24"):
            SchedulingSettings(work_end_hour=25)

    def test_negative_gap_rejected(self):
        with pytest.raises(ValueError, match="must not be negative"):
            SchedulingSettings(required_gap_hours=-1)
