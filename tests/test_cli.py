"""
Tests for the command line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from slotavailability import __version__
from slotavailability.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("timezone: Asia/Manila\nlog_level: ERROR\n", encoding="utf-8")
    return path


@pytest.fixture
def events_file(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps([
        {"id": "a", "date": "2025-06-02", "time": "10:00 AM", "title": "Baptism",
         "customer_name": "Jose", "status": "confirmed"},
        {"id": "b", "date": "2025-06-02", "time": "2:00 PM", "title": "Blessing",
         "customer_name": "Ana", "status": "cancelled"},
    ]), encoding="utf-8")
    return path


def test_slots_command_renders_statuses(config_file, events_file):
    result = runner.invoke(app, [
        "slots", "2025-06-02",
        "--config", str(config_file),
        "--events", str(events_file),
        "--now", "2025-06-01T09:00:00",
    ])

    assert result.exit_code == 0, result.output
    assert "taken" in result.output
    assert "blocked" in result.output
    assert "available" in result.output
    assert "3 bookable slot(s)" in result.output


def test_slots_command_for_past_date(config_file, events_file):
    result = runner.invoke(app, [
        "slots", "2025-05-30",
        "--config", str(config_file),
        "--events", str(events_file),
        "--now", "2025-06-01T09:00:00",
    ])

    assert result.exit_code == 0, result.output
    assert "No bookable slots" in result.output


def test_slots_command_gap_override(config_file, events_file):
    result = runner.invoke(app, [
        "slots", "2025-06-02",
        "--config", str(config_file),
        "--events", str(events_file),
        "--now", "2025-06-01T09:00:00",
        "--gap", "0",
    ])

    assert result.exit_code == 0, result.output
    assert "7 bookable slot(s)" in result.output


def test_slots_command_rejects_bad_date(config_file, events_file):
    result = runner.invoke(app, [
        "slots", "next tuesday",
        "--config", str(config_file),
        "--events", str(events_file),
    ])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_slots_command_missing_events_file(config_file, tmp_path):
    result = runner.invoke(app, [
        "slots", "2025-06-02",
        "--config", str(config_file),
        "--events", str(tmp_path / "missing.json"),
    ])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_events_command_lists_bookings(config_file, events_file):
    result = runner.invoke(app, [
        "events", "2025-06-02",
        "--config", str(config_file),
        "--events", str(events_file),
    ])

    assert result.exit_code == 0, result.output
    assert "Baptism" in result.output
    assert "cancelled" in result.output


def test_events_command_empty_day(config_file, events_file):
    result = runner.invoke(app, [
        "events", "2025-07-01",
        "--config", str(config_file),
        "--events", str(events_file),
    ])

    assert result.exit_code == 0
    assert "No bookings" in result.output


def test_version_command():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
