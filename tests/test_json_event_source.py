"""
Tests for the JSON file event source.
"""

import asyncio
import json

import pytest

from slotavailability.adapters.json_event_source import JsonEventSource
from slotavailability.domain.exceptions import EventSourceError


def _write_events(tmp_path, payload):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestJsonEventSource:
    """Tests for JsonEventSource."""

    def test_loads_list_of_events(self, tmp_path):
        path = _write_events(tmp_path, [
            {"id": 1, "date": "2025-06-02", "time": "9:00 AM", "customerName": "Ana Cruz"},
            {"id": 2, "date": "2025-06-03", "appointment_time": "14:00"},
        ])

        events = asyncio.run(JsonEventSource(path).get_events())

        assert [event.id for event in events] == ["1", "2"]
        assert events[0].customer_name == "Ana Cruz"
        assert events[1].time == "14:00"

    def test_filters_by_date(self, tmp_path):
        path = _write_events(tmp_path, {"events": [
            {"id": "a", "date": "2025-06-02", "time": "9:00 AM"},
            {"id": "b", "date": "2025-06-03", "time": "9:00 AM"},
        ]})

        events = asyncio.run(JsonEventSource(path).get_events("2025-06-03"))

        assert [event.id for event in events] == ["b"]

    def test_bundled_sample_events(self):
        events = asyncio.run(JsonEventSource().get_events("2025-06-02"))

        assert len(events) == 3

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(EventSourceError, match="not found"):
            asyncio.run(JsonEventSource(tmp_path / "nope.json").get_events())

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(EventSourceError, match="Invalid JSON"):
            asyncio.run(JsonEventSource(path).get_events())

    def test_event_without_date_raises(self, tmp_path):
        path = _write_events(tmp_path, [{"id": "a", "time": "9:00 AM"}])

        with pytest.raises(EventSourceError, match="has no date"):
            asyncio.run(JsonEventSource(path).get_events())

    def test_non_list_payload_raises(self, tmp_path):
        path = _write_events(tmp_path, {"events": "nope"})

        with pytest.raises(EventSourceError, match="must contain a list"):
            asyncio.run(JsonEventSource(path).get_events())
