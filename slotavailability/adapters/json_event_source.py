"""
Event source backed by a JSON file of bookings.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from ..domain.exceptions import EventSourceError
from ..domain.models import Event

logger = logging.getLogger(__name__)

SAMPLE_EVENTS_FILE = Path(__file__).parent / "sample_events.json"


class JsonEventSource:
    """
    Loads bookings from a JSON file.

    The file holds either a list of event records or an object with an
    ``events`` list. Records use the same keys the booking service exports
    (``id``, ``date``, ``time``, ``title``, ``customer_name``, ``status``).
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: JSON file to read; defaults to the bundled sample bookings
        """
        self.path = Path(path) if path else SAMPLE_EVENTS_FILE
        self._events: Optional[List[Event]] = None

    def _load_events(self) -> List[Event]:
        if not self.path.exists():
            raise EventSourceError(f"Events file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data: Any = json.load(f)
        except json.JSONDecodeError as exc:
            raise EventSourceError(f"Invalid JSON in {self.path}: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("events", [])

        if not isinstance(data, list):
            raise EventSourceError(
                f"Events file {self.path} must contain a list of events"
            )

        events: List[Event] = []
        for position, record in enumerate(data):
            if not isinstance(record, dict) or not record.get("date"):
                raise EventSourceError(
                    f"Event #{position} in {self.path} has no date"
                )
            events.append(Event.from_dict(record))

        logger.info("Loaded %d events from %s", len(events), self.path)
        return events

    async def get_events(self, date: Optional[str] = None) -> List[Event]:
        """
        Return all events, or only those on ``date`` (``YYYY-MM-DD``).
        """
        if self._events is None:
            self._events = self._load_events()

        if date is None:
            return list(self._events)
        return [event for event in self._events if event.date == date]
