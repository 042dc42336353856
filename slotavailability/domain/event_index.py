"""
Grouping of events by calendar date.
"""

from typing import Dict, Iterable, List

from .models import Event


class EventDayIndex:
    """
    Multimap from ``YYYY-MM-DD`` to the events on that date.

    Events keep their input order within a date.
    """

    def __init__(self, events: Iterable[Event] = ()):
        self._by_date = self.index_by_date(events)

    @staticmethod
    def index_by_date(events: Iterable[Event]) -> Dict[str, List[Event]]:
        by_date: Dict[str, List[Event]] = {}
        for event in events:
            by_date.setdefault(event.date, []).append(event)
        return by_date

    def lookup(self, date: str) -> List[Event]:
        """Events on ``date``; empty list when there are none."""
        return list(self._by_date.get(date, []))

    def dates(self) -> List[str]:
        return sorted(self._by_date)

    def __contains__(self, date: object) -> bool:
        return date in self._by_date

    def __len__(self) -> int:
        return len(self._by_date)
