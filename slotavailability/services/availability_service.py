"""
Application services for day-level slot availability.

The service coordinates fetching bookings via an event source adapter and
delegates the actual classification to the domain-level
``SlotAvailabilityEngine``. The clock is injected so "now" can be pinned in
tests and the engine itself never reads the system time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as Date, datetime
from typing import Callable, Dict, List, Optional, Protocol, Tuple

import pendulum
from pendulum import DateTime

from ..domain.availability import DateInput, SlotAvailabilityEngine, coerce_date
from ..domain.event_index import EventDayIndex
from ..domain.models import Event, SchedulingConfig, SlotStatus

CacheKey = Tuple[str, Tuple[Event, ...], str, SchedulingConfig]


class EventSourceProtocol(Protocol):
    """Protocol describing the event source behaviour needed by the service."""

    async def get_events(self, date: Optional[str] = None) -> List[Event]:
        """Return events, optionally restricted to one ``YYYY-MM-DD`` date."""


@dataclass(frozen=True)
class DayAvailability:
    """Slots for one date together with data-quality warnings."""
    date: Optional[Date]
    slots: List[SlotStatus] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def bookable_slots(self) -> List[SlotStatus]:
        return [slot for slot in self.slots if slot.is_bookable]


class AvailabilityService:
    """
    Orchestrates event retrieval and slot classification.

    Dependency inversion toward a protocol makes it easy to plug in the JSON
    adapter or a stub in tests.
    """

    def __init__(
        self,
        event_source: EventSourceProtocol,
        config: Optional[SchedulingConfig] = None,
        *,
        timezone: str = "Asia/Manila",
        engine: Optional[SlotAvailabilityEngine] = None,
        clock: Optional[Callable[[], datetime]] = None,
        cache_results: bool = False,
    ) -> None:
        self._event_source = event_source
        self._config = config or SchedulingConfig()
        self._timezone = timezone
        self._engine = engine or SlotAvailabilityEngine()
        self._clock = clock or (lambda: pendulum.now(timezone))
        self._cache_results = cache_results
        self._cache: Dict[CacheKey, List[SlotStatus]] = {}

    @property
    def config(self) -> SchedulingConfig:
        return self._config

    def current_time(self, now: Optional[datetime] = None) -> DateTime:
        """
        Resolve "now" in the venue timezone, truncated to the minute.
        """
        moment = pendulum.instance(now or self._clock(), tz=self._timezone)
        return moment.in_timezone(self._timezone).set(second=0, microsecond=0)

    async def events_for_day(self, date: DateInput) -> List[Event]:
        """Fetch events and return those on ``date`` in source order."""
        selected = coerce_date(date)
        if selected is None:
            return []

        day_key = selected.isoformat()
        events = await self._event_source.get_events(day_key)
        return EventDayIndex(events).lookup(day_key)

    async def day_availability(
        self,
        date: DateInput,
        now: Optional[datetime] = None,
    ) -> DayAvailability:
        """
        Fetch the day's events and classify its slots.
        """
        selected = coerce_date(date)
        if selected is None:
            return DayAvailability(date=None)

        events = await self.events_for_day(selected)
        moment = self.current_time(now)

        warnings = [
            f"Event {event.id} has unreadable time {event.clock_text!r}"
            for event in self._engine.unparseable_events(events)
        ]

        return DayAvailability(
            date=selected,
            slots=self.calculate_slots(events, selected, moment),
            warnings=warnings,
        )

    def calculate_slots(
        self,
        events: List[Event],
        date: Date,
        now: DateTime,
    ) -> List[SlotStatus]:
        """Classify slots, reusing an earlier result for identical inputs."""
        if not self._cache_results:
            return self._engine.compute(events, date, now, self._config)

        key = self._cache_key(events, date, now)
        if key not in self._cache:
            self._cache[key] = self._engine.compute(events, date, now, self._config)
        return list(self._cache[key])

    def clear_cache(self) -> None:
        self._cache.clear()

    def _cache_key(self, events: List[Event], date: Date, now: DateTime) -> CacheKey:
        # Input order matters for the taken rule, so the key keeps it
        return (
            date.isoformat(),
            tuple(events),
            now.format("YYYY-MM-DD HH:mm"),
            self._config,
        )
