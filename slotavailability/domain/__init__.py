"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability import SlotAvailabilityEngine, bookable_hours
from .event_index import EventDayIndex
from .models import (
    SLOT_GRANULARITY_MINUTES,
    Event,
    SchedulingConfig,
    SlotState,
    SlotStatus,
    TimeSlot,
)
from .slot_generator import WorkingDaySlotGenerator
from .time_parser import ClockTimeParser

__all__ = [
    "SLOT_GRANULARITY_MINUTES",
    "ClockTimeParser",
    "Event",
    "EventDayIndex",
    "SchedulingConfig",
    "SlotAvailabilityEngine",
    "SlotState",
    "SlotStatus",
    "TimeSlot",
    "WorkingDaySlotGenerator",
    "bookable_hours",
]
