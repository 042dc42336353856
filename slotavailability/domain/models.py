"""
Domain models for bookings and hourly slot availability.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# Slots are one hour wide; event times are compared at this granularity.
SLOT_GRANULARITY_MINUTES = 60


@dataclass(frozen=True)
class Event:
    """
    A booked appointment as delivered by the event source.

    Only ``date`` and the clock text are interpreted; everything else is
    carried through for display.
    """
    id: str
    date: str  # YYYY-MM-DD
    time: Optional[str] = None
    title: str = ""
    customer_name: str = ""
    formatted_time: Optional[str] = None
    status: Optional[str] = None  # pending / confirmed / cancelled / completed

    @property
    def clock_text(self) -> Optional[str]:
        """The time string used for scheduling, falling back to ``formatted_time``."""
        return self.time or self.formatted_time or None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """
        Build an event from a raw record.

        Accepts both ``customerName`` and ``customer_name`` spellings and
        ``appointment_time`` as an alias for ``time``.
        """
        time_text = data.get("time")
        if time_text is None:
            time_text = data.get("appointment_time")

        customer = data.get("customer_name")
        if customer is None:
            customer = data.get("customerName", "")

        return cls(
            id=str(data.get("id", "")),
            date=str(data.get("date", "")),
            time=time_text,
            title=data.get("title") or "",
            customer_name=customer or "",
            formatted_time=data.get("formatted_time"),
            status=data.get("status"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "time": self.time,
            "title": self.title,
            "customer_name": self.customer_name,
            "formatted_time": self.formatted_time,
            "status": self.status,
        }


@dataclass(frozen=True)
class TimeSlot:
    """One bookable hour of the working day."""
    hour24: int
    display: str  # e.g. "9:00 AM"


class SlotState(str, Enum):
    AVAILABLE = "available"
    TAKEN = "taken"
    BLOCKED = "blocked"
    PAST = "past"


@dataclass(frozen=True)
class SlotStatus:
    """
    Classification of a single slot.

    ``bound_event`` is set only for taken slots, ``gap_event`` only for
    blocked ones.
    """
    time: str
    hour24: int
    status: SlotState
    reason: Optional[str] = None
    is_bookable: bool = False
    bound_event: Optional[Event] = None
    gap_event: Optional[Event] = None


@dataclass(frozen=True)
class SchedulingConfig:
    """
    Scheduling rules for one computation.

    Invariant: the working day is the half-open hour range
    ``[work_start_hour, work_end_hour)``.
    """
    work_start_hour: int = 8
    work_end_hour: int = 17
    required_gap_hours: int = 1
    advance_booking_days: int = 0
    unparsed_time_as_midnight: bool = True

    @property
    def slot_count(self) -> int:
        return max(0, self.work_end_hour - self.work_start_hour)
