"""
Core slot classification for a single booking day.

This is the heart of the application - pure domain logic without any
external dependencies (no API calls, no database, no clock reads). The
caller supplies the day's events, the date and "now"; the same inputs
always produce the same statuses.
"""

import logging
from datetime import date as Date, datetime
from typing import List, Optional, Sequence, Tuple, Union

import pendulum

from .event_index import EventDayIndex
from .exceptions import InvalidDateError
from .models import Event, SchedulingConfig, SlotState, SlotStatus, TimeSlot
from .slot_generator import WorkingDaySlotGenerator
from .time_parser import UNSPECIFIED_HOUR, ClockTimeParser

logger = logging.getLogger(__name__)

DateInput = Union[str, Date, datetime, None]

BOOKED_REASON = "Booked"
PAST_DATE_REASON = "View only - cannot book past dates"
PASSED_HOUR_REASON = "This time slot has passed"


def coerce_date(value: DateInput) -> Optional[Date]:
    """
    Normalize a calendar date given as ``YYYY-MM-DD``, date or datetime.

    Raises:
        InvalidDateError: If a string is not a valid ``YYYY-MM-DD`` date
    """
    if value is None or value == "":
        return None

    if isinstance(value, str):
        try:
            parsed = pendulum.from_format(value.strip(), "YYYY-MM-DD")
        except ValueError as exc:
            raise InvalidDateError(f"Invalid date '{value}', expected YYYY-MM-DD") from exc
        return Date(parsed.year, parsed.month, parsed.day)

    # datetime is a date subclass, so this covers both (and pendulum's types)
    return Date(value.year, value.month, value.day)


class SlotAvailabilityEngine:
    """
    Classifies every working-hour slot of a day.

    Rules, applied per slot in this order (first match wins):
    1. Taken   - an event (in given order) starts in this hour
    2. Blocked - an event starts within ``required_gap_hours`` of this hour
    3. Past    - the date is before today, inside the advance-booking window,
                 or today with the hour already started
    4. Available
    """

    def __init__(
        self,
        parser: Optional[ClockTimeParser] = None,
        generator: Optional[WorkingDaySlotGenerator] = None,
    ):
        self.parser = parser or ClockTimeParser()
        self.generator = generator or WorkingDaySlotGenerator()

    def compute(
        self,
        events: Sequence[Event],
        date: DateInput,
        now: datetime,
        config: Optional[SchedulingConfig] = None,
    ) -> List[SlotStatus]:
        """
        Compute the status of every slot on ``date``.

        Args:
            events: Events booked on ``date`` (other dates are ignored)
            date: The selected calendar day; None yields an empty result
            now: Current instant, already in the venue's timezone
            config: Scheduling rules, defaults to ``SchedulingConfig()``

        Returns:
            One SlotStatus per working hour, in ascending hour order
        """
        config = config or SchedulingConfig()
        selected = coerce_date(date)
        if selected is None:
            return []

        day_key = selected.isoformat()
        day_events = [event for event in events if event.date == day_key]

        in_order = self._event_hours(day_events, config)
        # sorted() is stable, so equal hours keep their input order
        time_sorted = sorted(
            (pair for pair in in_order if pair[1] is not None),
            key=lambda pair: pair[1],
        )

        today = Date(now.year, now.month, now.day)

        statuses = [
            self._classify(slot, in_order, time_sorted, selected, today, now.hour, config)
            for slot in self.generator.generate(config)
        ]

        logger.debug(
            "Computed %d slots for %s (%d events, %d bookable)",
            len(statuses),
            day_key,
            len(day_events),
            len(bookable_hours(statuses)),
        )
        return statuses

    def compute_for_day(
        self,
        index: EventDayIndex,
        date: DateInput,
        now: datetime,
        config: Optional[SchedulingConfig] = None,
    ) -> List[SlotStatus]:
        """Look the day's events up in ``index`` and compute its slots."""
        selected = coerce_date(date)
        if selected is None:
            return []
        return self.compute(index.lookup(selected.isoformat()), selected, now, config)

    def unparseable_events(self, events: Sequence[Event]) -> List[Event]:
        """Events whose time is missing or could not be read."""
        return [
            event for event in events
            if self.parser.parse_optional(event.clock_text) is None
        ]

    def _event_hours(
        self,
        events: Sequence[Event],
        config: SchedulingConfig,
    ) -> List[Tuple[Event, Optional[int]]]:
        """
        Pair each event with its normalized hour.

        Unreadable times become midnight when ``unparsed_time_as_midnight``
        is set, otherwise None (never colliding).
        """
        pairs: List[Tuple[Event, Optional[int]]] = []

        for event in events:
            hour = self.parser.parse_optional(event.clock_text)
            if hour is None:
                logger.warning(
                    "Event %s on %s has unreadable time %r; %s",
                    event.id,
                    event.date,
                    event.clock_text,
                    "treating it as midnight" if config.unparsed_time_as_midnight
                    else "ignoring it for slot collisions",
                )
                if config.unparsed_time_as_midnight:
                    hour = UNSPECIFIED_HOUR
            pairs.append((event, hour))

        return pairs

    def _classify(
        self,
        slot: TimeSlot,
        in_order: List[Tuple[Event, Optional[int]]],
        time_sorted: List[Tuple[Event, Optional[int]]],
        selected: Date,
        today: Date,
        current_hour: int,
        config: SchedulingConfig,
    ) -> SlotStatus:
        hour = slot.hour24

        booked = next((event for event, h in in_order if h == hour), None)
        if booked is not None:
            return SlotStatus(
                time=slot.display,
                hour24=hour,
                status=SlotState.TAKEN,
                reason=BOOKED_REASON,
                bound_event=booked,
            )

        gap_event = self._find_gap_event(hour, time_sorted, config.required_gap_hours)
        if gap_event is not None:
            return SlotStatus(
                time=slot.display,
                hour24=hour,
                status=SlotState.BLOCKED,
                reason=(
                    f"{config.required_gap_hours}-hour gap required "
                    f"(booking at {gap_event.clock_text or 'unspecified time'})"
                ),
                gap_event=gap_event,
            )

        past_reason = self._past_reason(hour, selected, today, current_hour, config)
        if past_reason is not None:
            return SlotStatus(
                time=slot.display,
                hour24=hour,
                status=SlotState.PAST,
                reason=past_reason,
            )

        return SlotStatus(
            time=slot.display,
            hour24=hour,
            status=SlotState.AVAILABLE,
            is_bookable=True,
        )

    @staticmethod
    def _find_gap_event(
        hour: int,
        time_sorted: List[Tuple[Event, Optional[int]]],
        gap_hours: int,
    ) -> Optional[Event]:
        """
        Event forcing a gap around ``hour``, or None.

        Qualifying events are 1..gap_hours away. The closest one is cited;
        ties go to the earliest in time-sorted order. For a one-hour gap
        this is simply the first time-sorted event exactly one hour away.
        """
        best: Optional[Event] = None
        best_distance = gap_hours + 1

        for event, event_hour in time_sorted:
            distance = abs(event_hour - hour)
            if 1 <= distance <= gap_hours and distance < best_distance:
                best = event
                best_distance = distance

        return best

    @staticmethod
    def _past_reason(
        hour: int,
        selected: Date,
        today: Date,
        current_hour: int,
        config: SchedulingConfig,
    ) -> Optional[str]:
        if selected < today:
            return PAST_DATE_REASON

        if config.advance_booking_days > 0:
            if (selected - today).days < config.advance_booking_days:
                return f"View only - {config.advance_booking_days}-day advance booking required"

        # The slot that has already started counts as passed
        if selected == today and hour <= current_hour:
            return PASSED_HOUR_REASON

        return None


def bookable_hours(statuses: Sequence[SlotStatus]) -> List[int]:
    """Hours that can still be booked."""
    return [status.hour24 for status in statuses if status.is_bookable]
