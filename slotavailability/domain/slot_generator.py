"""
Hourly slot scaffold for a working day.
"""

from typing import List

from .models import SchedulingConfig, TimeSlot


def format_hour_label(hour24: int) -> str:
    """Twelve-hour label, e.g. 0 -> "12:00 AM", 13 -> "1:00 PM"."""
    hour12 = hour24 % 12 or 12
    period = "AM" if hour24 < 12 else "PM"
    return f"{hour12}:00 {period}"


class WorkingDaySlotGenerator:
    """Produces one TimeSlot per hour in ``[work_start_hour, work_end_hour)``."""

    def generate(self, config: SchedulingConfig) -> List[TimeSlot]:
        return [
            TimeSlot(hour24=hour, display=format_hour_label(hour))
            for hour in range(config.work_start_hour, config.work_end_hour)
        ]
