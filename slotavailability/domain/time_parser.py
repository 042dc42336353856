"""
Free-text clock parsing.

Event times arrive as whatever the booking form stored: ``"9:00 AM"``,
``"14:30"``, ``"9 PM"``. Only the hour matters for scheduling.
"""

import re
from typing import Optional, Tuple

# Unanchored: "at 9:30pm" still yields 9:30 PM.
CLOCK_PATTERN = re.compile(r"(\d{1,2}):?(\d{2})?\s*(AM|PM)?", re.IGNORECASE)

UNSPECIFIED_HOUR = 0


class ClockTimeParser:
    """
    Normalizes clock strings to an hour of day in ``[0, 23]``.

    Without an AM/PM marker the modifier defaults to AM, so ``"9"`` is 9 AM
    and ``"14:30"`` stays 14. ``12 AM`` maps to 0 and ``12 PM`` to 12.
    """

    def parse_components(self, text: Optional[str]) -> Optional[Tuple[int, int]]:
        """
        Return ``(hour24, minute)`` or None if nothing usable was found.
        """
        if not text:
            return None

        match = CLOCK_PATTERN.search(text)
        if not match:
            return None

        hour = int(match.group(1))
        minute = int(match.group(2)) if match.group(2) else 0
        modifier = match.group(3).upper() if match.group(3) else "AM"

        if hour == 12 and modifier == "AM":
            hour = 0
        elif hour != 12 and modifier == "PM":
            hour += 12

        if not 0 <= hour <= 23 or not 0 <= minute <= 59:
            return None

        return hour, minute

    def parse_optional(self, text: Optional[str]) -> Optional[int]:
        """Hour of day, or None for absent or unparseable text."""
        components = self.parse_components(text)
        if components is None:
            return None
        return components[0]

    def parse(self, text: Optional[str]) -> int:
        """
        Hour of day, with absent or unparseable text mapped to 0.

        0 is also a legitimate midnight hour; use ``parse_optional`` when the
        two must be told apart.
        """
        hour = self.parse_optional(text)
        return UNSPECIFIED_HOUR if hour is None else hour
