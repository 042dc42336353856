"""
Domain-specific exception hierarchy for slot availability.
"""


class SlotAvailabilityError(Exception):
    """Base class for all application-level errors."""


class InvalidDateError(SlotAvailabilityError, ValueError):
    """Raised when a requested calendar date cannot be understood."""


class EventSourceError(SlotAvailabilityError):
    """Raised when booking data cannot be loaded or parsed."""
