"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability_service import AvailabilityService, DayAvailability, EventSourceProtocol

__all__ = ["AvailabilityService", "DayAvailability", "EventSourceProtocol"]
