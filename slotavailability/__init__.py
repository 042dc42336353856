"""
Hourly booking-slot availability for appointment calendars.
"""

__version__ = "0.1.0"
