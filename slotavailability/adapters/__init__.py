"""
Adapters layer - Sources of booking data.
"""

from .json_event_source import JsonEventSource

__all__ = ["JsonEventSource"]
