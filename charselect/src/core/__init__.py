"""Core preview infrastructure."""

from .event_bus import Event, EventBus, EventType, get_event_bus, reset_event_bus

__all__ = [
    "Event",
    "EventBus",
    "EventType",
    "get_event_bus",
    "reset_event_bus",
]
