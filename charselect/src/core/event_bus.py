"""
Core event bus for preview communication.

Provides a pub/sub system so the UI layer can follow preview state without
the preview knowing about widgets.
"""

from typing import Callable, Dict, List, Any, Optional
from enum import Enum, auto
from dataclasses import dataclass, field

from ..logging_config import get_logger

logger = get_logger("event_bus")


class EventType(Enum):
    """Preview event types."""
    # Selection events
    CLASS_SELECTED = auto()
    DIRECTION_CHANGED = auto()
    GENDER_CHANGED = auto()

    # Display events
    FRAMES_CHANGED = auto()
    PREVIEW_CLEARED = auto()

    # Lifecycle events
    SELECTION_CONFIRMED = auto()
    SELECTION_CANCELLED = auto()


@dataclass
class Event:
    """Event data structure."""
    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None


class EventBus:
    """Central event bus for preview communication."""

    def __init__(self):
        self._handlers: Dict[EventType, List[Callable[[Event], None]]] = {}
        self._once_handlers: Dict[EventType, List[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def subscribe_once(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Subscribe a handler that will be called only once."""
        if event_type not in self._once_handlers:
            self._once_handlers[event_type] = []
        self._once_handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers and handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

        if event_type in self._once_handlers and handler in self._once_handlers[event_type]:
            self._once_handlers[event_type].remove(handler)

    def emit(self, event_type: EventType, data: Optional[Dict[str, Any]] = None, source: Optional[str] = None) -> None:
        """
        Emit an event to all subscribers.

        A failing handler is logged and does not stop the others.
        """
        event = Event(type=event_type, data=data or {}, source=source)

        for handler in list(self._handlers.get(event_type, [])):
            self._dispatch(handler, event)

        once_handlers = self._once_handlers.pop(event_type, [])
        for handler in once_handlers:
            self._dispatch(handler, event)

    def clear(self, event_type: Optional[EventType] = None) -> None:
        """Clear all handlers for an event type, or all handlers if None."""
        if event_type:
            self._handlers.pop(event_type, None)
            self._once_handlers.pop(event_type, None)
        else:
            self._handlers.clear()
            self._once_handlers.clear()

    @staticmethod
    def _dispatch(handler: Callable[[Event], None], event: Event) -> None:
        try:
            handler(event)
        except Exception:
            logger.exception("Error in %s handler %r", event.type.name, handler)


# Singleton event bus instance
_event_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """Get the singleton event bus instance."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


def reset_event_bus() -> None:
    """Reset the event bus (useful for testing)."""
    global _event_bus
    _event_bus = None
