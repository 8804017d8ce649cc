"""
Typed event bus for decoupled communication.

Uses Enums for event types to prevent magic strings. The bus is owned by a
FlowContext and handed to every component that publishes or listens, so
the lifetime and ordering of broadcasts stay explicit.

Usage:
    # Subscribe
    event_bus.subscribe(FlowEvent.STATE_CHANGED, on_state_changed)

    # Publish
    event_bus.publish(FlowEvent.SCRIPT_EVENT, name="door_opened")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
from weakref import WeakMethod, ref

logger = logging.getLogger(__name__)


class FlowEvent(Enum):
    """Built-in gameplay-flow events."""
    # Progress
    STATE_CHANGED = auto()

    # Dialogue
    DIALOGUE_OPENED = auto()
    DIALOGUE_CLOSED = auto()
    DIALOGUE_CONTINUE_PRESSED = auto()
    DIALOGUE_CHOICE_SELECTED = auto()
    SCRIPT_EVENT = auto()

    # Menus
    BASE_MENU_OPENING = auto()
    BASE_MENU_CLOSED = auto()

    # Modes
    MODE_CHANGED = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
        consumed: Whether the event has been handled
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)
    consumed: bool = False

    def consume(self) -> None:
        """Mark event as consumed (stops propagation)."""
        self.consumed = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get event data by key (dict-style)."""
        return self.data[key]


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for publish/subscribe messaging.

    Features:
    - Typed events (Enum-based)
    - Priority ordering
    - Weak references (auto-cleanup when handlers are deleted)
    - One-shot handlers
    - Event consumption (stops propagation)
    - Events published while dispatching are queued and delivered in order
    """

    def __init__(self):
        # Map of event type -> list of (priority, handler, one_shot)
        self._handlers: dict[Enum, list[tuple[int, Any, bool]]] = {}
        # Queue for events published during handling
        self._event_queue: list[Event] = []
        self._is_publishing = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
        weak: bool = True,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            priority: Higher priority handlers are called first (default 0)
            one_shot: If True, handler is removed after first call
            weak: If True, use weak reference (handler auto-removed if deleted)
        """
        if event_type not in self._handlers:
            self._handlers[event_type] = []

        if weak:
            if hasattr(handler, '__self__'):
                handler_ref = WeakMethod(handler)
            else:
                handler_ref = ref(handler)
        else:
            handler_ref = handler

        # Insert sorted by priority (highest first), FIFO within a priority
        handlers = self._handlers[event_type]
        entry = (priority, handler_ref, one_shot)

        insert_idx = len(handlers)
        for i, (p, _, _) in enumerate(handlers):
            if priority > p:
                insert_idx = i
                break

        handlers.insert(insert_idx, entry)

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """
        Unsubscribe from an event type.

        Args:
            event_type: The event type
            handler: The handler to remove
        """
        if event_type not in self._handlers:
            return

        handlers = self._handlers[event_type]
        self._handlers[event_type] = [
            (p, h, o) for p, h, o in handlers
            if self._get_handler(h) != handler
        ]

    def has_subscribers(self, event_type: Enum) -> bool:
        """Check if any live handler listens for an event type."""
        return any(
            self._get_handler(h) is not None
            for _, h, _ in self._handlers.get(event_type, [])
        )

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The Event object (check .consumed to see if it was handled)
        """
        event = Event(type=event_type, data=data)
        self.publish_event(event)
        return event

    def publish_event(self, event: Event) -> None:
        """
        Publish a pre-created event.

        Args:
            event: The event to publish
        """
        if self._is_publishing:
            self._event_queue.append(event)
        else:
            self._dispatch(event)

    def clear(self, event_type: Enum | None = None) -> None:
        """
        Clear handlers.

        Args:
            event_type: If specified, only clear handlers for this type.
                       If None, clear all handlers.
        """
        if event_type is None:
            self._handlers.clear()
        elif event_type in self._handlers:
            del self._handlers[event_type]

    def _dispatch(self, event: Event) -> None:
        """Dispatch event and then everything queued behind it."""
        self._is_publishing = True
        try:
            self._deliver(event)
            while self._event_queue:
                self._deliver(self._event_queue.pop(0))
        finally:
            self._is_publishing = False

    def _deliver(self, event: Event) -> None:
        """Deliver a single event to its handlers."""
        if event.type not in self._handlers:
            return

        # Snapshot so handlers may (un)subscribe while we iterate
        entries = list(self._handlers[event.type])
        to_remove = []

        for entry in entries:
            _, handler_ref, one_shot = entry
            handler = self._get_handler(handler_ref)

            if handler is None:
                # Weak reference was garbage collected
                to_remove.append(entry)
                continue

            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event.type}")

            if one_shot:
                to_remove.append(entry)

            if event.consumed:
                break

        if to_remove:
            self._handlers[event.type] = [
                e for e in self._handlers.get(event.type, []) if e not in to_remove
            ]

    def _get_handler(self, handler_ref: Any) -> EventHandler | None:
        """Resolve handler from reference."""
        if isinstance(handler_ref, (ref, WeakMethod)):
            return handler_ref()
        return handler_ref
