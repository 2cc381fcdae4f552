"""
Typed event bus for observing text field state changes.

Event types are Enums, so subscribers never match on magic strings.

Usage:
    bus = EventBus()
    bus.subscribe(TextInputEvent.FOCUS_CHANGED, on_focus_changed)

    # Later, from the library
    bus.publish(TextInputEvent.FOCUS_CHANGED, old=None, new=field)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
from weakref import WeakMethod, ref

logger = logging.getLogger(__name__)


class TextInputEvent(Enum):
    """Events published by the text input system."""
    FIELD_CREATED = auto()
    FOCUS_CHANGED = auto()
    TEXT_CHANGED = auto()


@dataclass
class Event:
    """
    One published text input event.

    Keyword data passed to publish() is read back with ``event["text"]``.
    A handler sets ``consumed`` to keep lower priority handlers from
    seeing the event.
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)
    consumed: bool = False

    @property
    def text_field(self) -> Any:
        """The TextField the event concerns, if any."""
        return self.data.get("field", self.data.get("new"))

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe hub.

    Handlers run highest priority first. Events published from inside
    a handler are queued and delivered after the current one finishes,
    so delivery order always matches publish order.
    """

    def __init__(self):
        # event type -> [(priority, handler or weak ref, one_shot)]
        self._handlers: dict[Enum, list[tuple[int, Any, bool]]] = {}
        self._queue: list[Event] = []
        self._dispatching = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
        weak: bool = False,
    ) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: Event to listen for
            handler: Callback taking the Event
            priority: Higher runs first; equal priorities keep
                subscription order
            one_shot: Remove the handler after its first call
            weak: Hold only a weak reference to the handler
        """
        if weak:
            handler_ref = WeakMethod(handler) if hasattr(handler, '__self__') else ref(handler)
        else:
            handler_ref = handler

        handlers = self._handlers.setdefault(event_type, [])
        index = len(handlers)
        for i, (other_priority, _, _) in enumerate(handlers):
            if priority > other_priority:
                index = i
                break
        handlers.insert(index, (priority, handler_ref, one_shot))

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if not handlers:
            return
        self._handlers[event_type] = [
            entry for entry in handlers
            if self._resolve(entry[1]) != handler
        ]

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Returns:
            The Event (check .consumed to see if a handler took it)
        """
        event = Event(type=event_type, data=data)
        if self._dispatching:
            self._queue.append(event)
        else:
            self._dispatch(event)
        return event

    def clear(self, event_type: Enum | None = None) -> None:
        """Drop handlers for one event type, or all of them."""
        if event_type is None:
            self._handlers.clear()
        else:
            self._handlers.pop(event_type, None)

    def _dispatch(self, event: Event) -> None:
        self._dispatching = True
        try:
            handlers = self._handlers.get(event.type, [])
            dead = []

            for entry in list(handlers):
                _, handler_ref, one_shot = entry
                handler = self._resolve(handler_ref)
                if handler is None:
                    dead.append(entry)
                    continue

                try:
                    handler(event)
                except Exception:
                    logger.exception("Error in handler for %s", event.type)

                if one_shot:
                    dead.append(entry)
                if event.consumed:
                    break

            for entry in dead:
                if entry in handlers:
                    handlers.remove(entry)
        finally:
            self._dispatching = False

        while self._queue:
            self._dispatch(self._queue.pop(0))

    @staticmethod
    def _resolve(handler_ref: Any) -> EventHandler | None:
        if isinstance(handler_ref, (ref, WeakMethod)):
            return handler_ref()
        return handler_ref
