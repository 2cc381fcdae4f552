"""
Core text input system: configuration, events and the shared context.
"""

from inputgadget.core.config import TextInputConfig, FieldStyle
from inputgadget.core.events import EventBus, Event, TextInputEvent
from inputgadget.core.context import TextInputContext, BlinkTimer

__all__ = [
    "TextInputConfig",
    "FieldStyle",
    "EventBus",
    "Event",
    "TextInputEvent",
    "TextInputContext",
    "BlinkTimer",
]
