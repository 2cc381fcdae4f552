"""
inputgadget

Single-line text input fields layered on a host toolkit's label control:
caret positioning by keyboard or mouse, one focused field per context,
and edge-triggered Return activation.

Quick Start:
    from inputgadget import TextInputContext
    from inputgadget.host.pygame_backend import PygameTextMetrics, LabelControl

    context = TextInputContext(PygameTextMetrics())
    name = context.create_field(LabelControl(20, 20, 200, 24), "Hero")

    context.dispatcher.handle_mouse_click(name, 1, 60, 30)
    context.dispatcher.handle_key_press(name, ord("!"))

    if context.dispatcher.activated(name):
        print(name.text)
"""

__version__ = "0.1.0"

from inputgadget.core import (
    TextInputConfig,
    FieldStyle,
    EventBus,
    Event,
    TextInputEvent,
    TextInputContext,
    BlinkTimer,
)
from inputgadget.field import (
    TextField,
    FocusRegistry,
    FieldDirectory,
    CaretDirection,
    CaretExtent,
)
from inputgadget.input import Key, MouseButton, InputDispatcher

__all__ = [
    # Context and config
    "TextInputContext",
    "TextInputConfig",
    "FieldStyle",
    "BlinkTimer",

    # Events
    "EventBus",
    "Event",
    "TextInputEvent",

    # Fields
    "TextField",
    "FocusRegistry",
    "FieldDirectory",
    "CaretDirection",
    "CaretExtent",

    # Input
    "Key",
    "MouseButton",
    "InputDispatcher",
]
