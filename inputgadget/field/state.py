"""
Per-field state.

A TextField is bound to exactly one host control for its whole life.
It holds data and enforces its own invariants (caret in range, text
within max length). Focus is owned by the FocusRegistry; a field never
sets its own focus flag.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from inputgadget.core.config import FieldStyle
from inputgadget.core.events import TextInputEvent
from inputgadget.field.caret import clamp_caret, pixel_from_caret_index

if TYPE_CHECKING:
    from inputgadget.core.events import EventBus
    from inputgadget.field.focus import FocusRegistry
    from inputgadget.host.protocols import DisplayControl, TextMetrics


@dataclass
class Rect:
    """Control bounds in window pixels."""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    def contains(self, px: float, py: float) -> bool:
        """Check if point is inside rect."""
        return (self.x <= px < self.x + self.width and
                self.y <= py < self.y + self.height)


class TextField:
    """
    Single-line text input state bound to a host control.

    Created through FieldDirectory.create (or TextInputContext.create_field),
    which wires in the focus registry and event bus.
    """

    # Never reused within a process
    _id_counter = itertools.count(1)

    def __init__(
        self,
        control: 'DisplayControl',
        text: str = "",
        padding_left: float = 0,
        padding_top: float = 0,
        max_length: int = 0,
    ):
        self._id = next(TextField._id_counter)
        self._control = control

        self.rect = Rect(
            getattr(control, 'x', 0),
            getattr(control, 'y', 0),
            getattr(control, 'width', 0),
            getattr(control, 'height', 0),
        )
        self.style = FieldStyle(
            font=getattr(control, 'font', None),
            text_color=tuple(getattr(control, 'text_color', (0, 0, 0))),
            padding_left=padding_left,
            padding_top=padding_top,
        )

        self._max_length = max(0, max_length)
        self._text = self._truncate(text or "")
        self._caret = len(self._text)
        self._enabled = True
        self._has_focus = False
        self._activated = False

        # Set by FieldDirectory
        self._focus: Optional[FocusRegistry] = None
        self._event_bus: Optional[EventBus] = None

        self._sync_label()

    def __repr__(self) -> str:
        return f"TextField(id={self._id}, text={self._text!r}, caret={self._caret})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def control(self) -> 'DisplayControl':
        """The host control this field is bound to."""
        return self._control

    # Text and caret

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._set_text(self._truncate(value or ""))
        self._caret = clamp_caret(self._text, self._caret)

    @property
    def caret(self) -> int:
        """Caret index in [0, len(text)]."""
        return self._caret

    @caret.setter
    def caret(self, value: int) -> None:
        self._caret = clamp_caret(self._text, value)

    @property
    def max_length(self) -> int:
        """Maximum text length, 0 for unbounded."""
        return self._max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        self._max_length = max(0, value)
        self.text = self._text

    def caret_pixel(self, metrics: 'TextMetrics', caret_offset: float = 0.0) -> float:
        """Caret x relative to the text origin (padding not included)."""
        return pixel_from_caret_index(
            self._text, self.style.font, self._caret, metrics, caret_offset
        )

    # State flags

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        if not self._enabled and self._has_focus and self._focus is not None:
            self._focus.set_focus(None)

    @property
    def has_focus(self) -> bool:
        return self._has_focus

    def poll_activated(self) -> bool:
        """Return the activation flag and clear it."""
        activated = self._activated
        self._activated = False
        return activated

    # Visual parameters

    @property
    def font(self) -> Any:
        return self.style.font

    @font.setter
    def font(self, value: Any) -> None:
        self.style.font = value

    @property
    def text_color(self) -> Tuple[int, ...]:
        return self.style.text_color

    @text_color.setter
    def text_color(self, value: Tuple[int, ...]) -> None:
        self.style.text_color = tuple(value)

    @property
    def border_transparent(self) -> bool:
        return self.style.border_transparent

    @border_transparent.setter
    def border_transparent(self, value: bool) -> None:
        self.style.border_transparent = value

    @property
    def padding_left(self) -> float:
        return self.style.padding_left

    @property
    def padding_top(self) -> float:
        return self.style.padding_top

    # Internal

    def _gain_focus(self, registry: 'FocusRegistry') -> None:
        """Called by the registry that now holds focus."""
        self._focus = registry
        self._has_focus = True

    def _lose_focus(self) -> None:
        self._has_focus = False
        self._activated = False

    def _activate(self) -> None:
        """Raise the one-shot Return flag."""
        self._activated = True

    def _apply_edit(self, text: str, caret: int) -> None:
        """Store the result of a caret engine edit."""
        self._set_text(self._truncate(text))
        self._caret = clamp_caret(self._text, caret)

    def _truncate(self, text: str) -> str:
        if self._max_length > 0:
            return text[:self._max_length]
        return text

    def _set_text(self, text: str) -> None:
        if text == self._text:
            return
        self._text = text
        self._sync_label()
        if self._event_bus:
            self._event_bus.publish(TextInputEvent.TEXT_CHANGED, field=self, text=text)

    def _sync_label(self) -> None:
        try:
            self._control.label = self._text
        except AttributeError:
            # Read-only label; the host renders from field.text instead
            pass
