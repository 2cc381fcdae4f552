"""
Input dispatcher: applies host key and mouse events to text fields.

Every handler returns True when the event was consumed. False means
the event had nothing to do with a usable field and the host should
handle it itself.

Usage:
    context = TextInputContext(metrics)
    name = context.create_field(name_button)

    # In the host event loop
    if not context.dispatcher.handle_key_press(context.focused, keycode):
        host_handle_key(keycode)

    if context.dispatcher.activated(name):
        submit(name.text)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from inputgadget.field.caret import (
    CaretDirection,
    CaretExtent,
    caret_index_from_pixel,
    delete_backward,
    delete_forward,
    insert_at,
    move_caret,
)
from inputgadget.input.keys import Key, char_from_keycode

if TYPE_CHECKING:
    from inputgadget.core.context import TextInputContext
    from inputgadget.field.state import TextField

logger = logging.getLogger(__name__)


_MOVES = {
    Key.LEFT: (CaretDirection.LEFT, CaretExtent.CHARACTER),
    Key.RIGHT: (CaretDirection.RIGHT, CaretExtent.CHARACTER),
    Key.HOME: (CaretDirection.LEFT, CaretExtent.LINE),
    Key.END: (CaretDirection.RIGHT, CaretExtent.LINE),
}


class InputDispatcher:
    """Routes raw input events into field state changes."""

    def __init__(self, context: 'TextInputContext'):
        self._context = context

    def _accepts_keys(self, field: Optional['TextField']) -> bool:
        return (
            field is not None
            and field.enabled
            and self._context.focus.is_focused(field)
        )

    def handle_key_press(self, field: Optional['TextField'], keycode: int) -> bool:
        """
        Apply a key press to a focused field.

        Args:
            field: Target field (normally the focused one)
            keycode: Key member or character code

        Returns:
            True if the key was consumed
        """
        if not self._accepts_keys(field):
            return False

        if keycode == Key.RETURN:
            if not self._context.config.handles_return:
                return False
            field._activate()
            self._context.blink.reset()
            return True

        text, caret = field.text, field.caret

        if keycode == Key.BACKSPACE:
            field._apply_edit(*delete_backward(text, caret))
        elif keycode == Key.DELETE:
            field._apply_edit(*delete_forward(text, caret))
        elif keycode in _MOVES:
            direction, extent = _MOVES[keycode]
            field.caret = move_caret(text, caret, direction, extent)
        else:
            char = char_from_keycode(keycode)
            if char is None:
                return False
            self._insert(field, char)

        self._context.blink.reset()
        return True

    def handle_text_input(self, field: Optional['TextField'], text: str) -> bool:
        """
        Insert a host text-input string at the caret.

        Stops at the first character the field rejects.
        """
        if not self._accepts_keys(field):
            return False

        for char in text:
            if not char.isprintable() or not self._insert(field, char):
                break

        self._context.blink.reset()
        return True

    def handle_mouse_click(
        self,
        field: Optional['TextField'],
        button: int,
        x: float,
        y: float,
    ) -> bool:
        """
        Focus a field and place its caret under the pointer.

        Args:
            field: Clicked field
            button: Host mouse button
            x, y: Click position in window pixels

        Returns:
            False if the field is missing or disabled
        """
        if field is None or not field.enabled:
            return False
        if not self._context.focus.set_focus(field):
            return False

        if field.rect.contains(x, y):
            local_x = x - field.rect.x - field.padding_left
            field.caret = caret_index_from_pixel(
                field.text,
                field.font,
                local_x,
                self._context.metrics,
                self._context.config.caret_pixel_offset,
            )
            logger.debug("Field %d caret -> %d (button %d)", field.id, field.caret, button)

        self._context.blink.reset()
        return True

    def handle_mouse_click_any(self, control: Any, button: int, x: float, y: float) -> bool:
        """Click on an arbitrary host control; False if it has no field."""
        field = self._context.directory.find_by_control(control)
        if field is None:
            return False
        return self.handle_mouse_click(field, button, x, y)

    def activated(self, field: Optional['TextField']) -> bool:
        """True once per Return press while the field was focused."""
        if field is None:
            return False
        return field.poll_activated()

    def _insert(self, field: 'TextField', char: str) -> bool:
        text = insert_at(field.text, field.caret, char, field.max_length)
        if text == field.text:
            logger.debug("Field %d rejected %r at max length", field.id, char)
            return False
        field._apply_edit(text, field.caret + len(char))
        return True
