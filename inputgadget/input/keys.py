"""
Keycodes understood by the input dispatcher.

Control keys use SDL keycode values so that hosts built on SDL
(pygame included) can forward their codes unchanged. Any other code
below the SDL scancode range is treated as a character key.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

# SDL marks keys without a character with this bit
SCANCODE_MASK = 1 << 30


class Key(IntEnum):
    """Non-character keys."""
    BACKSPACE = 8
    TAB = 9
    RETURN = 13
    ESCAPE = 27
    DELETE = 127

    HOME = SCANCODE_MASK | 74
    END = SCANCODE_MASK | 77
    RIGHT = SCANCODE_MASK | 79
    LEFT = SCANCODE_MASK | 80
    DOWN = SCANCODE_MASK | 81
    UP = SCANCODE_MASK | 82


class MouseButton(IntEnum):
    """Mouse buttons, numbered as the host reports them."""
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


def char_from_keycode(keycode: int) -> Optional[str]:
    """
    Character for a character keycode.

    Returns:
        The printable character, or None for control/navigation codes
    """
    if keycode < 0 or keycode & SCANCODE_MASK:
        return None
    try:
        char = chr(keycode)
    except (ValueError, OverflowError):
        return None
    return char if char.isprintable() else None
