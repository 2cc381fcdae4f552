"""
Input handling for text fields.
"""

from inputgadget.input.keys import Key, MouseButton, char_from_keycode
from inputgadget.input.dispatcher import InputDispatcher

__all__ = [
    "Key",
    "MouseButton",
    "char_from_keycode",
    "InputDispatcher",
]
