"""
Text field state, caret engine, focus registry and field directory.
"""

from inputgadget.field.caret import (
    CaretDirection,
    CaretExtent,
    clamp_caret,
    caret_index_from_pixel,
    pixel_from_caret_index,
    insert_at,
    delete_backward,
    delete_forward,
    move_caret,
)
from inputgadget.field.state import TextField, Rect
from inputgadget.field.focus import FocusRegistry
from inputgadget.field.directory import FieldDirectory

__all__ = [
    # Caret engine
    "CaretDirection",
    "CaretExtent",
    "clamp_caret",
    "caret_index_from_pixel",
    "pixel_from_caret_index",
    "insert_at",
    "delete_backward",
    "delete_forward",
    "move_caret",

    # State
    "TextField",
    "Rect",
    "FocusRegistry",
    "FieldDirectory",
]
