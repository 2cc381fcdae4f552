"""
Configuration models for text input fields.

Config objects are pydantic models so that bad values are rejected
at assignment time instead of surfacing later as odd caret behavior.

Usage:
    config = TextInputConfig(blink_delay=20, handles_return=False)
    config.caret_pixel_offset = 1.5
"""

from __future__ import annotations

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field


class TextInputConfig(BaseModel):
    """
    Process-wide settings shared by every text field.

    Attributes:
        blink_delay: Host ticks between caret visibility toggles
        handles_return: If True, Return is consumed and raises the
            field's activation flag instead of going to the host
        caret_pixel_offset: Pixels added to the caret x position to
            line it up between glyphs (font dependent)
        default_max_length: Max length given to new fields (0 = unbounded)
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    blink_delay: int = Field(default=30, ge=1)
    handles_return: bool = True
    caret_pixel_offset: float = 0.0
    default_max_length: int = Field(default=0, ge=0)


class FieldStyle(BaseModel):
    """Visual parameters captured from the host control at creation."""

    model_config = ConfigDict(
        # Font handles are host objects
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )

    font: Any = None
    text_color: Tuple[int, ...] = (0, 0, 0)
    border_transparent: bool = False
    padding_left: float = 0
    padding_top: float = 0
