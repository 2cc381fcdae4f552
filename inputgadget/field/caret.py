"""
Caret engine: pure functions over (text, caret index, font metrics).

Nothing here touches field state. Callers pass the text and get new
values back, which keeps every edit rule testable on plain strings.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Tuple

if TYPE_CHECKING:
    from inputgadget.host.protocols import TextMetrics


class CaretDirection(Enum):
    """Horizontal caret movement."""
    LEFT = auto()
    RIGHT = auto()


class CaretExtent(Enum):
    """How far a caret movement goes."""
    CHARACTER = auto()  # Left / Right
    LINE = auto()       # Home / End


def clamp_caret(text: str, index: int) -> int:
    """Clamp a caret index into [0, len(text)]."""
    return max(0, min(len(text), index))


def pixel_from_caret_index(
    text: str,
    font: Any,
    index: int,
    metrics: 'TextMetrics',
    caret_offset: float = 0.0,
) -> float:
    """
    Pixel x of the caret, relative to the start of the text.

    Args:
        text: Field text
        font: Host font handle
        index: Caret index (clamped)
        metrics: Text measurer
        caret_offset: Fixed pixel nudge applied to the caret

    Returns:
        Width of ``text[:index]`` plus ``caret_offset``
    """
    index = clamp_caret(text, index)
    return metrics.measure(font, text[:index]) + caret_offset


def caret_index_from_pixel(
    text: str,
    font: Any,
    pixel_x: float,
    metrics: 'TextMetrics',
    caret_offset: float = 0.0,
) -> int:
    """
    Caret index of the character boundary closest to ``pixel_x``.

    Boundaries are scanned left to right. Ties go to the left
    boundary. ``caret_offset`` is the same nudge used by
    pixel_from_caret_index, so the two functions invert each other.
    """
    target = pixel_x - caret_offset
    best = 0
    best_distance = None

    for i in range(len(text) + 1):
        width = metrics.measure(font, text[:i])
        distance = abs(width - target)
        if best_distance is None or distance < best_distance:
            best = i
            best_distance = distance
        # Boundaries only grow from here
        if width >= target:
            break

    return best


def insert_at(text: str, index: int, char: str, max_length: int = 0) -> str:
    """
    Insert ``char`` before ``index``.

    Returns the original text unchanged when the result would exceed
    ``max_length`` (0 means unbounded).
    """
    if not char:
        return text
    if max_length > 0 and len(text) + len(char) > max_length:
        return text

    index = clamp_caret(text, index)
    return text[:index] + char + text[index:]


def delete_backward(text: str, index: int) -> Tuple[str, int]:
    """Backspace: remove the character before ``index``."""
    index = clamp_caret(text, index)
    if index == 0:
        return text, 0
    return text[:index - 1] + text[index:], index - 1


def delete_forward(text: str, index: int) -> Tuple[str, int]:
    """Delete: remove the character at ``index``."""
    index = clamp_caret(text, index)
    if index >= len(text):
        return text, index
    return text[:index] + text[index + 1:], index


def move_caret(
    text: str,
    index: int,
    direction: CaretDirection,
    extent: CaretExtent = CaretExtent.CHARACTER,
) -> int:
    """New caret index after a Left/Right/Home/End movement."""
    if extent == CaretExtent.LINE:
        return 0 if direction == CaretDirection.LEFT else len(text)

    delta = -1 if direction == CaretDirection.LEFT else 1
    return clamp_caret(text, index + delta)
