"""
Contracts the core expects from the host toolkit.

The core never draws or reads raw devices itself. It only needs a
control to bind to and a way to measure text.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class DisplayControl(Protocol):
    """
    A host clickable-label control.

    Geometry is in window pixels. The core writes ``label`` whenever
    the field text changes and reads the rest once, at bind time.
    """

    x: float
    y: float
    width: float
    height: float
    font: Any
    text_color: Tuple[int, ...]
    label: str


@runtime_checkable
class TextMetrics(Protocol):
    """Measures rendered text."""

    def measure(self, font: Any, text: str) -> float:
        """Return the pixel width of ``text`` drawn with ``font``."""
        ...
