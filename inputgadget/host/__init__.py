"""
Host toolkit boundary.

``protocols`` describes what the core consumes. ``pygame_backend``
implements it for pygame and is imported on demand so the core works
without a display.
"""

from inputgadget.host.protocols import DisplayControl, TextMetrics

__all__ = [
    "DisplayControl",
    "TextMetrics",
]
