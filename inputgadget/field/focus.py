"""
Focus registry: at most one text field has keyboard focus at a time.

This is the only place that flips a field's focus flag.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from inputgadget.core.events import TextInputEvent

if TYPE_CHECKING:
    from inputgadget.core.events import EventBus
    from inputgadget.field.state import TextField

logger = logging.getLogger(__name__)


class FocusRegistry:
    """Tracks the focused field across all fields of a context."""

    def __init__(self, event_bus: Optional['EventBus'] = None):
        self._focused: Optional[TextField] = None
        self._event_bus = event_bus

    @property
    def focused(self) -> Optional['TextField']:
        """Currently focused field, or None."""
        return self._focused

    def get_focused(self) -> Optional['TextField']:
        return self._focused

    def is_focused(self, field: Optional['TextField']) -> bool:
        return field is not None and field is self._focused

    def set_focus(self, field: Optional['TextField']) -> bool:
        """
        Give focus to a field.

        The previously focused field loses focus and its pending
        activation. Passing None clears focus.

        Args:
            field: Field to focus, or None

        Returns:
            False if the field is disabled (nothing changes), else True
        """
        if field is not None and not field.enabled:
            logger.debug("Focus refused for disabled field %d", field.id)
            return False

        if field is self._focused:
            return True

        # A field focused elsewhere leaves that registry first
        holder = field._focus if field is not None else None
        if holder is not None and holder is not self and holder.focused is field:
            holder.set_focus(None)

        old = self._focused
        if old is not None:
            old._lose_focus()

        self._focused = field
        if field is not None:
            field._gain_focus(self)

        logger.debug(
            "Focus changed: %s -> %s",
            old.id if old else None,
            field.id if field else None,
        )
        if self._event_bus:
            self._event_bus.publish(TextInputEvent.FOCUS_CHANGED, old=old, new=field)

        return True

    def clear_focus(self) -> None:
        """Clear focus."""
        self.set_focus(None)
