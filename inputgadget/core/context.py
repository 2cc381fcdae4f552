"""
The text input context: process-wide state for all text fields.

Create exactly one at program start and pass it to whatever needs it.

Usage:
    context = TextInputContext(PygameTextMetrics(), TextInputConfig(blink_delay=20))
    field = context.create_field(control, "Hero", padding_left=4, padding_top=2)

    # Once per host frame
    context.tick()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from inputgadget.core.config import TextInputConfig
from inputgadget.field.directory import FieldDirectory
from inputgadget.field.focus import FocusRegistry
from inputgadget.input.dispatcher import InputDispatcher

if TYPE_CHECKING:
    from inputgadget.core.events import EventBus
    from inputgadget.field.state import TextField
    from inputgadget.host.protocols import TextMetrics

logger = logging.getLogger(__name__)


class BlinkTimer:
    """Caret visibility toggled every ``config.blink_delay`` ticks."""

    def __init__(self, config: TextInputConfig):
        self._config = config
        self._ticks = 0
        self.visible = True

    def tick(self) -> None:
        self._ticks += 1
        if self._ticks >= self._config.blink_delay:
            self._ticks = 0
            self.visible = not self.visible

    def reset(self) -> None:
        """Show the caret and restart the blink cycle."""
        self._ticks = 0
        self.visible = True


class TextInputContext:
    """
    Owns the config, focus registry, field directory and dispatcher.

    Attributes:
        config: Shared settings (blink delay, Return handling, caret offset)
        metrics: Host text measurer
        focus: The focus registry
        directory: All fields, by ID and by control
        blink: Caret blink state
        dispatcher: Entry point for host input events
    """

    def __init__(
        self,
        metrics: 'TextMetrics',
        config: Optional[TextInputConfig] = None,
        event_bus: Optional['EventBus'] = None,
    ):
        self.config = config or TextInputConfig()
        self.metrics = metrics
        self.event_bus = event_bus

        self.focus = FocusRegistry(event_bus)
        self.directory = FieldDirectory(
            self.focus,
            event_bus,
            default_max_length=self.config.default_max_length,
        )
        self.blink = BlinkTimer(self.config)
        self.dispatcher = InputDispatcher(self)

        logger.debug("Text input context created: %s", self.config)

    @property
    def focused(self) -> Optional['TextField']:
        return self.focus.focused

    def create_field(
        self,
        control: Any,
        text: str = "",
        padding_left: float = 0,
        padding_top: float = 0,
    ) -> 'TextField':
        """Bind a new field to a host control (see FieldDirectory.create)."""
        self.directory.default_max_length = self.config.default_max_length
        return self.directory.create(control, text, padding_left, padding_top)

    def find_by_id(self, field_id: int) -> Optional['TextField']:
        return self.directory.find_by_id(field_id)

    def find_by_control(self, control: Any) -> Optional['TextField']:
        return self.directory.find_by_control(control)

    def set_focus(self, field: Optional['TextField']) -> bool:
        if self.focus.set_focus(field):
            self.blink.reset()
            return True
        return False

    def caret_visible(self, field: 'TextField') -> bool:
        """Whether the host should draw the caret for this field now."""
        return field.has_focus and self.blink.visible

    def tick(self) -> None:
        """Advance the caret blink; call once per host update."""
        self.blink.tick()
