"""
Field directory: owns every TextField and indexes it by ID and by control.

Fields live in a single ID-keyed store. The control index maps control
identity to a field ID, so each field record exists exactly once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from inputgadget.core.events import TextInputEvent
from inputgadget.field.state import TextField

if TYPE_CHECKING:
    from inputgadget.core.events import EventBus
    from inputgadget.field.focus import FocusRegistry
    from inputgadget.host.protocols import DisplayControl

logger = logging.getLogger(__name__)


class FieldDirectory:
    """
    Registry of all text fields.

    Usage:
        directory = FieldDirectory(focus_registry)
        field = directory.create(button, "name", padding_left=4)

        directory.find_by_id(field.id) is field
        directory.find_by_control(button) is field
    """

    def __init__(
        self,
        focus: 'FocusRegistry',
        event_bus: Optional['EventBus'] = None,
        default_max_length: int = 0,
    ):
        self._focus = focus
        self._event_bus = event_bus
        self.default_max_length = default_max_length

        self._fields: dict[int, TextField] = {}
        # id(control) -> field ID
        self._by_control: dict[int, int] = {}

    def create(
        self,
        control: 'DisplayControl',
        text: str = "",
        padding_left: float = 0,
        padding_top: float = 0,
    ) -> TextField:
        """
        Bind a new field to a host control.

        The control's geometry, font and color become the field's
        initial visual parameters. Changing the control directly
        afterwards is not supported.

        Raises:
            ValueError: If control is None or already bound to a field
        """
        if control is None:
            logger.warning("Refusing to create a text field without a control")
            raise ValueError("Cannot bind a text field to a None control")

        if id(control) in self._by_control:
            existing = self._by_control[id(control)]
            logger.warning("Control %r is already bound to field %d", control, existing)
            raise ValueError(f"Control already bound to field {existing}")

        field = TextField(
            control,
            text,
            padding_left=padding_left,
            padding_top=padding_top,
            max_length=self.default_max_length,
        )
        field._focus = self._focus
        field._event_bus = self._event_bus

        self._fields[field.id] = field
        self._by_control[id(control)] = field.id

        logger.debug("Created text field %d", field.id)
        if self._event_bus:
            self._event_bus.publish(TextInputEvent.FIELD_CREATED, field=field)

        return field

    def find_by_id(self, field_id: int) -> Optional[TextField]:
        """Look up a field by ID."""
        return self._fields.get(field_id)

    def find_by_control(self, control: 'DisplayControl') -> Optional[TextField]:
        """Look up the field bound to a host control."""
        if control is None:
            return None
        field_id = self._by_control.get(id(control))
        if field_id is None:
            return None
        return self._fields[field_id]

    def find_at(self, x: float, y: float) -> Optional[TextField]:
        """Field whose bounds contain the window point, if any."""
        for field in self._fields.values():
            if field.rect.contains(x, y):
                return field
        return None

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[TextField]:
        return iter(list(self._fields.values()))

    def __contains__(self, field: object) -> bool:
        return isinstance(field, TextField) and self._fields.get(field.id) is field
