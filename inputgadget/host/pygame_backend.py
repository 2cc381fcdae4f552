"""
pygame host backend.

Provides the pieces a pygame program needs around the core: text
metrics, a minimal label control, event forwarding and rendering.

Usage:
    metrics = PygameTextMetrics()
    context = TextInputContext(metrics)
    control = LabelControl(40, 40, 240, 28, font=pygame.font.SysFont(None, 24))
    field = context.create_field(control, padding_left=4, padding_top=6)
    renderer = FieldRenderer(screen, context)

    for event in pygame.event.get():
        forward_event(context, event)
    context.tick()
    renderer.render(field)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

import pygame

from inputgadget.input.keys import Key

if TYPE_CHECKING:
    from inputgadget.core.context import TextInputContext
    from inputgadget.field.state import TextField


_KEY_MAP = {
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_TAB: Key.TAB,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_KP_ENTER: Key.RETURN,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_DELETE: Key.DELETE,
    pygame.K_HOME: Key.HOME,
    pygame.K_END: Key.END,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


class PygameTextMetrics:
    """Measures text with pygame fonts."""

    def __init__(self, default_size: int = 16):
        self._default_size = default_size
        self._default_font: Optional[pygame.font.Font] = None

    def resolve_font(self, font: Any) -> pygame.font.Font:
        """The given font, or the default font for None."""
        if font is not None:
            return font
        if self._default_font is None:
            self._default_font = pygame.font.SysFont(None, self._default_size)
        return self._default_font

    def measure(self, font: Any, text: str) -> float:
        if not text:
            return 0
        return self.resolve_font(font).size(text)[0]


@dataclass(eq=False)
class LabelControl:
    """A bare clickable label; the control a field is bound to."""
    x: float = 0
    y: float = 0
    width: float = 120
    height: float = 24
    font: Any = None
    text_color: Tuple[int, ...] = (255, 255, 255)
    label: str = ""

    def contains(self, px: float, py: float) -> bool:
        return (self.x <= px < self.x + self.width and
                self.y <= py < self.y + self.height)


def keycode_from_event(event: Any, include_chars: bool = True) -> Optional[int]:
    """
    Core keycode for a pygame KEYDOWN event.

    Args:
        event: pygame event
        include_chars: Translate character keys from ``event.unicode``.
            Turn off when character input arrives as TEXTINPUT.

    Returns:
        Keycode, or None if the event carries nothing for a text field
    """
    if event.type != pygame.KEYDOWN:
        return None

    if event.key in _KEY_MAP:
        return int(_KEY_MAP[event.key])

    unicode = getattr(event, 'unicode', '')
    if include_chars and len(unicode) == 1 and unicode.isprintable():
        return ord(unicode)

    return None


def forward_event(
    context: 'TextInputContext',
    event: Any,
    text_input: bool = False,
) -> bool:
    """
    Route one pygame event into the context's dispatcher.

    Args:
        context: Text input context
        event: pygame event
        text_input: Characters come from TEXTINPUT events rather than
            KEYDOWN (use with pygame.key.start_text_input)

    Returns:
        True if a text field consumed the event
    """
    dispatcher = context.dispatcher

    if event.type == pygame.KEYDOWN:
        keycode = keycode_from_event(event, include_chars=not text_input)
        if keycode is None:
            return False
        return dispatcher.handle_key_press(context.focused, keycode)

    if event.type == pygame.TEXTINPUT and text_input:
        return dispatcher.handle_text_input(context.focused, event.text)

    if event.type == pygame.MOUSEBUTTONDOWN:
        x, y = event.pos
        field = context.directory.find_at(x, y)
        if field is None:
            return False
        return dispatcher.handle_mouse_click_any(field.control, event.button, x, y)

    return False


class FieldRenderer:
    """Draws text fields onto a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        context: 'TextInputContext',
        border_color: Tuple[int, ...] = (120, 120, 140),
        focus_border_color: Tuple[int, ...] = (255, 215, 0),
        caret_width: int = 2,
    ):
        self.surface = surface
        self.context = context
        self.border_color = border_color
        self.focus_border_color = focus_border_color
        self.caret_width = caret_width

    def render(self, field: 'TextField') -> None:
        """Draw border, text and caret for one field."""
        rect = field.rect
        font = field.font
        if font is None and isinstance(self.context.metrics, PygameTextMetrics):
            font = self.context.metrics.resolve_font(None)

        if not field.border_transparent:
            color = self.focus_border_color if field.has_focus else self.border_color
            pygame.draw.rect(
                self.surface,
                color[:3],
                pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height)),
                1,
            )

        text_x = rect.x + field.padding_left
        text_y = rect.y + field.padding_top

        if field.text and font is not None:
            image = font.render(field.text, True, field.text_color[:3])
            self.surface.blit(image, (int(text_x), int(text_y)))

        if self.context.caret_visible(field):
            caret_x = text_x + field.caret_pixel(
                self.context.metrics, self.context.config.caret_pixel_offset
            )
            pygame.draw.line(
                self.surface,
                field.text_color[:3],
                (int(caret_x), int(rect.y + 3)),
                (int(caret_x), int(rect.y + rect.height - 4)),
                self.caret_width,
            )

    def render_all(self) -> None:
        for field in self.context.directory:
            self.render(field)
