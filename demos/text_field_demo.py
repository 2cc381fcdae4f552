"""
Text Field Demo

Demonstrates:
- Two text fields sharing one focus
- Click to place the caret, arrows/Home/End to move it
- Return activation polled once per frame
- Caret blink driven by the frame tick

Run: python -m demos.text_field_demo
"""

import logging

import pygame

from inputgadget import TextInputContext, TextInputConfig, EventBus, TextInputEvent
from inputgadget.host.pygame_backend import (
    PygameTextMetrics,
    LabelControl,
    FieldRenderer,
    forward_event,
)


def main():
    logging.basicConfig(level=logging.DEBUG)
    logger = logging.getLogger("TextFieldDemo")

    pygame.init()
    screen = pygame.display.set_mode((480, 200))
    pygame.display.set_caption("Text Field Demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 24)

    bus = EventBus()
    bus.subscribe(
        TextInputEvent.FOCUS_CHANGED,
        lambda e: logger.info("Focus -> %s", e["new"]),
    )

    context = TextInputContext(
        PygameTextMetrics(),
        TextInputConfig(blink_delay=30, caret_pixel_offset=1),
        event_bus=bus,
    )
    name = context.create_field(
        LabelControl(40, 40, 400, 30, font=font), "Hero", padding_left=6, padding_top=7
    )
    town = context.create_field(
        LabelControl(40, 100, 400, 30, font=font), "", padding_left=6, padding_top=7
    )
    town.max_length = 12
    context.set_focus(name)

    renderer = FieldRenderer(screen, context)

    print("=" * 60)
    print("Text Field Demo")
    print("=" * 60)
    print("Click a field to focus it, type, press Return to submit.")
    print("Press ESC to exit")
    print("=" * 60)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif forward_event(context, event):
                continue
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        for field in (name, town):
            if context.dispatcher.activated(field):
                logger.info("Submitted field %d: %r", field.id, field.text)

        context.tick()

        screen.fill((30, 30, 46))
        renderer.render_all()
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
