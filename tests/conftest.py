import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure inputgadget can be imported from a source checkout
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame display calls to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.draw'):
        yield


class FixedMetrics:
    """Every character is ``char_width`` pixels wide."""

    def __init__(self, char_width: float = 10):
        self.char_width = char_width
        self.calls = 0

    def measure(self, font, text):
        self.calls += 1
        return len(text) * self.char_width


class VariableMetrics:
    """Narrow 'i'/'l', wide 'm'/'w', everything else 8px."""

    WIDTHS = {"i": 3, "l": 3, "m": 14, "w": 14}

    def measure(self, font, text):
        return sum(self.WIDTHS.get(c, 8) for c in text)


class FakeControl:
    """Minimal host control."""

    def __init__(self, x=0, y=0, width=200, height=24, font="font", text_color=(255, 255, 255)):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.font = font
        self.text_color = text_color
        self.label = ""


@pytest.fixture
def metrics():
    return FixedMetrics()


@pytest.fixture
def control():
    return FakeControl(x=100, y=50, width=200, height=24)


@pytest.fixture
def make_control():
    return FakeControl


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from inputgadget.core.events import EventBus
    return EventBus()


@pytest.fixture
def context(metrics, event_bus):
    """Fresh context with fixed-width metrics."""
    from inputgadget.core.context import TextInputContext
    return TextInputContext(metrics, event_bus=event_bus)


@pytest.fixture
def field(context, control):
    """Field bound to ``control`` holding "abc"."""
    return context.create_field(control, "abc")


@pytest.fixture
def focused_field(context, field):
    context.focus.set_focus(field)
    return field


@pytest.fixture
def variable_metrics():
    return VariableMetrics()
