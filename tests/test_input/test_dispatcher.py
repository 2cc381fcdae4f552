import pytest
from inputgadget.input.keys import Key, MouseButton


def test_printable_key_inserts(context, focused_field):
    focused_field.caret = 1
    assert context.dispatcher.handle_key_press(focused_field, ord("X"))
    assert focused_field.text == "aXbc"
    assert focused_field.caret == 2


def test_key_ignored_when_not_focused(context, field):
    assert not context.dispatcher.handle_key_press(field, ord("X"))
    assert field.text == "abc"


def test_key_ignored_for_none(context):
    assert not context.dispatcher.handle_key_press(None, ord("X"))


def test_backspace(context, focused_field):
    focused_field.caret = 1
    assert context.dispatcher.handle_key_press(focused_field, Key.BACKSPACE)
    assert focused_field.text == "bc"
    assert focused_field.caret == 0


def test_backspace_at_start_consumed(context, focused_field):
    focused_field.caret = 0
    assert context.dispatcher.handle_key_press(focused_field, Key.BACKSPACE)
    assert focused_field.text == "abc"


def test_delete(context, focused_field):
    focused_field.caret = 1
    assert context.dispatcher.handle_key_press(focused_field, Key.DELETE)
    assert focused_field.text == "ac"
    assert focused_field.caret == 1


@pytest.mark.parametrize("key,start,expected", [
    (Key.LEFT, 2, 1),
    (Key.LEFT, 0, 0),
    (Key.RIGHT, 2, 3),
    (Key.RIGHT, 3, 3),
    (Key.HOME, 2, 0),
    (Key.END, 1, 3),
])
def test_navigation(context, focused_field, key, start, expected):
    focused_field.caret = start
    assert context.dispatcher.handle_key_press(focused_field, key)
    assert focused_field.caret == expected
    assert focused_field.text == "abc"


def test_navigation_accepts_plain_ints(context, focused_field):
    focused_field.caret = 0
    assert context.dispatcher.handle_key_press(focused_field, int(Key.END))
    assert focused_field.caret == 3


def test_unknown_keys_not_consumed(context, focused_field):
    for key in (Key.UP, Key.DOWN, Key.TAB, Key.ESCAPE, 0x4000003A):
        assert not context.dispatcher.handle_key_press(focused_field, key)
    assert focused_field.text == "abc"


def test_insert_rejected_at_max_length(context, focused_field):
    focused_field.text = "abcde"
    focused_field.max_length = 5
    focused_field.caret = 2

    assert context.dispatcher.handle_key_press(focused_field, ord("x"))
    assert focused_field.text == "abcde"
    assert focused_field.caret == 2


def test_disabled_field_ignores_keys(context, focused_field):
    focused_field.enabled = False
    assert not context.dispatcher.handle_key_press(focused_field, ord("x"))
    assert focused_field.text == "abc"


def test_return_activates_once(context, focused_field):
    assert context.dispatcher.handle_key_press(focused_field, Key.RETURN)
    assert context.dispatcher.activated(focused_field)
    assert not context.dispatcher.activated(focused_field)


def test_return_twice_still_one_activation(context, focused_field):
    context.dispatcher.handle_key_press(focused_field, Key.RETURN)
    context.dispatcher.handle_key_press(focused_field, Key.RETURN)
    assert context.dispatcher.activated(focused_field)
    assert not context.dispatcher.activated(focused_field)


def test_return_forwarded_when_not_handled(context, focused_field):
    context.config.handles_return = False
    assert not context.dispatcher.handle_key_press(focused_field, Key.RETURN)
    assert not context.dispatcher.activated(focused_field)


def test_activation_cleared_on_focus_loss(context, focused_field, make_control):
    other = context.create_field(make_control())
    context.dispatcher.handle_key_press(focused_field, Key.RETURN)
    context.focus.set_focus(other)
    assert not context.dispatcher.activated(focused_field)


def test_activated_none(context):
    assert not context.dispatcher.activated(None)


def test_text_input(context, focused_field):
    focused_field.caret = 0
    assert context.dispatcher.handle_text_input(focused_field, "xy")
    assert focused_field.text == "xyabc"
    assert focused_field.caret == 2


def test_text_input_stops_at_max_length(context, focused_field):
    focused_field.max_length = 5
    assert context.dispatcher.handle_text_input(focused_field, "1234")
    assert focused_field.text == "abc12"


def test_text_input_requires_focus(context, field):
    assert not context.dispatcher.handle_text_input(field, "x")


def test_click_focuses_and_places_caret(context, field):
    # control at x=100, 10px per char; 121 -> boundary 2
    assert context.dispatcher.handle_mouse_click(field, MouseButton.LEFT, 121, 60)
    assert field.has_focus
    assert field.caret == 2


def test_click_respects_padding(context, make_control):
    field = context.create_field(make_control(x=0, y=0), "abcdef", padding_left=20)
    context.dispatcher.handle_mouse_click(field, MouseButton.LEFT, 41, 5)
    assert field.caret == 2


def test_click_respects_caret_offset(context, make_control):
    context.config.caret_pixel_offset = 4
    field = context.create_field(make_control(x=0, y=0), "abcdef")
    context.dispatcher.handle_mouse_click(field, MouseButton.LEFT, 18, 5)
    assert field.caret == 1


def test_click_past_text_end(context, field):
    field.caret = 0
    context.dispatcher.handle_mouse_click(field, MouseButton.LEFT, 290, 60)
    assert field.caret == 3


def test_click_outside_bounds_focuses_only(context, field):
    field.caret = 1
    assert context.dispatcher.handle_mouse_click(field, MouseButton.LEFT, 5, 5)
    assert field.has_focus
    assert field.caret == 1


def test_click_disabled(context, field):
    field.enabled = False
    assert not context.dispatcher.handle_mouse_click(field, MouseButton.LEFT, 121, 60)
    assert not field.has_focus


def test_click_moves_focus(context, make_control):
    a = context.create_field(make_control(x=0, y=0), "a")
    b = context.create_field(make_control(x=0, y=100), "b")

    context.dispatcher.handle_mouse_click(a, MouseButton.LEFT, 1, 1)
    context.dispatcher.handle_mouse_click(b, MouseButton.LEFT, 1, 101)

    assert not a.has_focus
    assert b.has_focus


def test_click_any(context, field, control):
    assert context.dispatcher.handle_mouse_click_any(control, MouseButton.LEFT, 111, 60)
    assert field.has_focus
    assert field.caret == 1


def test_click_any_unknown_control(context, focused_field, make_control):
    focused_field.caret = 2
    assert not context.dispatcher.handle_mouse_click_any(make_control(), MouseButton.LEFT, 0, 0)
    assert context.focused is focused_field
    assert focused_field.caret == 2
    assert focused_field.text == "abc"


def test_input_resets_blink(context, focused_field):
    context.blink.visible = False
    context.dispatcher.handle_key_press(focused_field, Key.LEFT)
    assert context.blink.visible

    context.blink.visible = False
    assert context.dispatcher.handle_key_press(focused_field, Key.RETURN)
    assert context.blink.visible
