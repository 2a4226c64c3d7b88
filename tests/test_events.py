import string

import pytest

from duckengine.events import (
    CollisionEvent,
    Event,
    KeyDownEvent,
    KeyEvent,
    Key,
    MouseButton,
    MouseClickEvent,
    MouseDownEvent,
    MouseMoveEvent,
    MouseUpEvent,
    PositionedEvent,
    ResizedEvent,
    event_types,
)

SCANCODE_BIT = 1 << 30


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_letter_keys_use_lowercase_codes(letter):
    assert Key(ord(letter)) is Key[letter.upper()]


def test_digit_keys_use_ascii_codes():
    names = ["ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE"]
    assert [Key(ord(d)) for d in string.digits] == [Key[name] for name in names]


def test_key_values_are_unique():
    values = [int(k) for k in Key.__members__.values()]
    assert len(set(values)) == len(values)
    assert all(Key(int(k)) is k for k in Key)


def test_return_and_escape_codes():
    assert Key(ord("\r")) is Key.RETURN
    assert Key(27) is Key.ESCAPE
    assert Key(0) is Key.UNKNOWN


@pytest.mark.parametrize("key", [Key.F1, Key.F12, Key.UP, Key.L_SHIFT, Key.KEYPAD0, Key.CAPS_LOCK])
def test_non_character_keys_carry_scancode_bit(key):
    value = Key(int(key))
    assert value & SCANCODE_BIT == SCANCODE_BIT


def test_function_keys_are_consecutive():
    assert [Key(int(Key.F1) + i) for i in range(12)] == [Key[f"F{i}"] for i in range(1, 13)]


def test_mouse_button_lookup():
    assert MouseButton(1) is MouseButton.LEFT
    assert MouseButton(3) is MouseButton.RIGHT


def test_mouse_down_event_fields():
    event = MouseDownEvent(10, 20, MouseButton.MIDDLE)
    assert (event.x, event.y, event.button) == (10, 20, MouseButton.MIDDLE)
    assert isinstance(event, MouseClickEvent) and isinstance(event, PositionedEvent)


def test_mouse_up_and_down_differ_by_type():
    assert MouseUpEvent(1, 2, MouseButton.LEFT) != MouseDownEvent(1, 2, MouseButton.LEFT)
    assert MouseUpEvent(1, 2, MouseButton.LEFT) == MouseUpEvent(1, 2, MouseButton.LEFT)


def test_mouse_move_event_position():
    event = MouseMoveEvent(5, 7)
    assert (event.x, event.y) == (5, 7)


def test_key_event_defaults():
    event = KeyDownEvent()
    assert event.key is Key.UNKNOWN
    assert (event.control, event.shift, event.alt) == (False, False, False)
    assert isinstance(event, KeyEvent)


def test_resized_event_holds_size():
    event = ResizedEvent(width=640, height=480)
    assert (event.width, event.height) == (640, 480)


def test_positioned_event_requires_coordinates():
    with pytest.raises(TypeError):
        PositionedEvent()


def test_event_types_are_event_subclasses():
    types = event_types()
    assert all(issubclass(cls, Event) for cls in types.values())
    assert types["Event"] is Event


def test_event_types_script_names():
    types = event_types()
    assert types["MouseEvent"] is PositionedEvent
    assert types["CollissionEvent"] is CollisionEvent
    assert types["MouseDownEvent"] is MouseDownEvent


def test_event_types_returns_fresh_mapping():
    first = event_types()
    first.clear()
    assert "QuittingEvent" in event_types()