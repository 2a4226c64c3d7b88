import threading
from unittest.mock import patch

import pygame
import pytest

from duckengine.errors import EngineError, ErrorType
from duckengine.event_engine import EventEngine, EventKind
from duckengine.events import (
    LowMemoryEvent,
    MouseButton,
    MouseDownEvent,
    MouseMoveEvent,
    MouseUpEvent,
    QuittingEvent,
)
from duckengine.state import State, Synchronized
from duckengine.vector2 import Vector2


@pytest.fixture
def running():
    flag = threading.Event()
    flag.set()
    return flag


@pytest.fixture
def shared():
    return Synchronized(State())


@pytest.fixture
def engine(running, shared):
    return EventEngine(running, shared)


def motion(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0))


def button(kind, number):
    return pygame.event.Event(kind, button=number, pos=(0, 0))


def test_event_kind_order_follows_declaration():
    assert EventKind(0) is EventKind.QUITTING
    assert EventKind(21) is EventKind.TEXT_EDITING
    assert [EventKind(kind.value) for kind in EventKind] == list(EventKind)
    assert len(EventKind) == 22


def test_mouse_motion_updates_position(engine, shared):
    raised = engine.handle(motion(10, 20))
    assert raised == MouseMoveEvent(10, 20)
    assert shared.copy().mouse.position == Vector2(10, 20)


def test_mouse_down_and_up_toggle_left_flag(engine, shared):
    engine.handle(motion(5, 6))
    down = engine.handle(button(pygame.MOUSEBUTTONDOWN, 1))
    assert down == MouseDownEvent(5, 6, MouseButton.LEFT)
    assert shared.copy().mouse.left_button_down is True
    up = engine.handle(button(pygame.MOUSEBUTTONUP, 1))
    assert up == MouseUpEvent(5, 6, MouseButton.LEFT)
    assert shared.copy().mouse.left_button_down is False


@pytest.mark.parametrize(
    "number, flag",
    [(MouseButton.RIGHT, "right_button_down"), (MouseButton.MIDDLE, "middle_button_down")],
)
def test_other_buttons_set_their_flags(engine, shared, number, flag):
    engine.handle(button(pygame.MOUSEBUTTONDOWN, int(number)))
    assert getattr(shared.copy().mouse, flag) is True
    assert shared.copy().mouse.left_button_down is False


def test_unknown_button_leaves_flags_untouched(engine, shared):
    raised = engine.handle(button(pygame.MOUSEBUTTONDOWN, 9))
    mouse = shared.copy().mouse
    assert raised.button == 9
    assert not (mouse.left_button_down or mouse.right_button_down or mouse.middle_button_down)


def test_quit_clears_running_and_calls_handler(engine, running):
    seen = []
    engine.set_handler(EventKind.QUITTING, seen.append)
    raised = engine.handle(pygame.event.Event(pygame.QUIT))
    assert seen == [QuittingEvent()]
    assert raised == QuittingEvent()
    assert not running.is_set()


def test_failing_handler_is_tolerated_by_default(engine, running):
    def broken(event):
        raise RuntimeError("boom")

    engine.set_handler(EventKind.QUITTING, broken)
    raised = engine.handle(pygame.event.Event(pygame.QUIT))
    assert raised == QuittingEvent()
    assert not running.is_set()


def test_failing_handler_crashes_when_asked(running, shared):
    engine = EventEngine(running, shared, crash_on_error=True)

    def broken(event):
        raise RuntimeError("boom")

    engine.set_handler(EventKind.MOUSE_MOVE, broken)
    with pytest.raises(EngineError) as info:
        engine.handle(motion(1, 2))
    assert info.value.kind is ErrorType.LUA
    assert info.value.message == "boom"


def test_set_handler_replaces_previous(engine):
    first, second = [], []
    engine.set_handler(EventKind.LOW_MEMORY, first.append)
    engine.set_handler(EventKind.LOW_MEMORY, second.append)
    engine.handle(pygame.event.Event(pygame.APP_LOWMEMORY))
    assert first == []
    assert second == [LowMemoryEvent()]


def test_unhandled_event_type_raises_nothing(engine, shared):
    assert engine.handle(pygame.event.Event(pygame.USEREVENT)) is None
    assert shared.copy() == State()


def test_update_processes_all_pending_events(engine, shared, running):
    pending = [motion(3, 4), button(pygame.MOUSEBUTTONDOWN, 3), pygame.event.Event(pygame.QUIT)]
    with patch("pygame.event.get", return_value=pending):
        engine.update()
    mouse = shared.copy().mouse
    assert mouse.position == Vector2(3, 4)
    assert mouse.right_button_down is True
    assert not running.is_set()


def test_text_input_toggles():
    engine = EventEngine(threading.Event(), Synchronized(State()))
    with patch("pygame.key.start_text_input") as start, patch("pygame.key.stop_text_input") as stop:
        enabled = engine.enable_text_input()
        assert (start.call_count, stop.call_count) == (1, 0)
        disabled = engine.disable_text_input()
    assert (enabled, disabled) == (None, None)
    assert (start.call_count, stop.call_count) == (1, 1)