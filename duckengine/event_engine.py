"""Translation of window-system events into script events and shared input state."""

from __future__ import annotations

import copy
import enum
import logging
import threading
from collections.abc import Callable

import pygame

from duckengine.errors import EngineError, ErrorType
from duckengine.events import (
    Event,
    LowMemoryEvent,
    MouseButton,
    MouseDownEvent,
    MouseMoveEvent,
    MouseUpEvent,
    QuittingEvent,
)
from duckengine.metadata import CRASH_ON_SCRIPT_ERROR
from duckengine.state import State, Synchronized
from duckengine.vector2 import Vector2

log = logging.getLogger(__name__)

Handler = Callable[[Event], object]


class EventKind(enum.IntEnum):
    """Events a script can register a handler for."""

    QUITTING = 0
    LOW_MEMORY = enum.auto()
    ENTERING_BACKGROUND = enum.auto()
    ENTERED_BACKGROUND = enum.auto()
    ENTERING_FOREGROUND = enum.auto()
    ENTERED_FOREGROUND = enum.auto()
    RESIZED = enum.auto()
    MINIMIZED = enum.auto()
    MAXIMIZED = enum.auto()
    RESTORED = enum.auto()
    MOUSE_ENTERED = enum.auto()
    MOUSE_LEFT = enum.auto()
    FOCUS_GAINED = enum.auto()
    FOCUS_LOST = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    MOUSE_DOWN = enum.auto()
    MOUSE_UP = enum.auto()
    MOUSE_MOVE = enum.auto()
    MOUSE_SCROLL = enum.auto()
    TEXT_INPUT = enum.auto()
    TEXT_EDITING = enum.auto()


_BUTTON_FLAGS = {
    MouseButton.LEFT: "left_button_down",
    MouseButton.RIGHT: "right_button_down",
    MouseButton.MIDDLE: "middle_button_down",
}


def _mouse_button(value: int) -> MouseButton | int:
    try:
        return MouseButton(value)
    except ValueError:
        return value


class EventEngine:
    """Polls window events, keeps the input state current and calls script handlers."""

    def __init__(
        self,
        running: threading.Event,
        state: Synchronized[State],
        crash_on_error: bool = CRASH_ON_SCRIPT_ERROR,
    ) -> None:
        self._running = running
        self._state = state
        self._crash_on_error = crash_on_error
        self._handlers: dict[EventKind, Handler] = {}
        self._dispatch: dict[int, Callable[[pygame.event.Event, State], Event]] = {
            pygame.QUIT: self._on_quit,
            pygame.MOUSEMOTION: self._on_mouse_motion,
            pygame.MOUSEBUTTONDOWN: self._on_mouse_down,
            pygame.MOUSEBUTTONUP: self._on_mouse_up,
            pygame.APP_LOWMEMORY: self._on_low_memory,
        }

    def set_handler(self, kind: EventKind, handler: Handler) -> None:
        """Register the script handler for ``kind``, replacing any earlier one."""
        kind = EventKind(kind)
        if kind in self._handlers:
            log.warning("Overriding script event handler %s", kind.name)
        self._handlers[kind] = handler

    def handle(self, event: pygame.event.Event) -> Event | None:
        """Process one window event; return the script event it raised, if any."""
        state = self._state.copy()
        raised = self._process(event, state)
        self._state.store(state)
        return raised

    def update(self) -> None:
        """Process every pending window event."""
        state = self._state.copy()
        for event in pygame.event.get():
            self._process(event, state)
        self._state.store(state)

    def enable_text_input(self) -> None:
        """Start delivering text input events."""
        pygame.key.start_text_input()

    def disable_text_input(self) -> None:
        """Stop delivering text input events."""
        pygame.key.stop_text_input()

    def _process(self, event: pygame.event.Event, state: State) -> Event | None:
        action = self._dispatch.get(event.type)
        return None if action is None else action(event, state)

    def _raise(self, kind: EventKind, event: Event) -> Event:
        handler = self._handlers.get(kind)
        if handler is None:
            return event
        try:
            handler(event)
        except Exception as exc:
            log.error("Script %s handler failed: %s", kind.name, exc)
            if self._crash_on_error:
                raise EngineError(ErrorType.LUA, str(exc)) from exc
        return event

    def _on_quit(self, event: pygame.event.Event, state: State) -> Event:
        log.debug("Quit requested")
        raised = self._raise(EventKind.QUITTING, QuittingEvent())
        self._running.clear()
        return raised

    def _on_mouse_motion(self, event: pygame.event.Event, state: State) -> Event:
        x, y = event.pos
        state.mouse.position = Vector2(x, y)
        raised = self._raise(
            EventKind.MOUSE_MOVE,
            MouseMoveEvent(state.mouse.position.x, state.mouse.position.y),
        )
        self._state.store(copy.deepcopy(state))
        return raised

    def _set_button(self, state: State, button: int, down: bool) -> None:
        flag = _BUTTON_FLAGS.get(_mouse_button(button))
        if flag is None:
            log.warning("Unknown mouse button: %s", button)
            return
        setattr(state.mouse, flag, down)

    def _on_mouse_down(self, event: pygame.event.Event, state: State) -> Event:
        log.debug("Mouse button down btn=%s", event.button)
        self._set_button(state, event.button, True)
        position = state.mouse.position
        return self._raise(
            EventKind.MOUSE_DOWN,
            MouseDownEvent(position.x, position.y, _mouse_button(event.button)),
        )

    def _on_mouse_up(self, event: pygame.event.Event, state: State) -> Event:
        log.debug("Mouse button up btn=%s", event.button)
        self._set_button(state, event.button, False)
        position = state.mouse.position
        return self._raise(
            EventKind.MOUSE_UP,
            MouseUpEvent(position.x, position.y, _mouse_button(event.button)),
        )

    def _on_low_memory(self, event: pygame.event.Event, state: State) -> Event:
        log.warning("Memory is low!")
        return self._raise(EventKind.LOW_MEMORY, LowMemoryEvent())