"""Shared runtime state and a lock-protected value holder."""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from duckengine.vector2 import Vector2

T = TypeVar("T")


@dataclass
class MouseState:
    """Pointer position and which buttons are held."""

    position: Vector2 = field(default_factory=Vector2)
    left_button_down: bool = False
    right_button_down: bool = False
    middle_button_down: bool = False


@dataclass
class State:
    """Input state shared between engine parts."""

    mouse: MouseState = field(default_factory=MouseState)


class Synchronized(Generic[T]):
    """A value that is only touched while holding its lock."""

    def __init__(self, value: T) -> None:
        self._lock = threading.Lock()
        self._value = value

    @contextmanager
    def unlock(self) -> Iterator[T]:
        """Hold the lock and yield the value for the duration of the block."""
        with self._lock:
            yield self._value

    def copy(self) -> T:
        """Return an independent copy of the value."""
        with self._lock:
            return copy.deepcopy(self._value)

    def store(self, value: T) -> None:
        """Replace the value."""
        with self._lock:
            self._value = value