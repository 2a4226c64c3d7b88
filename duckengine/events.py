"""Input and window events delivered to game scripts, and the key codes they carry."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_SCANCODE_MASK = 1 << 30


class Key(enum.IntEnum):
    """Keyboard keys, valued by their virtual key code."""

    UNKNOWN = 0
    RETURN = ord("\r")
    ESCAPE = 0x1B
    BACKSPACE = 0x08
    TAB = ord("\t")
    SPACE = ord(" ")
    EXCLAMATION = ord("!")
    QUOTATION = ord('"')
    HASH = ord("#")
    PERCENT = ord("%")
    DOLLAR = ord("$")
    AMPERSAND = ord("&")
    QUOTE = ord("'")
    LEFT_PARENTHESIS = ord("(")
    RIGHT_PARENTHESIS = ord(")")
    ASTERISK = ord("*")
    PLUS = ord("+")
    COMMA = ord(",")
    MINUS = ord("-")
    PERIOD = ord(".")
    SLASH = ord("/")
    ZERO = ord("0")
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")
    FOUR = ord("4")
    FIVE = ord("5")
    SIX = ord("6")
    SEVEN = ord("7")
    EIGHT = ord("8")
    NINE = ord("9")
    COLON = ord(":")
    SEMICOLON = ord(";")
    LESS_THAN = ord("<")
    EQUALS = ord("=")
    GREATER_THAN = ord(">")
    QUESTION = ord("?")
    AT = ord("@")
    LEFT_BRACKET = ord("[")
    BACKSLASH = ord("\\")
    RIGHT_BRACKET = ord("]")
    CARET = ord("^")
    UNDERSCORE = ord("_")
    A = ord("a")
    B = ord("b")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    M = ord("m")
    N = ord("n")
    O = ord("o")  # noqa: E741
    P = ord("p")
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Y = ord("y")
    Z = ord("z")
    CAPS_LOCK = 57 | _SCANCODE_MASK
    F1 = 58 | _SCANCODE_MASK
    F2 = 59 | _SCANCODE_MASK
    F3 = 60 | _SCANCODE_MASK
    F4 = 61 | _SCANCODE_MASK
    F5 = 62 | _SCANCODE_MASK
    F6 = 63 | _SCANCODE_MASK
    F7 = 64 | _SCANCODE_MASK
    F8 = 65 | _SCANCODE_MASK
    F9 = 66 | _SCANCODE_MASK
    F10 = 67 | _SCANCODE_MASK
    F11 = 68 | _SCANCODE_MASK
    F12 = 69 | _SCANCODE_MASK
    PRINT_SCREEN = 70 | _SCANCODE_MASK
    SCROLL_LOCK = 71 | _SCANCODE_MASK
    PAUSE = 72 | _SCANCODE_MASK
    INSERT = 73 | _SCANCODE_MASK
    HOME = 74 | _SCANCODE_MASK
    PAGE_UP = 75 | _SCANCODE_MASK
    DELETE = 0x7F
    END = 77 | _SCANCODE_MASK
    PAGE_DOWN = 78 | _SCANCODE_MASK
    RIGHT = 79 | _SCANCODE_MASK
    LEFT = 80 | _SCANCODE_MASK
    DOWN = 81 | _SCANCODE_MASK
    UP = 82 | _SCANCODE_MASK
    NUM_LOCK_CLEAR = 83 | _SCANCODE_MASK
    KEYPAD_DIVIDE = 84 | _SCANCODE_MASK
    KEYPAD_MULTIPLY = 85 | _SCANCODE_MASK
    KEYPAD_MINUS = 86 | _SCANCODE_MASK
    KEYPAD_PLUS = 87 | _SCANCODE_MASK
    KEYPAD_ENTER = 88 | _SCANCODE_MASK
    KEYPAD1 = 89 | _SCANCODE_MASK
    KEYPAD2 = 90 | _SCANCODE_MASK
    KEYPAD3 = 91 | _SCANCODE_MASK
    KEYPAD4 = 92 | _SCANCODE_MASK
    KEYPAD5 = 93 | _SCANCODE_MASK
    KEYPAD6 = 94 | _SCANCODE_MASK
    KEYPAD7 = 95 | _SCANCODE_MASK
    KEYPAD8 = 96 | _SCANCODE_MASK
    KEYPAD9 = 97 | _SCANCODE_MASK
    KEYPAD0 = 98 | _SCANCODE_MASK
    KEYPAD_PERIOD = 99 | _SCANCODE_MASK
    APPLICATION = 101 | _SCANCODE_MASK
    POWER = 102 | _SCANCODE_MASK
    KEYPAD_EQUALS = 103 | _SCANCODE_MASK
    F13 = 104 | _SCANCODE_MASK
    F14 = 105 | _SCANCODE_MASK
    F15 = 106 | _SCANCODE_MASK
    F16 = 107 | _SCANCODE_MASK
    F17 = 108 | _SCANCODE_MASK
    F18 = 109 | _SCANCODE_MASK
    F19 = 110 | _SCANCODE_MASK
    F20 = 111 | _SCANCODE_MASK
    F21 = 112 | _SCANCODE_MASK
    F22 = 113 | _SCANCODE_MASK
    F23 = 114 | _SCANCODE_MASK
    F24 = 115 | _SCANCODE_MASK
    EXECUTE = 116 | _SCANCODE_MASK
    HELP = 117 | _SCANCODE_MASK
    MENU = 118 | _SCANCODE_MASK
    SELECT = 119 | _SCANCODE_MASK
    STOP = 120 | _SCANCODE_MASK
    AGAIN = 121 | _SCANCODE_MASK
    UNDO = 122 | _SCANCODE_MASK
    CUT = 123 | _SCANCODE_MASK
    COPY = 124 | _SCANCODE_MASK
    PASTE = 125 | _SCANCODE_MASK
    FIND = 126 | _SCANCODE_MASK
    MUTE = 127 | _SCANCODE_MASK
    VOLUME_UP = 128 | _SCANCODE_MASK
    VOLUME_DOWN = 129 | _SCANCODE_MASK
    L_CONTROL = 224 | _SCANCODE_MASK
    L_SHIFT = 225 | _SCANCODE_MASK
    L_ALT = 226 | _SCANCODE_MASK
    R_CONTROL = 228 | _SCANCODE_MASK
    R_SHIFT = 229 | _SCANCODE_MASK
    R_ALT = 230 | _SCANCODE_MASK


class MouseButton(enum.IntEnum):
    """Mouse buttons, valued by their button index."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    EXTRA1 = 4
    EXTRA2 = 5


@dataclass
class Event:
    """Base of every event handed to a script handler."""


@dataclass
class QuittingEvent(Event):
    """The application is asked to quit."""


@dataclass
class LowMemoryEvent(Event):
    """The system is running low on memory."""


@dataclass
class EnteringBackgroundEvent(Event):
    """The application is about to move to the background."""


@dataclass
class EnteredBackgroundEvent(Event):
    """The application moved to the background."""


@dataclass
class EnteringForegroundEvent(Event):
    """The application is about to move to the foreground."""


@dataclass
class EnteredForegroundEvent(Event):
    """The application moved to the foreground."""


@dataclass
class ResizedEvent(Event):
    """The window was resized."""

    width: int = 0
    height: int = 0


@dataclass
class MinimizedEvent(Event):
    """The window was minimized."""


@dataclass
class MaximizedEvent(Event):
    """The window was maximized."""


@dataclass
class RestoredEvent(Event):
    """The window was restored."""


@dataclass
class PositionedEvent(Event):
    """An event that happened at a point of the window."""

    x: int
    y: int


@dataclass
class MouseEnteredEvent(PositionedEvent):
    """The pointer entered the window."""


@dataclass
class MouseLeftEvent(PositionedEvent):
    """The pointer left the window."""


@dataclass
class FocusGainedEvent(Event):
    """The window gained keyboard focus."""


@dataclass
class FocusLostEvent(Event):
    """The window lost keyboard focus."""


@dataclass
class KeyEvent(Event):
    """A key changed state, with the modifiers held at the time."""

    key: Key = Key.UNKNOWN
    control: bool = False
    shift: bool = False
    alt: bool = False


@dataclass
class KeyDownEvent(KeyEvent):
    """A key was pressed."""


@dataclass
class KeyUpEvent(KeyEvent):
    """A key was released."""


@dataclass
class MouseClickEvent(PositionedEvent):
    """A mouse button changed state at a point."""

    button: MouseButton


@dataclass
class MouseDownEvent(MouseClickEvent):
    """A mouse button was pressed."""


@dataclass
class MouseUpEvent(MouseClickEvent):
    """A mouse button was released."""


@dataclass
class MouseMoveEvent(PositionedEvent):
    """The pointer moved."""


@dataclass
class MouseScrollEvent(Event):
    """The mouse wheel was scrolled."""

    x: int = 0
    y: int = 0


@dataclass
class CollisionEvent(PositionedEvent):
    """Two colliders touched at a point."""


_SCRIPT_TYPES: tuple[tuple[str, type[Event]], ...] = (
    ("Event", Event),
    ("QuittingEvent", QuittingEvent),
    ("LowMemoryEvent", LowMemoryEvent),
    ("EnteringBackgroundEvent", EnteringBackgroundEvent),
    ("EnteredBackgroundEvent", EnteredBackgroundEvent),
    ("EnteringForegroundEvent", EnteringForegroundEvent),
    ("EnteredForegroundEvent", EnteredForegroundEvent),
    ("ResizedEvent", ResizedEvent),
    ("MinimizedEvent", MinimizedEvent),
    ("MaximizedEvent", MaximizedEvent),
    ("RestoredEvent", RestoredEvent),
    ("MouseEvent", PositionedEvent),
    ("MouseEnteredEvent", MouseEnteredEvent),
    ("MouseLeftEvent", MouseLeftEvent),
    ("FocusGainedEvent", FocusGainedEvent),
    ("FocusLostEvent", FocusLostEvent),
    ("KeyEvent", KeyEvent),
    ("KeyDownEvent", KeyDownEvent),
    ("KeyUpEvent", KeyUpEvent),
    ("MouseClickEvent", MouseClickEvent),
    ("MouseDownEvent", MouseDownEvent),
    ("MouseUpEvent", MouseUpEvent),
    ("MouseMoveEvent", MouseMoveEvent),
    ("MouseScrollEvent", MouseScrollEvent),
    ("CollissionEvent", CollisionEvent),
)


def event_types() -> dict[str, type[Event]]:
    """The event classes under the names scripts know them by, in registration order."""
    return dict(_SCRIPT_TYPES)