"""Engine error types and the fatal panic routine."""

from __future__ import annotations

import enum
import os
import sys
from typing import NoReturn

PANIC_EXIT_CODE = 101


class ErrorType(enum.IntEnum):
    """Categories of failures the engine can report."""

    UNKNOWN = 1
    SDL = 2
    INVALID_STATE = 3
    INVALID_GAME = 4
    IO = 5
    INVALID_FORMAT = 6
    UNSUPPORTED_PLATFORM = 7
    UNKNOWN_ENUM_VARIANT = 8
    NOT_IMPLEMENTED = 9
    LUA = 10
    LUA_UNEXPECTED_NIL = 11
    LUA_WRONG_TYPE = 12
    LUA_INIT = 13

    def __str__(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorType.IO: "Io",
    ErrorType.LUA: "Lua",
    ErrorType.SDL: "Sdl",
    ErrorType.LUA_INIT: "Lua initialization",
    ErrorType.UNKNOWN: "Unknown",
    ErrorType.INVALID_GAME: "Invalid game",
    ErrorType.INVALID_STATE: "Invalid state",
    ErrorType.LUA_WRONG_TYPE: "Wrong Lua type",
    ErrorType.INVALID_FORMAT: "Invalid format",
    ErrorType.NOT_IMPLEMENTED: "Not implemented",
    ErrorType.LUA_UNEXPECTED_NIL: "Unexpected `nil` Lua value",
    ErrorType.UNKNOWN_ENUM_VARIANT: "Unknown enum variant",
    ErrorType.UNSUPPORTED_PLATFORM: "Unsupported platform",
}


class EngineError(Exception):
    """An engine failure carrying its category and an optional message."""

    def __init__(self, kind: ErrorType = ErrorType.UNKNOWN, message: str = "") -> None:
        super().__init__(kind, message)
        self.kind = ErrorType(kind)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


def panic(message: str, critical: bool = False) -> NoReturn:
    """Report an unrecoverable failure on stderr and terminate the process.

    A non-critical panic exits with status 101; a critical one aborts.
    """
    print(
        f"\033[41m\033[30mProgram panicked:\033[0m \033[33m{message}\033[0m",
        file=sys.stderr,
        flush=True,
    )
    if not critical:
        raise SystemExit(PANIC_EXIT_CODE)
    os.abort()