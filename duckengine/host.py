"""Detection of the operating system the engine runs on."""

from __future__ import annotations

import enum
import sys


class Platform(enum.IntEnum):
    """Host operating systems known to the engine."""

    UNKNOWN = 0
    LINUX = 1
    DARWIN = 2
    WINDOWS = 3


def get_platform() -> Platform:
    """Return the platform of the running interpreter."""
    name = sys.platform
    if name == "win32":
        return Platform.WINDOWS
    if name.startswith("linux"):
        return Platform.LINUX
    if name == "darwin":
        return Platform.DARWIN
    return Platform.UNKNOWN