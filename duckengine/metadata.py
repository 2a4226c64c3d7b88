"""Engine identity, install locations and behaviour policies."""

from __future__ import annotations

from dataclasses import dataclass

from duckengine.errors import EngineError, ErrorType
from duckengine.host import Platform, get_platform

CRASH_ON_SCRIPT_ERROR = False
"""Whether a failing script handler stops the engine."""


@dataclass(frozen=True)
class EngineMetadata:
    """Names the engine presents itself under."""

    name: str = "DuckEngine"
    full_name: str = "DuckEngineRuntime"
    title: str = "Duck Engine"
    full_title: str = "Duck Engine Runtime"


METADATA = EngineMetadata()

_RUNTIME_DIRS = {
    Platform.WINDOWS: "C:\\Program Files\\DuckEngine",
    Platform.LINUX: "/usr/local/share/DuckEngine/",
    Platform.DARWIN: "/usr/local/share/DuckEngine/",
}

_RUNTIME_LUA_LIB_DIRS = {
    Platform.WINDOWS: "C:\\Program Files\\DuckEngine\\Lib\\Lua",
    Platform.LINUX: "/usr/local/share/DuckEngine/lib/lua",
    Platform.DARWIN: "/usr/local/share/DuckEngine/lib/lua",
}


def _lookup(table: dict[Platform, str], platform: Platform | None) -> str:
    platform = get_platform() if platform is None else platform
    try:
        return table[platform]
    except KeyError:
        raise EngineError(
            ErrorType.UNSUPPORTED_PLATFORM, f"No runtime directory for {platform.name}"
        ) from None


def runtime_dir(platform: Platform | None = None) -> str:
    """The engine's install directory on ``platform`` (the host by default)."""
    return _lookup(_RUNTIME_DIRS, platform)


def runtime_lua_lib_dir(platform: Platform | None = None) -> str:
    """The directory of bundled script libraries on ``platform``."""
    return _lookup(_RUNTIME_LUA_LIB_DIRS, platform)