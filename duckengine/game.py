"""Description of a loaded game: its metadata and resource table."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

from duckengine.errors import EngineError, ErrorType
from duckengine.host import Platform
from duckengine.util import Version

_UINT_MASK = 0xFFFFFFFF


class TargetPlatform(enum.IntEnum):
    """Platforms a game can declare support for."""

    LINUX = 0
    DARWIN = 1
    WINDOWS = 2


_FROM_HOST = {
    Platform.LINUX: TargetPlatform.LINUX,
    Platform.DARWIN: TargetPlatform.DARWIN,
    Platform.WINDOWS: TargetPlatform.WINDOWS,
}


def target_platform_from_host(platform: Platform) -> TargetPlatform | None:
    """The target platform matching a host platform, or None if there is none."""
    return _FROM_HOST.get(platform)


class LuaTarget(enum.Enum):
    """Script runtime versions a game can target."""

    LUA51 = enum.auto()
    LUA54 = enum.auto()
    LUA_JIT = enum.auto()


@dataclass
class Resolution:
    """Window size in pixels."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        self.width &= _UINT_MASK
        self.height &= _UINT_MASK

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Resolution:
        """Build a resolution from exactly two values, width then height."""
        if len(values) != 2:
            raise EngineError(
                ErrorType.INVALID_FORMAT,
                f"A resolution needs 2 values, got {len(values)}",
            )
        width, height = values
        return cls(width, height)


@dataclass
class TargetMetadata:
    """Platforms and script runtime the game is made for."""

    platforms: list[TargetPlatform] = field(default_factory=list)
    lua: LuaTarget | None = None


@dataclass
class GraphicsMetadata:
    """Window settings requested by the game."""

    window_resolution: Resolution = field(default_factory=Resolution)
    window_fullscreen: bool = False
    window_resizing: bool = False


@dataclass
class AudioMetadata:
    """Audio settings requested by the game."""

    volume: float = -1.0


@dataclass
class GameMetadata:
    """Game-flow settings."""

    entry_scene: str = "<not set>"


@dataclass
class Metadata:
    """Everything a game declares about itself."""

    name: str = "<not set>"
    title: str = "<not set>"
    author: str = "<not set>"
    license: str = "<not set>"
    description: str | None = None
    version: Version = field(default_factory=Version.max)
    game: GameMetadata = field(default_factory=GameMetadata)
    graphics: GraphicsMetadata = field(default_factory=GraphicsMetadata)
    audio: AudioMetadata = field(default_factory=AudioMetadata)
    target: TargetMetadata = field(default_factory=TargetMetadata)


class ResourceType(enum.Enum):
    """Kinds of resources a game can ship."""

    TEXT = enum.auto()
    SPRITE = enum.auto()
    MUSIC = enum.auto()
    SOUND_EFFECT = enum.auto()
    FONT = enum.auto()
    ANIMATION = enum.auto()


@dataclass
class ResourceDef:
    """One entry of the resource table."""

    type: ResourceType
    key: str
    source: str
    lazy: bool = False


@dataclass
class ResourceTable:
    """All resources a game declares."""

    entries: list[ResourceDef] = field(default_factory=list)


@dataclass
class Game:
    """A game: its metadata and its resources."""

    meta: Metadata = field(default_factory=Metadata)
    resources: ResourceTable = field(default_factory=ResourceTable)