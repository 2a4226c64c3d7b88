"""Reading a game folder: its ``game.toml`` metadata and ``resources.xml`` table."""

from __future__ import annotations

import logging
import tomllib
import xml.etree.ElementTree as ElementTree
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from duckengine.errors import EngineError, ErrorType
from duckengine.game import (
    Game,
    LuaTarget,
    Metadata,
    Resolution,
    ResourceDef,
    ResourceTable,
    ResourceType,
    TargetPlatform,
)
from duckengine.util import Version

log = logging.getLogger(__name__)

METADATA_FILE = "game.toml"
RESOURCE_FILE = "resources.xml"

_PLATFORMS = {
    "Linux": TargetPlatform.LINUX,
    "MacOS": TargetPlatform.DARWIN,
    "Windows": TargetPlatform.WINDOWS,
}

_LUA_TARGETS = {
    "5.4": LuaTarget.LUA54,
    "5.1": LuaTarget.LUA51,
    "JIT": LuaTarget.LUA_JIT,
}

_RESOURCE_TYPES = {
    "Text": ResourceType.TEXT,
    "Sprite": ResourceType.SPRITE,
    "Music": ResourceType.MUSIC,
    "Sound": ResourceType.SOUND_EFFECT,
    "Font": ResourceType.FONT,
    "Anim": ResourceType.ANIMATION,
}


def _invalid(message: str) -> EngineError:
    log.error(message)
    return EngineError(ErrorType.INVALID_GAME, message)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


_REQUIRED = (
    ("meta", "name", _is_str),
    ("meta", "title", _is_str),
    ("meta", "description", _is_str),
    ("meta", "author", _is_str),
    ("meta", "license", _is_str),
    ("meta", "version", _is_str),
    ("target", "platforms", _is_list),
    ("target", "lua", _is_str),
    ("game", "entry_scene", _is_str),
    ("graphics", "resolution", _is_list),
    ("graphics", "fullscreen", _is_bool),
    ("graphics", "allow_resizing", _is_bool),
    ("audio", "volume", _is_float),
)


def _field(data: Mapping[str, Any], section: str, key: str) -> Any:
    table = data.get(section)
    return table.get(key) if isinstance(table, Mapping) else None


def parse_metadata(data: Mapping[str, Any]) -> Metadata:
    """Validate parsed ``game.toml`` contents and build the game's metadata."""
    for section, key, check in _REQUIRED:
        if not check(_field(data, section, key)):
            raise _invalid(f"Required field `{section}.{key}` is missing")

    meta = Metadata()
    meta.name = data["meta"]["name"]
    meta.title = data["meta"]["title"]
    meta.description = data["meta"]["description"]
    meta.author = data["meta"]["author"]
    meta.license = data["meta"]["license"]

    try:
        meta.version = Version.from_string(data["meta"]["version"])
    except EngineError:
        meta.version = Version.max()
    if meta.version == Version.max():
        raise _invalid("Invalid version format")

    for platform in data["target"]["platforms"]:
        if not isinstance(platform, str):
            raise _invalid("Invalid platform format")
        try:
            meta.target.platforms.append(_PLATFORMS[platform])
        except KeyError:
            raise _invalid(f"Unknown platform: {platform}") from None

    lua_target = data["target"]["lua"]
    try:
        meta.target.lua = _LUA_TARGETS[lua_target]
    except KeyError:
        raise _invalid(f"Unknown lua target: {lua_target}") from None

    meta.game.entry_scene = data["game"]["entry_scene"]

    resolution = data["graphics"]["resolution"]
    if len(resolution) < 2 or not (_is_int(resolution[0]) and _is_int(resolution[1])):
        raise _invalid("Invalid resolution")
    meta.graphics.window_resolution = Resolution(resolution[0], resolution[1])
    meta.graphics.window_fullscreen = data["graphics"]["fullscreen"]
    meta.graphics.window_resizing = data["graphics"]["allow_resizing"]

    meta.audio.volume = data["audio"]["volume"]
    if not 0 <= meta.audio.volume <= 1:
        raise _invalid("The audio volume must be in the range 0-1")

    return meta


def parse_resource_table(text: str) -> ResourceTable:
    """Parse the contents of ``resources.xml`` into a resource table."""
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as exc:
        log.error("Error loading the resource table: %s", exc)
        raise EngineError(ErrorType.IO, f"Error loading the resource table: {exc}") from exc

    if root.tag != "ResourceTable":
        raise _invalid("The root element isn't a resourceTable")

    table = ResourceTable()
    for element in root.iter("Resource"):
        if element not in root:
            continue
        type_name = element.get("type")
        key = element.get("key")
        source = element.get("source")
        if type_name is None or key is None or source is None:
            raise _invalid("The resource is missing a type or key or source")
        try:
            resource_type = _RESOURCE_TYPES[type_name]
        except KeyError:
            raise _invalid(f"Invalid resource type: {type_name}") from None
        table.entries.append(ResourceDef(resource_type, key, source))
    return table


def load_game(path: str | Path) -> Game:
    """Load a game stored as a folder with a metadata file and a resource table."""
    path = Path(path)
    log.debug("Loading game %s", path)

    if not path.exists():
        raise _invalid(f"File doesn't exist: {path}")
    if not path.is_dir():
        raise _invalid("A folder game has to be a folder")
    metadata_path = path / METADATA_FILE
    resource_path = path / RESOURCE_FILE
    if not metadata_path.exists():
        raise _invalid("Missing metadata file")
    if not resource_path.exists():
        raise _invalid("Missing resource table")

    try:
        metadata_bytes = metadata_path.read_bytes()
        resource_text = resource_path.read_text(encoding="utf-8")
    except OSError as exc:
        log.error("Couldn't read game files: %s", exc)
        raise EngineError(ErrorType.IO, str(exc)) from exc

    try:
        data = tomllib.loads(metadata_bytes.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise _invalid(f"Invalid metadata file: {exc}") from exc

    meta = parse_metadata(data)
    resources = parse_resource_table(resource_text)
    return Game(meta=meta, resources=resources)