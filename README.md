# duckengine

A small 2D game engine runtime built on pygame. It loads a game stored as a
folder, checks that the game declares support for the current platform,
opens a window and runs the main loop until the window is closed or the
engine is shut down.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
duckengine
```

The command loads the game in `~/.duckengine/games/test/` and starts it.
An optional first argument, `trace` or `debug`, selects debug logging;
debug logging is currently always enabled (`FORCE_TRACE` in
`duckengine.engine`). If creating the engine, loading the game or running
it fails, the error is printed to stderr and the process exits with
status 101.

## Game folder layout

A game is a directory holding two files:

- `game.toml` – the game's metadata
- `resources.xml` – the resource table

### `game.toml`

```toml
[meta]
name = "demo"
title = "Demo Game"
description = "A tiny demo"
author = "Someone"
license = "MIT"
version = "1.0.0"

[target]
platforms = ["Linux", "MacOS", "Windows"]
lua = "5.4"          # one of "5.1", "5.4", "JIT"

[game]
entry_scene = "main"

[graphics]
resolution = [800, 600]
fullscreen = false
allow_resizing = true

[audio]
volume = 0.8          # a float between 0 and 1
```

Every field is required and must have the type shown. `version` must start
with `major.minor.patch`; `resolution` needs two integers; `volume` must be
written as a float (`1.0`, not `1`). A game only starts if `platforms`
contains the platform the engine runs on.

### `resources.xml`

```xml
<ResourceTable>
  <Resource type="Sprite" key="player" source="sprites/player.png"/>
  <Resource type="Music" key="theme" source="music/theme.ogg"/>
</ResourceTable>
```

Resource types are `Text`, `Sprite`, `Music`, `Sound`, `Font` and `Anim`.
Only `Resource` elements directly under the root are read; each needs
`type`, `key` and `source` attributes.

## Using the library

```python
from duckengine.engine import Engine, GameFormat
from duckengine.loader import load_game

game = load_game("path/to/game")
print(game.meta.title, game.meta.version)
for resource in game.resources.entries:
    print(resource.type.name, resource.key, resource.source)

with Engine.create(["debug"]) as engine:
    engine.load_game("path/to/game", GameFormat.FOLDER)
    engine.start()
```

`duckengine.loader` also offers `parse_metadata` (for already parsed TOML
data) and `parse_resource_table` (for XML text).

Errors are raised as `duckengine.errors.EngineError`, whose `kind` is an
`ErrorType` such as `INVALID_GAME`, `INVALID_STATE`, `IO` or
`UNSUPPORTED_PLATFORM`.

### Input events

`duckengine.event_engine.EventEngine` turns pygame events into the event
objects of `duckengine.events` and keeps the shared mouse state
(`duckengine.state.State`) up to date. Handlers are plain Python callables
registered per `EventKind`:

```python
from duckengine.event_engine import EventKind

engine.events.set_handler(EventKind.MOUSE_DOWN, lambda event: print(event.button))
```

Quit, mouse motion, mouse button down/up and low-memory events are handled;
a quit event stops the main loop. A handler that raises is logged, and
raises `EngineError` only when the engine is built with `crash_on_error`.

### Other building blocks

- `duckengine.vector2.Vector2` – unsigned 32-bit (x, y) pair with wrapping arithmetic
- `duckengine.util.Version` – `major.minor.patch` version
- `duckengine.binary_buffer.BinaryBuffer` – byte buffer with positional insert and remove
- `duckengine.state.Synchronized` – lock-protected value
- `duckengine.scene` – scenes, entities and colliders
- `duckengine.config.Config` – window and renderer settings
- `duckengine.host.get_platform` and `duckengine.metadata` – host detection, engine names and install directories

## What it does not do

- It runs no game scripts: the `lua` target is read but not checked or used,
  and the entry scene is recorded but not loaded.
- Resources are listed from the resource table but never loaded.
- Each frame only clears the window to black; scenes, entities and sprites
  are data structures, not drawn.
- The `duckengine` command always loads the fixed game folder above; it
  takes no game path.