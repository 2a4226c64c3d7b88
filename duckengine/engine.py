"""The engine: wires the window, input and game together and runs the main loop."""

from __future__ import annotations

import enum
import logging
import sys
import threading
from collections.abc import Sequence
from pathlib import Path

from duckengine.config import Config
from duckengine.errors import EngineError, ErrorType, panic
from duckengine.event_engine import EventEngine
from duckengine.game import Game, target_platform_from_host
from duckengine.host import Platform, get_platform
from duckengine.loader import load_game
from duckengine.metadata import METADATA
from duckengine.rendering import RenderingEngine
from duckengine.state import State, Synchronized

log = logging.getLogger("duckengine")

FORCE_TRACE = True
_LOG_FORMAT = "\033[90m%(asctime)s t%(thread)d\033[0m [%(levelname)s] %(message)s"


class GameFormat(enum.Enum):
    """How a game is stored on disk."""

    FOLDER = enum.auto()


def _configure_logging(args: Sequence[str]) -> None:
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)
    level = logging.INFO
    if args and args[0] in ("trace", "debug"):
        level = logging.DEBUG
        log.setLevel(level)
        log.info("%s log level", args[0].capitalize())
    if FORCE_TRACE:
        level = logging.DEBUG
    log.setLevel(level)
    log.debug("Console logger created")


class Engine:
    """Runs one game: loads it, checks the platform and drives the frame loop."""

    def __init__(
        self,
        config: Config,
        rendering: RenderingEngine,
        events: EventEngine,
        running: threading.Event,
        state: Synchronized[State],
    ) -> None:
        self.config = config
        self.rendering = rendering
        self.events = events
        self.running = running
        self.state = state
        self.game: Game | None = None

    @classmethod
    def create(cls, argv: Sequence[str] | None = None) -> Engine:
        """Set up logging, open the window and build the engine parts.

        The first argument, if ``trace`` or ``debug``, selects the log level.
        """
        args = list(argv or ())
        _configure_logging(args)

        config = Config.default()
        running = threading.Event()
        running.set()
        state = Synchronized(State())

        try:
            rendering = RenderingEngine.create(config)
        except EngineError as exc:
            log.error("Creation of the rendering engine failed: %s", exc)
            raise
        events = EventEngine(running, state)
        return cls(config, rendering, events, running, state)

    def load_game(self, path: str | Path, game_format: GameFormat = GameFormat.FOLDER) -> None:
        """Load the game at ``path``; only one game can be loaded."""
        if self.game is not None:
            log.error("Can not load a new game as there already is one loaded.")
            raise EngineError(ErrorType.INVALID_STATE, "Game is already loaded")
        game_format = GameFormat(game_format)
        log.debug("Loading game %s with format %s", path, game_format.name)
        self.game = load_game(path)

    def update(self) -> None:
        """Run one frame: process input, then render."""
        self.events.update()
        self.rendering.update()

    def start(self) -> None:
        """Check the loaded game can run here and loop until shut down."""
        if self.game is None:
            log.error("No game loaded")
            raise EngineError(ErrorType.INVALID_STATE, "No game loaded")

        host = get_platform()
        target = target_platform_from_host(host)
        if target is None:
            log.error("Unknown platform")
            raise EngineError(ErrorType.UNKNOWN_ENUM_VARIANT, "Unknown platform")
        if host is Platform.UNKNOWN or target not in self.game.meta.target.platforms:
            log.critical("Platform not supported!")
            raise EngineError(ErrorType.UNSUPPORTED_PLATFORM, "Platform not supported")

        log.warning("Omitting lua target check")
        self.rendering.set_window_title(f"{self.game.meta.title} - {METADATA.title}")

        log.debug("Entering the main loop")
        while self.running.is_set():
            self.update()

    def shutdown(self) -> None:
        """Ask the main loop to stop."""
        log.debug("Shutting down")
        self.running.clear()

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
        self.rendering.close()


def _default_game_path() -> Path:
    return Path.home() / ".duckengine" / "games" / "test"


def main(argv: Sequence[str] | None = None) -> int:
    """Start the engine on the default test game."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        engine = Engine.create(args)
    except EngineError as exc:
        panic(f"Result isn't ok. Err: {exc}")
    with engine:
        try:
            engine.load_game(_default_game_path(), GameFormat.FOLDER)
            engine.start()
        except EngineError as exc:
            panic(f"Result isn't ok. Err: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())