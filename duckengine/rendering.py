"""The game window and its drawing surface."""

from __future__ import annotations

import logging
import os

import pygame

from duckengine.config import WINDOWPOS_CENTERED, Config
from duckengine.errors import EngineError, ErrorType
from duckengine.metadata import METADATA

log = logging.getLogger(__name__)

_CLEAR_COLOR = (0, 0, 0)


def _place_window(config: Config) -> None:
    x, y = config.window.x, config.window.y
    if x == WINDOWPOS_CENTERED or y == WINDOWPOS_CENTERED:
        os.environ["SDL_VIDEO_CENTERED"] = "1"
        os.environ.pop("SDL_VIDEO_WINDOW_POS", None)
    else:
        os.environ.pop("SDL_VIDEO_CENTERED", None)
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"


class RenderingEngine:
    """Owns the window and presents a frame on every update."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._closed = False

    @classmethod
    def create(cls, config: Config) -> RenderingEngine:
        """Initialise the media subsystems and open the window described by ``config``."""
        if pygame.get_init():
            raise EngineError(ErrorType.SDL, "SDL was already initialized")

        pygame.init()
        subsystems = (
            ("SDL", pygame.display.get_init()),
            ("SDL Image", pygame.image.get_extended()),
            ("SDL Mixer", pygame.mixer.get_init() is not None),
            ("SDL TTF", pygame.font.get_init()),
        )
        for name, ready in subsystems:
            if not ready:
                log.critical("%s init failed", name)
                pygame.quit()
                raise EngineError(ErrorType.SDL, f"{name} init failed")

        _place_window(config)
        flags = 0
        if config.render.accelerated:
            flags |= pygame.HWSURFACE
        if config.render.vsync:
            flags |= pygame.SCALED
        try:
            surface = pygame.display.set_mode(
                (config.window.width, config.window.height),
                flags,
                vsync=1 if config.render.vsync else 0,
            )
        except pygame.error as exc:
            log.error("Couldn't create window: %s", exc)
            pygame.quit()
            raise EngineError(ErrorType.SDL, str(exc)) from exc

        pygame.display.set_caption(METADATA.full_title)
        surface.fill(_CLEAR_COLOR)
        pygame.display.flip()

        log.info(
            "Using SDL v%s as a rendering backend on %s",
            ".".join(str(part) for part in pygame.version.SDL),
            pygame.display.get_driver(),
        )
        return cls(surface)

    def set_window_title(self, title: str) -> None:
        """Change the window caption."""
        log.debug("Setting the window title to %s", title)
        pygame.display.set_caption(title)

    def update(self) -> None:
        """Clear the frame and present it."""
        if self._closed:
            raise EngineError(ErrorType.INVALID_STATE, "Rendering engine is closed")
        self._surface.fill(_CLEAR_COLOR)
        pygame.display.flip()

    def close(self) -> None:
        """Destroy the window and shut the media subsystems down."""
        if self._closed:
            return
        log.debug("Finalizing rendering engine")
        self._closed = True
        pygame.quit()

    def __enter__(self) -> RenderingEngine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()