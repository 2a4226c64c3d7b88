"""Engine configuration and the default key bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

WINDOWPOS_CENTERED = 0x2FFF0000


class DefaultKeybind(enum.Enum):
    """Actions that the engine offers default bindings for."""

    # Movement
    MOVE_FORWARD = enum.auto()
    MOVE_BACKWARD = enum.auto()
    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    JUMP = enum.auto()
    DUCK = enum.auto()
    SPRINT = enum.auto()
    DASH = enum.auto()
    # Combat
    USE_ITEM = enum.auto()
    ATTACK_PRIMARY = enum.auto()
    ATTACK_SECONDARY = enum.auto()
    RELOAD = enum.auto()
    AIM = enum.auto()
    BLOCK = enum.auto()
    # Interaction
    INTERACT = enum.auto()
    OPEN_INVENTORY = enum.auto()
    OPEN_MAP = enum.auto()
    OPEN_QUESTS = enum.auto()
    # System
    EXIT = enum.auto()
    CONFIRM = enum.auto()
    CANCEL = enum.auto()
    QUICK_SAVE = enum.auto()
    QUICK_LOAD = enum.auto()
    SCREENSHOT = enum.auto()
    # UI navigation
    NAVIGATE_UP = enum.auto()
    NAVIGATE_DOWN = enum.auto()
    NAVIGATE_LEFT = enum.auto()
    NAVIGATE_RIGHT = enum.auto()
    SELECT = enum.auto()
    BACK = enum.auto()
    # Meta
    DEBUG_TOGGLE = enum.auto()
    TOGGLE_FULLSCREEN = enum.auto()
    # Contextual / game-specific
    ABILITY1 = enum.auto()
    ABILITY2 = enum.auto()
    ABILITY3 = enum.auto()
    ABILITY4 = enum.auto()
    ABILITY5 = enum.auto()


@dataclass
class WindowConfig:
    """Initial window placement and size."""

    x: int = WINDOWPOS_CENTERED
    y: int = WINDOWPOS_CENTERED
    width: int = 800
    height: int = 600


@dataclass
class RenderConfig:
    """Renderer options."""

    accelerated: bool = True
    vsync: bool = False


@dataclass
class Config:
    """Complete engine configuration."""

    window: WindowConfig = field(default_factory=WindowConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def default(cls) -> Config:
        """The configuration the engine starts with."""
        return cls(
            window=WindowConfig(
                x=WINDOWPOS_CENTERED,
                y=WINDOWPOS_CENTERED,
                width=800,
                height=600,
            ),
            render=RenderConfig(accelerated=True, vsync=False),
        )