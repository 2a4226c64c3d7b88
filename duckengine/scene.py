"""Scenes and the entities they hold."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from duckengine.vector2 import Vector2


class CollisionType(enum.Enum):
    """Shape of a collider."""

    RECTANGULAR = enum.auto()
    CIRCULAR = enum.auto()


@dataclass(frozen=True)
class RectangularCollision:
    """Rectangle collider dimensions."""

    width: int
    height: int


@dataclass(frozen=True)
class CircularCollision:
    """Circle collider dimensions."""

    radius: int


@dataclass(frozen=True)
class Collision:
    """A collider placed relative to its entity."""

    relative_position: Vector2
    type: CollisionType
    data: RectangularCollision | CircularCollision

    def __post_init__(self) -> None:
        expected = (
            RectangularCollision
            if self.type is CollisionType.RECTANGULAR
            else CircularCollision
        )
        if not isinstance(self.data, expected):
            raise ValueError(
                f"{self.type.name.lower()} collision needs {expected.__name__} data"
            )

    @classmethod
    def rectangular(cls, relative_position: Vector2, width: int, height: int) -> Collision:
        """A rectangular collider."""
        return cls(relative_position, CollisionType.RECTANGULAR, RectangularCollision(width, height))

    @classmethod
    def circular(cls, relative_position: Vector2, radius: int) -> Collision:
        """A circular collider."""
        return cls(relative_position, CollisionType.CIRCULAR, CircularCollision(radius))


@dataclass
class Sprite:
    """A drawable texture attached to an entity."""

    texture: Any = None


@dataclass
class Entity:
    """An object in a scene with optional collider and sprite components."""

    id: int
    class_name: str | None = None
    position: Vector2 = field(default_factory=Vector2)
    collision: Collision | None = None
    sprite: Sprite | None = None


@dataclass
class Scene:
    """A collection of entities."""

    class_name: str | None = None
    entities: list[Entity] = field(default_factory=list)