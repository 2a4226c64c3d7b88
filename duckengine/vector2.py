"""Two-dimensional vector of unsigned 32-bit integers."""

from __future__ import annotations

from dataclasses import dataclass

_UINT_MASK = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class Vector2:
    """An (x, y) pair with wrapping unsigned arithmetic, ordered by x then y."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x & _UINT_MASK)
        object.__setattr__(self, "y", self.y & _UINT_MASK)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2) -> Vector2:
        return Vector2(self.x * other.x, self.y * other.y)

    def __floordiv__(self, other: Vector2) -> Vector2:
        return Vector2(self.x // other.x, self.y // other.y)

    def __truediv__(self, other: Vector2) -> Vector2:
        """Component-wise integer division, as for unsigned integers."""
        return self.__floordiv__(other)

    def __mod__(self, other: Vector2) -> Vector2:
        return Vector2(self.x % other.x, self.y % other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"