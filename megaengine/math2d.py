"""Two-dimensional vector arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __truediv__(self, number: float) -> Vector2:
        if isinstance(number, Vector2):
            return NotImplemented
        return Vector2(self.x / number, self.y / number)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)