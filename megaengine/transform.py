"""Position, scale and rotation of a game object."""

from .component import Component
from .enums import ComponentType
from .math2d import Vector2


class Transform(Component):
    """Spatial state of a game object."""

    def __init__(self) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.position: Vector2 = Vector2.ZERO
        self.scale: Vector2 = Vector2.ONE
        self.rotation: float = 0.0