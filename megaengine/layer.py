"""Layers: ordered collections of game objects."""

from __future__ import annotations

from typing import Any

from .enums import LayerType
from .game_object import GameObject
from .named import Named


class Layer(Named):
    """Holds game objects and forwards the lifecycle to them in insertion order."""

    def __init__(self) -> None:
        super().__init__()
        self.layer_type = LayerType.NONE
        self.game_objects: list[GameObject] = []

    def initialize(self) -> None:
        for obj in self.game_objects:
            obj.initialize()

    def update(self) -> None:
        for obj in self.game_objects:
            obj.update()

    def late_update(self) -> None:
        for obj in self.game_objects:
            obj.late_update()

    def render(self, surface: Any) -> None:
        for obj in self.game_objects:
            obj.render(surface)

    def add_game_object(self, game_object: GameObject) -> None:
        if game_object is None:
            raise ValueError("cannot add a missing game object to a layer")
        self.game_objects.append(game_object)