"""Scenes: a fixed set of layers."""

from __future__ import annotations

from typing import Any

from .enums import LayerType
from .game_object import GameObject
from .layer import Layer
from .named import Named


class Scene(Named):
    """A scene with one layer per layer slot, processed in slot order."""

    def __init__(self) -> None:
        super().__init__()
        self.layers: list[Layer] = [Layer() for _ in range(LayerType.MAX)]
        self.active: bool = False

    def initialize(self) -> None:
        for layer in self.layers:
            layer.initialize()

    def update(self) -> None:
        for layer in self.layers:
            layer.update()

    def late_update(self) -> None:
        for layer in self.layers:
            layer.late_update()

    def render(self, surface: Any) -> None:
        for layer in self.layers:
            layer.render(surface)

    def add_game_object(self, game_object: GameObject, layer_type: LayerType) -> None:
        self.get_layer(layer_type).add_game_object(game_object)

    def get_layer(self, layer_type: LayerType) -> Layer:
        return self.layers[layer_type]

    def on_enter(self) -> None:
        """Called when the scene becomes active; marks it active."""
        self.active = True

    def on_exit(self) -> None:
        """Called when another scene replaces this one; marks it inactive."""
        self.active = False