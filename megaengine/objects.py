"""Creation of game objects inside the active scene."""

from __future__ import annotations

from typing import TypeVar

from .enums import LayerType
from .game_object import GameObject
from .math2d import Vector2
from .scene_manager import SceneManager, default_manager
from .transform import Transform

G = TypeVar("G", bound=GameObject)


def instantiate(
    object_cls: type[G],
    layer_type: LayerType,
    position: Vector2 | None = None,
    manager: SceneManager | None = None,
) -> G:
    """Create a game object in a layer of the active scene, optionally placing it."""
    manager = default_manager if manager is None else manager
    scene = manager.active_scene
    if scene is None:
        raise RuntimeError("no active scene to instantiate into")
    game_object = object_cls()
    scene.get_layer(layer_type).add_game_object(game_object)
    if position is not None:
        transform = game_object.get_component(Transform)
        if transform is not None:
            transform.position = position
    return game_object