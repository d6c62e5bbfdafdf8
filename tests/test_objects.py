import pytest

from megaengine.enums import LayerType
from megaengine.game_object import GameObject
from megaengine.math2d import Vector2
from megaengine.objects import instantiate
from megaengine.scene import Scene
from megaengine.scene_manager import SceneManager, default_manager
from megaengine.transform import Transform


class Marker(GameObject):
    pass


def make_manager():
    manager = SceneManager()
    manager.create_scene(Scene, "MainScene")
    return manager


def test_instantiate_adds_to_layer():
    manager = make_manager()
    obj = instantiate(Marker, LayerType.PLAYER, manager=manager)
    assert isinstance(obj, Marker)
    assert manager.active_scene.get_layer(LayerType.PLAYER).game_objects == [obj]


def test_instantiate_without_position_keeps_origin():
    manager = make_manager()
    obj = instantiate(GameObject, LayerType.ANIMAL, manager=manager)
    assert obj.get_component(Transform).position == Vector2.ZERO


def test_instantiate_with_position():
    manager = make_manager()
    obj = instantiate(GameObject, LayerType.NONE, Vector2(540.0, 240.0), manager)
    assert obj.get_component(Transform).position == Vector2(540.0, 240.0)


def test_instantiate_without_active_scene_raises():
    with pytest.raises(RuntimeError):
        instantiate(GameObject, LayerType.NONE, manager=SceneManager())


def test_instantiate_uses_default_manager():
    scene = default_manager.create_scene(Scene, "DefaultScene")
    obj = instantiate(GameObject, LayerType.BACKGROUND)
    assert scene.get_layer(LayerType.BACKGROUND).game_objects[-1] is obj