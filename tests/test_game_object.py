from megaengine.component import Component, Script
from megaengine.enums import ComponentType
from megaengine.game_object import GameObject
from megaengine.transform import Transform


class RecordingScript(Script):
    def __init__(self):
        super().__init__()
        self.calls = []
        self.owner_at_initialize = "unset"

    def initialize(self):
        self.calls.append("initialize")
        if self.owner_at_initialize == "unset":
            self.owner_at_initialize = self.owner

    def update(self):
        self.calls.append("update")

    def late_update(self):
        self.calls.append("late_update")

    def render(self, surface):
        self.calls.append(("render", surface))


class CameraLike(Component):
    def __init__(self):
        super().__init__(ComponentType.CAMERA)


def test_new_object_has_transform():
    obj = GameObject()
    transform = obj.get_component(Transform)
    assert isinstance(transform, Transform)
    assert transform.owner is obj
    assert obj.components == (transform,)


def test_missing_component_is_none():
    assert GameObject().get_component(Script) is None


def test_add_component_sets_owner_and_initializes():
    obj = GameObject()
    script = obj.add_component(RecordingScript)
    assert script.owner is obj
    assert script.calls == ["initialize"]
    assert script.owner_at_initialize is None
    assert obj.get_component(Script) is script


def test_same_slot_is_replaced():
    obj = GameObject()
    first = obj.add_component(RecordingScript)
    second = obj.add_component(RecordingScript)
    assert obj.get_component(RecordingScript) is second
    assert first not in obj.components


def test_components_in_slot_order():
    obj = GameObject()
    camera = obj.add_component(CameraLike)
    script = obj.add_component(RecordingScript)
    assert obj.components == (obj.get_component(Transform), script, camera)


def test_lifecycle_reaches_components():
    obj = GameObject()
    script = obj.add_component(RecordingScript)
    obj.initialize()
    obj.update()
    obj.late_update()
    surface = object()
    obj.render(surface)
    assert script.calls == ["initialize", "initialize", "update", "late_update", ("render", surface)]