import pytest

from megaengine.scene import Scene
from megaengine.scene_manager import SceneManager


class TrackingScene(Scene):
    def __init__(self):
        super().__init__()
        self.events = []

    def initialize(self):
        self.events.append("initialize")

    def update(self):
        self.events.append("update")

    def late_update(self):
        self.events.append("late_update")

    def render(self, surface):
        self.events.append(("render", surface))

    def on_enter(self):
        self.events.append("enter")

    def on_exit(self):
        self.events.append("exit")


def test_create_scene_activates_and_initializes():
    manager = SceneManager()
    scene = manager.create_scene(TrackingScene, "TitleScene")
    assert manager.active_scene is scene
    assert scene.name == "TitleScene"
    assert scene.events == ["initialize"]
    assert manager.scenes == {"TitleScene": scene}


def test_duplicate_name_keeps_first_registration():
    manager = SceneManager()
    first = manager.create_scene(TrackingScene, "MainScene")
    second = manager.create_scene(TrackingScene, "MainScene")
    assert manager.scenes["MainScene"] is first
    assert manager.active_scene is second


def test_load_scene_switches():
    manager = SceneManager()
    title = manager.create_scene(TrackingScene, "TitleScene")
    main = manager.create_scene(TrackingScene, "MainScene")
    loaded = manager.load_scene("TitleScene")
    assert loaded is title
    assert manager.active_scene is title
    assert main.events == ["initialize", "exit"]
    assert title.events == ["initialize", "enter"]


def test_load_unknown_scene_raises_after_exit():
    manager = SceneManager()
    scene = manager.create_scene(TrackingScene, "TitleScene")
    with pytest.raises(KeyError):
        manager.load_scene("Missing")
    assert scene.events[-1] == "exit"


def test_drives_active_scene():
    manager = SceneManager()
    scene = manager.create_scene(TrackingScene, "TitleScene")
    manager.update()
    manager.late_update()
    manager.render("surface")
    assert scene.events == ["initialize", "update", "late_update", ("render", "surface")]


def test_no_active_scene_raises():
    manager = SceneManager()
    with pytest.raises(RuntimeError):
        manager.update()
    with pytest.raises(RuntimeError):
        manager.render(None)