"""Registry of scenes and the active scene."""

from __future__ import annotations

from typing import Any, TypeVar

from .scene import Scene

S = TypeVar("S", bound=Scene)


class SceneManager:
    """Creates, switches and drives scenes."""

    def __init__(self) -> None:
        self.scenes: dict[str, Scene] = {}
        self.active_scene: Scene | None = None

    def create_scene(self, scene_cls: type[S], name: str) -> S:
        """Create a scene, make it active, initialize it and register it.

        A name that is already registered keeps its first scene.
        """
        scene = scene_cls()
        scene.name = name
        self.active_scene = scene
        scene.initialize()
        self.scenes.setdefault(name, scene)
        return scene

    def load_scene(self, name: str) -> Scene:
        """Leave the active scene and enter the one registered under ``name``."""
        if self.active_scene is not None:
            self.active_scene.on_exit()
        if name not in self.scenes:
            raise KeyError(f"no scene named {name!r}")
        scene = self.scenes[name]
        self.active_scene = scene
        scene.on_enter()
        return scene

    def _active(self) -> Scene:
        if self.active_scene is None:
            raise RuntimeError("no active scene")
        return self.active_scene

    def update(self) -> None:
        self._active().update()

    def late_update(self) -> None:
        self._active().late_update()

    def render(self, surface: Any) -> None:
        self._active().render(surface)


default_manager = SceneManager()