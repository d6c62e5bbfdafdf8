"""Camera component and the renderer's main camera."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .component import Component
from .enums import ComponentType
from .game_object import GameObject
from .math2d import Vector2
from .transform import Transform


class Camera(Component):
    """Tracks a view position and converts world positions to screen positions."""

    def __init__(self) -> None:
        super().__init__(ComponentType.CAMERA)
        self.distance: Vector2 = Vector2.ZERO
        self.resolution: Vector2 = Vector2.ZERO
        self.look_position: Vector2 = Vector2.ZERO
        self.target: GameObject | None = None

    def initialize(self) -> None:
        """Take the resolution from the display surface, when one is open."""
        if not pygame.display.get_init():
            return
        display = pygame.display.get_surface()
        if display is not None:
            width, height = display.get_size()
            self.resolution = Vector2(float(width), float(height))

    def update(self) -> None:
        """Recompute the offset between the view centre and the screen centre."""
        if self.target is not None:
            target_transform = self.target.get_component(Transform)
            if target_transform is not None:
                self.look_position = target_transform.position
        if self.owner is not None:
            own_transform = self.owner.get_component(Transform)
            if own_transform is not None:
                self.look_position = own_transform.position
        self.distance = self.look_position - self.resolution / 2.0

    def calculate_position(self, position: Vector2) -> Vector2:
        """Convert a world position to a screen position."""
        return position - self.distance


@dataclass
class _RendererState:
    main_camera: Camera | None = None


_renderer = _RendererState()


def set_main_camera(camera: Camera | None) -> None:
    """Set the camera used by renderers, or clear it with None."""
    _renderer.main_camera = camera


def main_camera() -> Camera | None:
    """The camera used by renderers, if any."""
    return _renderer.main_camera