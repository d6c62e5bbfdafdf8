"""Component drawing a whole texture at the owner's position."""

from __future__ import annotations

import pygame

from .camera import main_camera
from .component import Component
from .enums import ComponentType
from .math2d import Vector2
from .texture import Texture, TextureType
from .transform import Transform


class SpriteRenderer(Component):
    """Draws a texture with its top-left corner at the owner's screen position."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SPRITE_RENDERER)
        self.texture: Texture | None = None
        self.size: Vector2 = Vector2.ONE

    def render(self, surface: pygame.Surface) -> pygame.Rect | None:
        """Draw the texture; return the area drawn."""
        if self.texture is None:
            raise RuntimeError("sprite renderer has no texture")
        if self.owner is None:
            raise RuntimeError("sprite renderer has no owner")
        transform = self.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("owner has no transform")
        position = transform.position
        camera = main_camera()
        if camera is not None:
            position = camera.calculate_position(position)
        texture = self.texture
        dest = pygame.Rect(
            int(position.x),
            int(position.y),
            max(0, int(texture.width * self.size.x * transform.scale.x)),
            max(0, int(texture.height * self.size.y * transform.scale.y)),
        )
        source = (0, 0, texture.width, texture.height)
        if texture.texture_type is TextureType.BMP:
            return texture.draw(surface, source, dest, color_key=(255, 0, 255))
        if texture.texture_type is TextureType.PNG:
            return texture.draw(
                surface, source, dest, rotation=transform.rotation, pivot=position
            )
        return None