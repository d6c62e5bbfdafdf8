"""Sprite-sheet animations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from .clock import delta_time
from .enums import ResourceType
from .math2d import Vector2
from .resources import Resource, ResourceLoadError
from .texture import Texture, TextureType
from .transform import Transform

if TYPE_CHECKING:
    from .animator import Animator


@dataclass
class Sprite:
    """One frame of a sprite sheet."""

    left_top: Vector2 = Vector2.ZERO
    size: Vector2 = Vector2.ZERO
    offset: Vector2 = Vector2.ZERO
    duration: float = 0.0


class Animation(Resource):
    """A sequence of frames cut from one texture, advanced by frame time."""

    def __init__(self) -> None:
        super().__init__(ResourceType.ANIMATION)
        self.animator: Animator | None = None
        self.texture: Texture | None = None
        self.frames: list[Sprite] = []
        self.index = -1
        self.time = 0.0
        self.complete = False

    def load(self, path: str | os.PathLike[str]) -> None:
        raise ResourceLoadError("animations are built from sprite sheets, not loaded from files")

    def update(self) -> None:
        """Advance to the next frame once the current one has lasted its duration."""
        if self.complete or not self.frames:
            return
        self.time += delta_time()
        if self.frames[self.index].duration < self.time:
            self.time = 0.0
            if self.index < len(self.frames) - 1:
                self.index += 1
            else:
                self.complete = True

    def render(self, surface: pygame.Surface) -> pygame.Rect | None:
        """Draw the current frame centred on the owner's position; return the area drawn."""
        if self.texture is None or self.animator is None or self.animator.owner is None:
            return None
        if not 0 <= self.index < len(self.frames):
            return None
        transform = self.animator.owner.get_component(Transform)
        if transform is None:
            return None
        position, scale = transform.position, transform.scale
        sprite = self.frames[self.index]
        dest = pygame.Rect(
            int(position.x - sprite.size.x / 2.0),
            int(position.y - sprite.size.y / 2.0),
            max(0, int(sprite.size.x * scale.x)),
            max(0, int(sprite.size.y * scale.y)),
        )
        source = pygame.Rect(
            int(sprite.left_top.x), int(sprite.left_top.y), int(sprite.size.x), int(sprite.size.y)
        )
        if self.texture.texture_type is TextureType.BMP:
            return self.texture.draw(surface, source, dest)
        if self.texture.texture_type is TextureType.PNG:
            return self.texture.draw(
                surface,
                source,
                dest,
                rotation=transform.rotation,
                pivot=position,
                key_range=(230, 255),
            )
        return None

    def create_animation(
        self,
        name: str,
        sprite_sheet: Texture | None,
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> None:
        """Append ``sprite_length`` frames laid out left to right from ``left_top``."""
        self.texture = sprite_sheet
        self.frames.extend(
            Sprite(
                left_top=Vector2(left_top.x + size.x * i, left_top.y),
                size=size,
                offset=offset,
                duration=duration,
            )
            for i in range(sprite_length)
        )

    def reset(self) -> None:
        """Return to the first frame."""
        self.time = 0.0
        self.index = 0
        self.complete = False