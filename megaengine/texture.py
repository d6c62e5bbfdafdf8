"""Image textures."""

from __future__ import annotations

import math
import os
from enum import Enum, auto

import pygame

from .enums import ResourceType
from .math2d import Vector2
from .resources import Resource, ResourceLoadError

Color = tuple[int, int, int]


class TextureType(Enum):
    BMP = auto()
    PNG = auto()
    NONE = auto()


class Texture(Resource):
    """An image loaded from a .bmp or .png file."""

    def __init__(self) -> None:
        super().__init__(ResourceType.TEXTURE)
        self.image: pygame.Surface | None = None
        self.texture_type = TextureType.NONE
        self.width = 0
        self.height = 0
        self._keyed: dict[tuple[int, int], pygame.Surface] = {}

    def load(self, path: str | os.PathLike[str]) -> None:
        """Load the image; files with other extensions leave the texture empty."""
        path = os.fspath(path)
        extension = path.rpartition(".")[2]
        if extension not in ("png", "bmp"):
            return
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise ResourceLoadError(f"cannot load image {path!r}") from exc
        self.texture_type = TextureType.PNG if extension == "png" else TextureType.BMP
        self.image = image
        self.width, self.height = image.get_size()
        self._keyed.clear()

    def _keyed_image(self, low: int, high: int) -> pygame.Surface:
        """The image with every pixel whose channels all lie in [low, high] made transparent."""
        cached = self._keyed.get((low, high))
        if cached is not None:
            return cached
        centre = (low + high + 1) // 2
        spread = centre - low + 1
        mask = pygame.mask.from_threshold(
            self.image, (centre, centre, centre, 255), (spread, spread, spread, 255)
        )
        mask.invert()
        keyed = mask.to_surface(setsurface=self.image, unsetcolor=(0, 0, 0, 0))
        self._keyed[(low, high)] = keyed
        return keyed

    def draw(
        self,
        surface: pygame.Surface,
        source: pygame.Rect | tuple[int, int, int, int],
        dest: pygame.Rect | tuple[int, int, int, int],
        *,
        rotation: float = 0.0,
        pivot: Vector2 | None = None,
        color_key: Color | None = None,
        key_range: tuple[int, int] | None = None,
    ) -> pygame.Rect:
        """Stretch part of the image onto a rectangle of ``surface``.

        ``rotation`` is in degrees, clockwise on screen, about ``pivot``
        (the centre of ``dest`` by default). ``color_key`` hides one colour;
        ``key_range`` hides near-grey pixels whose channels lie in the range.
        Returns the area of ``surface`` that was changed.
        """
        if self.image is None:
            raise RuntimeError("texture has no image")
        image = self.image if key_range is None else self._keyed_image(*key_range)
        area = pygame.Rect(source).clip(image.get_rect())
        dest = pygame.Rect(dest)
        frame = pygame.transform.scale(image.subsurface(area), dest.size)
        if color_key is not None:
            frame.set_colorkey(color_key)
        if not rotation:
            return surface.blit(frame, dest.topleft)
        centre = Vector2(*dest.center)
        pivot = centre if pivot is None else pivot
        theta = math.radians(rotation)
        offset = centre - pivot
        x = pivot.x + offset.x * math.cos(theta) - offset.y * math.sin(theta)
        y = pivot.y + offset.x * math.sin(theta) + offset.y * math.cos(theta)
        rotated = pygame.transform.rotate(frame, -rotation)
        return surface.blit(rotated, rotated.get_rect(center=(round(x), round(y))))