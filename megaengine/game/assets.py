"""Loading of the game's textures."""

from __future__ import annotations

import os
from pathlib import Path

from ..resources import Resources, default_resources
from ..texture import Texture

DEFAULT_DIRECTORY = Path("Resource") / "Img"

TEXTURE_FILES = (
    ("Cat", "Cat.bmp"),
    ("Effect", "effect.png"),
    ("Player", "Player.bmp"),
)


def load_resources(
    directory: str | os.PathLike[str] = DEFAULT_DIRECTORY,
    registry: Resources | None = None,
) -> dict[str, Texture]:
    """Load the game's textures from ``directory`` into the registry and return them by key."""
    registry = default_resources if registry is None else registry
    base = Path(directory)
    return {key: registry.load(Texture, key, base / filename) for key, filename in TEXTURE_FILES}