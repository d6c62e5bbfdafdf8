"""Engine-wide enumerations."""

from enum import IntEnum


class LayerType(IntEnum):
    """Rendering layers; MAX is the number of layer slots in a scene."""

    NONE = 0
    BACKGROUND = 1
    ANIMAL = 2
    PLAYER = 3
    PARTICLE = 4
    MAX = 10


class ComponentType(IntEnum):
    """Component slots held by a game object, in update order."""

    TRANSFORM = 0
    SPRITE_RENDERER = 1
    ANIMATOR = 2
    SCRIPT = 3
    CAMERA = 4
    END = 5


class ResourceType(IntEnum):
    """Kinds of loadable resources."""

    TEXTURE = 0
    AUDIO_CLIP = 1
    ANIMATION = 2
    PREFAB = 3
    END = 4