"""A small 2D game engine of scenes, layers, game objects and components, drawn with pygame."""

__version__ = "0.1.0"