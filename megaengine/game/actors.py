"""The game's actors."""

from ..game_object import GameObject


class Cat(GameObject):
    """A wandering cat."""


class Player(GameObject):
    """The player character."""