"""Behaviour of the cat: sit for a while, then walk in a random direction."""

from __future__ import annotations

import random
from enum import Enum, IntEnum, auto

from ..animator import Animator
from ..clock import delta_time
from ..component import Script
from ..math2d import Vector2
from ..transform import Transform

SPEED = 100.0
STATE_DURATION = 2.0


class CatState(Enum):
    WALK = auto()
    SEAT = auto()
    GROOMING = auto()
    SLEEP = auto()
    WAKE_UP = auto()


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_WALK_ANIMATIONS = {
    Direction.UP: "UpWalk",
    Direction.DOWN: "DownWalk",
    Direction.LEFT: "LeftWalk",
    Direction.RIGHT: "RightWalk",
}

_STEPS = {
    Direction.UP: Vector2(0.0, -1.0),
    Direction.DOWN: Vector2(0.0, 1.0),
    Direction.LEFT: Vector2(-1.0, 0.0),
    Direction.RIGHT: Vector2(1.0, 0.0),
}


class CatScript(Script):
    """Alternates between sitting and walking, two seconds each."""

    def __init__(self) -> None:
        super().__init__()
        self.state = CatState.SEAT
        self.direction = Direction.RIGHT
        self.animator: Animator | None = None
        self.time = 0.0
        self.rng = random.Random()

    def update(self) -> None:
        if self.animator is None and self.owner is not None:
            self.animator = self.owner.get_component(Animator)
        if self.state is CatState.WALK:
            self._move()
        elif self.state is CatState.SEAT:
            self._seat()

    def _play(self, name: str, loop: bool) -> None:
        if self.animator is None:
            raise RuntimeError("cat has no animator")
        self.animator.play_animation(name, loop)

    def _seat(self) -> None:
        self.time += delta_time()
        if self.time >= STATE_DURATION:
            self.state = CatState.WALK
            self.direction = Direction(self.rng.randrange(len(Direction)))
            self._play(_WALK_ANIMATIONS[self.direction], True)
            self.time = 0.0

    def _move(self) -> None:
        self.time += delta_time()
        if self.time >= STATE_DURATION:
            self.state = CatState.SEAT
            self._play("Seat", True)
            self.time = 0.0
        self._translate()

    def _translate(self) -> None:
        if self.owner is None:
            raise RuntimeError("cat script has no owner")
        transform = self.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("cat has no transform")
        step = _STEPS[self.direction]
        distance = SPEED * delta_time()
        transform.position = transform.position + Vector2(
            step.x * distance, step.y * distance
        )