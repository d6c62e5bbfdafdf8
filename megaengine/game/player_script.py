"""Behaviour of the player: walk with the arrow keys, water with the left button."""

from __future__ import annotations

from enum import Enum, auto

from ..animator import Animator
from ..app import main_input
from ..clock import delta_time
from ..component import Script
from ..input import Input, KeyCode
from ..math2d import Vector2
from ..transform import Transform

SPEED = 100.0

_WALK_KEYS = (
    (KeyCode.RIGHT, "RightWalk", Vector2(1.0, 0.0)),
    (KeyCode.LEFT, "LeftWalk", Vector2(-1.0, 0.0)),
    (KeyCode.UP, "UpWalk", Vector2(0.0, -1.0)),
    (KeyCode.DOWN, "DownWalk", Vector2(0.0, 1.0)),
)


class PlayerState(Enum):
    IDLE = auto()
    WALK = auto()
    GIVE_WATER = auto()


class PlayerScript(Script):
    """State machine driving the player from keyboard and mouse input."""

    def __init__(self) -> None:
        super().__init__()
        self.state = PlayerState.IDLE
        self.animator: Animator | None = None
        self.input: Input = main_input
        self.target: Vector2 | None = None

    def update(self) -> None:
        if self.animator is None and self.owner is not None:
            self.animator = self.owner.get_component(Animator)
        if self.state is PlayerState.IDLE:
            self._idle()
        elif self.state is PlayerState.WALK:
            self._move()
        elif self.state is PlayerState.GIVE_WATER:
            self._give_water()

    def _require_animator(self) -> Animator:
        if self.animator is None:
            raise RuntimeError("player has no animator")
        return self.animator

    def _idle(self) -> None:
        if self.input.get_key(KeyCode.LBUTTON):
            self.state = PlayerState.GIVE_WATER
            self._require_animator().play_animation("GiveWater", False)
            self.target = self.input.mouse_position
        for code, animation, _ in _WALK_KEYS:
            if self.input.get_key(code):
                self.state = PlayerState.WALK
                self._require_animator().play_animation(animation, True)

    def _move(self) -> None:
        if self.owner is None:
            raise RuntimeError("player script has no owner")
        transform = self.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("player has no transform")
        distance = SPEED * delta_time()
        position = transform.position
        for code, _, step in _WALK_KEYS:
            if self.input.get_key(code):
                position = position + Vector2(step.x * distance, step.y * distance)
        transform.position = position

        if any(self.input.get_key_up(code) for code, _, _ in _WALK_KEYS):
            self.state = PlayerState.IDLE
            self._require_animator().play_animation("Idle", False)

    def _give_water(self) -> None:
        animator = self._require_animator()
        if animator.is_animation_complete():
            self.state = PlayerState.IDLE
            animator.play_animation("Idle", False)