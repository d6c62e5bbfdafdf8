"""Keyboard and mouse state tracking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable

import pygame

from .math2d import Vector2


class KeyState(Enum):
    DOWN = auto()
    PRESSED = auto()
    UP = auto()
    NONE = auto()
    END = auto()


class KeyCode(Enum):
    Q = 0
    W = 1
    E = 2
    R = 3
    T = 4
    Y = 5
    U = 6
    I = 7  # noqa: E741
    O = 8  # noqa: E741
    P = 9
    A = 10
    S = 11
    D = 12
    F = 13
    G = 14
    H = 15
    J = 16
    K = 17
    L = 18
    Z = 19
    X = 20
    C = 21
    V = 22
    B = 23
    N = 24
    M = 25
    LEFT = 26
    RIGHT = 27
    DOWN = 28
    UP = 29
    LBUTTON = 30
    RBUTTON = 31
    END = 32


@dataclass
class Key:
    """State of one tracked key."""

    code: KeyCode
    state: KeyState = KeyState.NONE
    pressed: bool = False


class Input:
    """Per-frame key state machine: DOWN, PRESSED, UP, NONE."""

    def __init__(self) -> None:
        self.keys: dict[KeyCode, Key] = {
            code: Key(code) for code in KeyCode if code is not KeyCode.END
        }
        self.mouse_position: Vector2 = Vector2.ONE

    def update(
        self,
        is_down: Callable[[KeyCode], bool],
        focused: bool = True,
        mouse_position: Vector2 | None = None,
    ) -> None:
        """Advance every key using ``is_down``; release all keys when unfocused."""
        if not focused:
            self._clear()
            return
        for key in self.keys.values():
            if is_down(key.code):
                key.state = KeyState.PRESSED if key.pressed else KeyState.DOWN
                key.pressed = True
            else:
                key.state = KeyState.UP if key.pressed else KeyState.NONE
                key.pressed = False
        if mouse_position is not None:
            self.mouse_position = mouse_position

    def _clear(self) -> None:
        for key in self.keys.values():
            if key.state in (KeyState.DOWN, KeyState.PRESSED):
                key.state = KeyState.UP
            elif key.state is KeyState.UP:
                key.state = KeyState.NONE
            key.pressed = False

    def get_key_down(self, code: KeyCode) -> bool:
        return self.keys[code].state is KeyState.DOWN

    def get_key_up(self, code: KeyCode) -> bool:
        return self.keys[code].state is KeyState.UP

    def get_key(self, code: KeyCode) -> bool:
        return self.keys[code].state is KeyState.PRESSED


_KEY_BINDINGS: dict[KeyCode, int] = {
    **{
        code: getattr(pygame, f"K_{code.name.lower()}")
        for code in KeyCode
        if len(code.name) == 1
    },
    KeyCode.LEFT: pygame.K_LEFT,
    KeyCode.RIGHT: pygame.K_RIGHT,
    KeyCode.DOWN: pygame.K_DOWN,
    KeyCode.UP: pygame.K_UP,
}

_BUTTON_INDEX: dict[KeyCode, int] = {KeyCode.LBUTTON: 0, KeyCode.RBUTTON: 2}


def poll(state: tuple[Any, Any]) -> Callable[[KeyCode], bool]:
    """Build a key predicate from ``(keys, buttons)``.

    ``keys`` is indexable by pygame key constants, as returned by
    ``pygame.key.get_pressed()``; ``buttons`` is the tuple returned by
    ``pygame.mouse.get_pressed()``.
    """
    keys, buttons = state

    def is_down(code: KeyCode) -> bool:
        if code in _BUTTON_INDEX:
            return bool(buttons[_BUTTON_INDEX[code]])
        if code not in _KEY_BINDINGS:
            raise KeyError(code)
        return bool(keys[_KEY_BINDINGS[code]])

    return is_down