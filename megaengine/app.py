"""The application: owns the window, the back buffer and the frame loop."""

from __future__ import annotations

from typing import Callable

import pygame

from .clock import Clock, main_clock
from .input import Input, KeyCode, poll
from .math2d import Vector2
from .scene_manager import SceneManager, default_manager

InputReading = tuple[Callable[[KeyCode], bool], bool, Vector2]

WHITE = (255, 255, 255)

main_input = Input()


def _read_pygame_input() -> InputReading:
    """Sample the keyboard, the mouse buttons, the focus and the cursor from pygame."""
    state = (pygame.key.get_pressed(), pygame.mouse.get_pressed())
    x, y = pygame.mouse.get_pos()
    return poll(state), bool(pygame.key.get_focused()), Vector2(float(x), float(y))


class App:
    """Runs input, timing and the active scene once per frame, drawing to a back buffer."""

    def __init__(
        self,
        input_state: Input | None = None,
        clock: Clock | None = None,
        scenes: SceneManager | None = None,
        read_input: Callable[[], InputReading] | None = None,
    ) -> None:
        self.input = main_input if input_state is None else input_state
        self.clock = main_clock if clock is None else clock
        self.scenes = default_manager if scenes is None else scenes
        self._read_input = _read_pygame_input if read_input is None else read_input
        self.display: pygame.Surface | None = None
        self.back_buffer: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def initialize(self, width: int, height: int) -> None:
        """Open a window of the given size, create the back buffer and start timing."""
        self.width = width
        self.height = height
        self.display = pygame.display.set_mode((width, height))
        self.back_buffer = pygame.Surface((width, height))
        self.clock.initialize()

    def run(self) -> None:
        """Process one frame."""
        self.update()
        self.late_update()
        self.render()

    def update(self) -> None:
        is_down, focused, mouse_position = self._read_input()
        self.input.update(is_down, focused, mouse_position)
        self.clock.update()
        self.scenes.update()

    def late_update(self) -> None:
        self.scenes.late_update()

    def render(self) -> None:
        """Clear the back buffer, draw the frame rate and the scene, then present it."""
        if self.display is None or self.back_buffer is None:
            raise RuntimeError("application is not initialized")
        self.back_buffer.fill(WHITE)
        self.clock.render(self.back_buffer)
        self.scenes.render(self.back_buffer)
        self.display.blit(self.back_buffer, (0, 0))
        pygame.display.flip()