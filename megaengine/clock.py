"""Frame timing."""

from __future__ import annotations

import math
import time
from typing import Any

import pygame


class Clock:
    """Measures the time between frames and draws the frame rate."""

    def __init__(self) -> None:
        self.delta_time: float = 0.0
        self.elapsed: float = 0.0
        self._start: float = 0.0
        self._font: pygame.font.Font | None = None

    def initialize(self, now: float | None = None) -> None:
        """Start timing from ``now`` (seconds), or from the current time."""
        self._start = time.perf_counter() if now is None else now

    def update(self, now: float | None = None) -> None:
        """Record the time elapsed since the previous call."""
        current = time.perf_counter() if now is None else now
        self.delta_time = current - self._start
        self._start = current

    def fps(self) -> float:
        """Frames per second implied by the last frame time."""
        if self.delta_time == 0:
            return math.inf
        return 1.0 / self.delta_time

    def render(self, surface: Any) -> str:
        """Draw the frame rate at (50, 50) on the surface and return the text drawn."""
        self.elapsed += self.delta_time
        rate = self.fps()
        text = f"fps : {int(rate) if math.isfinite(rate) else 0}"
        if not pygame.font.get_init():
            pygame.font.init()
        if self._font is None:
            self._font = pygame.font.Font(None, 24)
        surface.blit(self._font.render(text, True, (0, 0, 0)), (50, 50))
        return text


main_clock = Clock()


def delta_time() -> float:
    """Seconds taken by the last frame of the main clock."""
    return main_clock.delta_time