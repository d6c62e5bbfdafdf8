"""Animator component: a set of named animations with playback events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .animation import Animation
from .component import Component
from .enums import ComponentType
from .math2d import Vector2
from .texture import Texture


@dataclass
class Event:
    """An optional callback fired by the animator."""

    callback: Callable[[], Any] | None = None

    def __call__(self) -> None:
        if self.callback is not None:
            self.callback()


@dataclass
class Events:
    """The callbacks of one animation."""

    start_event: Event = field(default_factory=Event)
    complete_event: Event = field(default_factory=Event)
    end_event: Event = field(default_factory=Event)


class Animator(Component):
    """Plays one of its animations at a time, looping if asked."""

    def __init__(self) -> None:
        super().__init__(ComponentType.ANIMATOR)
        self.animations: dict[str, Animation] = {}
        self.events: dict[str, Events] = {}
        self.active_animation: Animation | None = None
        self.loop = False

    def update(self) -> None:
        active = self.active_animation
        if active is None:
            return
        active.update()
        events = self.find_events(active.name)
        if active.complete:
            if events is not None:
                events.complete_event()
            if self.loop:
                active.reset()

    def render(self, surface: Any) -> None:
        if self.active_animation is not None:
            self.active_animation.render(surface)

    def create_animation(
        self,
        name: str,
        sprite_sheet: Texture | None,
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> Animation:
        """Build and register an animation; an existing name is returned unchanged."""
        existing = self.find_animation(name)
        if existing is not None:
            return existing
        animation = Animation()
        animation.name = name
        animation.create_animation(
            name, sprite_sheet, left_top, size, offset, sprite_length, duration
        )
        animation.animator = self
        self.events[name] = Events()
        self.animations[name] = animation
        return animation

    def find_animation(self, name: str) -> Animation | None:
        return self.animations.get(name)

    def play_animation(self, name: str, loop: bool = True) -> None:
        """Switch to the named animation from its first frame; unknown names are ignored."""
        animation = self.find_animation(name)
        if animation is None:
            return
        if self.active_animation is not None:
            current = self.find_events(self.active_animation.name)
            if current is not None:
                current.end_event()
        upcoming = self.find_events(name)
        if upcoming is not None:
            upcoming.start_event()
        self.active_animation = animation
        animation.reset()
        self.loop = loop

    def find_events(self, name: str) -> Events | None:
        return self.events.get(name)

    def _events_for(self, name: str) -> Events:
        events = self.find_events(name)
        if events is None:
            raise KeyError(f"no animation named {name!r}")
        return events

    def start_event(self, name: str) -> Event:
        """The event fired when the named animation starts playing."""
        return self._events_for(name).start_event

    def complete_event(self, name: str) -> Event:
        """The event fired when the named animation reaches its last frame."""
        return self._events_for(name).complete_event

    def end_event(self, name: str) -> Event:
        """The event fired when another animation replaces the named one."""
        return self._events_for(name).end_event

    def is_animation_complete(self) -> bool:
        if self.active_animation is None:
            raise RuntimeError("no animation is playing")
        return self.active_animation.complete