"""Components attached to game objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .enums import ComponentType
from .named import Named

if TYPE_CHECKING:
    from .game_object import GameObject


class Component(Named):
    """A unit of behaviour owned by a game object; lifecycle hooks do nothing by default."""

    def __init__(self, component_type: ComponentType) -> None:
        super().__init__()
        self.owner: GameObject | None = None
        self.component_type = ComponentType(component_type)

    def initialize(self) -> None:
        """Prepare the component before it is used."""

    def update(self) -> None:
        """Advance the component by one frame."""

    def late_update(self) -> None:
        """Run after every object has been updated."""

    def render(self, surface: Any) -> None:
        """Draw the component onto the given surface."""


class Script(Component):
    """A component holding game logic, stored in the script slot."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SCRIPT)