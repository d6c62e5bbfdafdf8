"""Game objects: containers of components."""

from __future__ import annotations

from typing import Any, TypeVar

from .component import Component
from .enums import ComponentType
from .transform import Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """An entity holding at most one component per component slot."""

    def __init__(self) -> None:
        self._slots: list[Component | None] = [None] * ComponentType.END
        self.add_component(Transform)

    @property
    def components(self) -> tuple[Component, ...]:
        """The attached components, in slot order."""
        return tuple(comp for comp in self._slots if comp is not None)

    def add_component(self, component_cls: type[C]) -> C:
        """Create a component, attach it in its slot and return it."""
        component = component_cls()
        component.initialize()
        component.owner = self
        self._slots[component.component_type] = component
        return component

    def get_component(self, component_cls: type[C]) -> C | None:
        """Return the first attached component that is an instance of the class."""
        return next(
            (comp for comp in self.components if isinstance(comp, component_cls)),
            None,
        )

    def initialize(self) -> None:
        for comp in self.components:
            comp.initialize()

    def update(self) -> None:
        for comp in self.components:
            comp.update()

    def late_update(self) -> None:
        for comp in self.components:
            comp.late_update()

    def render(self, surface: Any) -> None:
        for comp in self.components:
            comp.render(surface)