"""Resources and the keyed resource registry."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import TypeVar

from .enums import ResourceType
from .named import Named


class ResourceLoadError(Exception):
    """A resource could not be loaded."""


class Resource(Named, ABC):
    """Something loaded from a path and registered under a name."""

    def __init__(self, resource_type: ResourceType) -> None:
        super().__init__()
        self.resource_type = ResourceType(resource_type)
        self.path = ""

    @abstractmethod
    def load(self, path: str | os.PathLike[str]) -> None:
        """Load the resource from ``path``; raise ResourceLoadError on failure."""


R = TypeVar("R", bound=Resource)


class Resources:
    """Registry of loaded resources by key."""

    def __init__(self) -> None:
        self._resources: dict[str, Resource] = {}

    def find(self, kind: type[R], key: str) -> R | None:
        """Return the resource under ``key`` if it is of the given kind."""
        resource = self._resources.get(key)
        return resource if isinstance(resource, kind) else None

    def load(self, kind: type[R], key: str, path: str | os.PathLike[str]) -> R:
        """Return the resource under ``key``, loading and registering it if absent."""
        existing = self.find(kind, key)
        if existing is not None:
            return existing
        resource = kind()
        resource.load(path)
        resource.name = key
        resource.path = os.fspath(path)
        self._resources.setdefault(key, resource)
        return resource


default_resources = Resources()