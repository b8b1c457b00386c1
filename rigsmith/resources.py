"""Caches of shared resources that are released once nobody uses them."""

from __future__ import annotations

import weakref
from collections.abc import Callable, Hashable
from typing import Any, ClassVar


class ResourcesHolder:
    """Creates resources by key and hands out the same object while it is alive.

    Resources are made by the custom factory, called as ``factory(key, *args)``,
    or failing that by ``value_type(key, *args)``. Objects that cannot be
    weakly referenced are kept alive by the holder.
    """

    def __init__(
        self,
        value_type: Callable[..., Any] | None = None,
        factory: Callable[..., Any] | None = None,
    ) -> None:
        self.value_type = value_type
        self._factory = factory
        self._resources: dict[Hashable, Callable[[], Any]] = {}
        self.default_resource: Any = None

    def get(self, key: Hashable, *args: Any) -> Any:
        """The live resource for ``key``, creating it if needed."""
        reference = self._resources.get(key)
        if reference is not None:
            existing = reference()
            if existing is not None:
                return existing

        if self._factory is not None:
            result = self._factory(key, *args)
        elif self.value_type is not None:
            result = self.value_type(key, *args)
        else:
            raise TypeError("resource holder has neither a factory nor a value type")

        try:
            self._resources[key] = weakref.ref(result)
        except TypeError:
            self._resources[key] = lambda held=result: held
        return result

    def set_custom_factory(self, factory: Callable[..., Any] | None) -> None:
        self._factory = factory


class ResourceManager:
    """Process-wide holders of loaded resources."""

    _instance: ClassVar[ResourceManager | None] = None

    def __init__(self) -> None:
        self.image_manager = ResourcesHolder()

    @classmethod
    def instance(cls) -> ResourceManager:
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance