"""String-to-builder registry for existence oracles."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Dict, Generic, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """Map string identifiers to builders."""

    def __init__(self, kind: str) -> None:
        self._kind = kind
        self._items: Dict[str, T] = {}

    def register(self, name: str) -> Callable[[T], T]:
        """Decorator to register an item under the provided name."""

        def decorator(obj: T) -> T:
            self.add(name, obj)
            return obj

        return decorator

    def add(self, name: str, obj: T) -> None:
        if name in self._items:
            raise ValueError(f"{self._kind!r} '{name}' already registered.")
        self._items[name] = obj

    def get(self, name: str) -> T:
        try:
            return self._items[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._items)) or "<none>"
            raise KeyError(
                f"Unknown {self._kind!r} '{name}'. Available: {available}"
            ) from exc

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def as_mapping(self) -> Mapping[str, T]:
        return dict(self._items)


ORACLES: Registry[Any] = Registry("oracle")


def register_oracle(name: str) -> Callable[[T], T]:
    return ORACLES.register(name)
