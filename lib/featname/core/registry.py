"""String-to-class registry of feature extractors."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Dict, Generic, Type, TypeVar

from featname.config.options import check_unique_names

if TYPE_CHECKING:
    from featname.core.extractor import FeatureExtractor

T = TypeVar("T")


class Registry(Generic[T]):
    """Lightweight registry for mapping string identifiers to classes."""

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

    def items(self):
        return self._items.items()


EXTRACTORS: Registry[Type[FeatureExtractor]] = Registry("feature extractor")


def register_extractor(name: str) -> Callable[[T], T]:
    """Register an extractor class and stamp it with ``name``."""
    register = EXTRACTORS.register(name)

    def decorator(cls: T) -> T:
        check_unique_names(cls.options)
        cls.name = name
        return register(cls)

    return decorator
