"""An ordered, append-only registry of types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, TypeVar

__all__ = ["NotFound", "RegistryEntry", "Registry"]

T = TypeVar("T", bound=type)
R = TypeVar("R")


class NotFound:
    """Type handed to a visitor when the requested index is not registered."""


@dataclass(frozen=True)
class RegistryEntry:
    """A registered type and its display name."""

    type_: type
    name: str


class Registry:
    """Types registered in order; each type gets a stable index.

    Registering the same type again keeps its first index.
    """

    npos = -1
    max_types = 512

    def __init__(self) -> None:
        self._types: list[type] = []
        self._indexes: dict[type, int] = {}

    def add(self, type_: T) -> T:
        """Register *type_* and return it, so this works as a class decorator."""
        if not isinstance(type_, type):
            raise TypeError(f"only types can be registered, got {type_!r}")
        if type_ in self._indexes:
            return type_
        if len(self._types) >= self.max_types:
            raise OverflowError(f"registry is full ({self.max_types} types)")
        self._indexes[type_] = len(self._types)
        self._types.append(type_)
        return type_

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[type]:
        return iter(self._types)

    def has_index(self, index: int) -> bool:
        """True when a type is registered at *index*."""
        return 0 <= index < len(self._types)

    def at(self, index: int) -> type:
        """The type registered at *index*."""
        if not self.has_index(index):
            raise IndexError(f"no type registered at index {index}")
        return self._types[index]

    def index_of(self, type_: type) -> int:
        """Index of *type_*, or ``npos`` when it is not registered."""
        return self._indexes.get(type_, self.npos)

    def visit(self, index: int, fn: Callable[[type], R]) -> R:
        """Call *fn* with the type at *index*, or with ``NotFound``."""
        if self.has_index(index):
            return fn(self._types[index])
        return fn(NotFound)

    def all(self) -> tuple[type, ...]:
        """All registered types, in registration order."""
        return tuple(self._types)

    def contains(self, type_: Any) -> bool:
        """True when *type_* is registered."""
        return isinstance(type_, type) and type_ in self._indexes

    def __contains__(self, type_: Any) -> bool:
        return self.contains(type_)

    def lock(self) -> tuple[RegistryEntry, ...]:
        """Snapshot of the registered types with their names."""
        return tuple(RegistryEntry(t, t.__qualname__) for t in self._types)