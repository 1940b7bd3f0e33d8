"""Argument packs with type-based selection, named argument bundles and integer literals."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator, Union

__all__ = [
    "Pack",
    "forward_as_pack",
    "get",
    "get_if",
    "select",
    "Kwargs",
    "parse_name",
    "make_kwargs",
    "parse_integral",
]

Matcher = Union[type, "tuple[type, ...]", Callable[[type], Any]]


def _matches(matcher: Matcher, kind: type) -> bool:
    if isinstance(matcher, type):
        return issubclass(kind, matcher)
    if isinstance(matcher, tuple) and all(isinstance(t, type) for t in matcher):
        return issubclass(kind, matcher)
    return bool(matcher(kind))


class Pack:
    """An immutable, indexable bundle of arguments."""

    __slots__ = ("_items",)

    def __init__(self, *args: Any) -> None:
        self._items = args

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Pack(*self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pack):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Pack{self._items!r}"

    def get(self, *args: int) -> Any:
        """Return one element for one index, or a tuple for several."""
        if not args:
            raise TypeError("get() needs at least one index")
        if len(args) == 1:
            return self._items[args[0]]
        return tuple(self._items[i] for i in args)

    def selector(self, matcher: Matcher) -> tuple[int, ...]:
        """Indexes of the elements whose type satisfies *matcher*."""
        return tuple(i for i, item in enumerate(self._items) if _matches(matcher, type(item)))

    def get_if(self, matcher: Matcher) -> tuple[Any, ...]:
        """Elements whose type satisfies *matcher*."""
        return tuple(self._items[i] for i in self.selector(matcher))

    def select_indexes(self, *args: Matcher) -> tuple[tuple[int, ...], ...]:
        """Index groups for each matcher, followed by the unselected indexes."""
        selectors = [self.selector(m) for m in args]
        chosen = set().union(*selectors)
        remaining = tuple(i for i in range(len(self._items)) if i not in chosen)
        return (*selectors, remaining)

    def select(self, *args: Matcher) -> tuple[Pack, ...]:
        """Sub-packs for each matcher, followed by a pack of the rest."""
        return tuple(
            Pack(*(self._items[i] for i in group)) for group in self.select_indexes(*args)
        )


def forward_as_pack(*args: Any) -> Pack:
    """Bundle the arguments into a pack."""
    return Pack(*args)


def _require_pack(pack: Any) -> Pack:
    if not isinstance(pack, Pack):
        raise TypeError(f"expected a Pack, got {type(pack).__name__}")
    return pack


def get(index: int, pack: Pack) -> Any:
    """Element at *index* of *pack*."""
    return _require_pack(pack).get(index)


def get_if(matcher: Matcher, pack: Pack) -> tuple[Any, ...]:
    """Elements of *pack* whose type satisfies *matcher*."""
    return _require_pack(pack).get_if(matcher)


def select(pack: Pack, *args: Matcher) -> tuple[Pack, ...]:
    """Split *pack* by matchers; the last pack holds the rest."""
    return _require_pack(pack).select(*args)


class Kwargs(Mapping):
    """Named values, reachable by attribute or by key."""

    __slots__ = ("_values",)

    def __init__(self, **values: Any) -> None:
        object.__setattr__(self, "_values", dict(values))

    def __getattr__(self, name: str) -> Any:
        if name == "_values":
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"Kwargs({inner})"


def parse_name(raw: str) -> str:
    """Extract the name from an entry such as ``" b = 2"``."""
    start = next((i for i, c in enumerate(raw) if c not in " ="), None)
    if start is None:
        start = 0
    end = next((i for i in range(start, len(raw)) if raw[i] in " ="), len(raw))
    return raw[start:end]


def make_kwargs(names: str, *args: Any) -> Kwargs:
    """Pair comma-separated *names* with *args*, in order."""
    entries = names.split(",")
    if len(entries) < len(args):
        raise ValueError(f"{len(args)} values given for {len(entries)} names")
    keys = [parse_name(entry) for entry in entries[: len(args)]]
    if any(not key for key in keys):
        raise ValueError(f"empty name in {names!r}")
    if len(set(keys)) != len(keys):
        raise ValueError(f"duplicate name in {names!r}")
    return Kwargs(**dict(zip(keys, args)))


def parse_integral(text: str) -> int:
    """Parse a string of decimal digits; the empty string is zero."""
    if any(c not in "0123456789" for c in text):
        raise ValueError(f"not a decimal literal: {text!r}")
    digits = text.lstrip("0")
    return int(digits) if digits else 0