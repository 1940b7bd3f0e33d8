"""An explicit "no value" marker that is falsy and equal only to itself."""

from __future__ import annotations

from typing import Any

__all__ = ["NoneT", "none", "is_none", "void_is_none"]


class NoneT:
    """Marker type for "no value"; every instance is the same singleton."""

    __slots__ = ()
    _instance: NoneT | None = None

    def __new__(cls) -> NoneT:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoneT)

    def __hash__(self) -> int:
        return hash(NoneT)

    def __str__(self) -> str:
        return "none"

    def __repr__(self) -> str:
        return "none"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


none = NoneT()


def is_none(value: Any) -> bool:
    """Return True when *value* is the ``none`` marker."""
    return isinstance(value, NoneT)


def void_is_none(value: Any) -> Any:
    """Map a missing result (``None``) to the ``none`` marker."""
    return none if value is None else value