"""Ordered permutations taking the first *n* elements of each full arrangement."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator, TypeVar

__all__ = ["permutations"]

T = TypeVar("T")


def permutations(n: int, iterable: Iterable[T]) -> Iterator[tuple[T, ...]]:
    """Yield the first *n* elements of every arrangement of *iterable*.

    Arrangements are visited in lexicographic order of element positions.
    When *n* is smaller than the number of elements, each prefix appears
    once for every ordering of the remaining elements.
    """
    elements = list(iterable)
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(elements):
        raise ValueError(f"n ({n}) exceeds the number of elements ({len(elements)})")
    return _generate(n, elements)


def _generate(n: int, elements: list[T]) -> Iterator[tuple[T, ...]]:
    for arrangement in itertools.permutations(elements):
        yield arrangement[:n]