"""Turning a one-shot iterator into an iterable that can be traversed many times."""

from __future__ import annotations

import copy
import itertools
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["CloningIterable", "into_iterable"]


class CloningIterable(Generic[T]):
    """An iterable built from an iterator.

    Every call to ``iter()`` returns an independent copy of the wrapped
    iterator positioned at its start, so the data can be traversed many
    times even though the underlying iterator could be consumed only once.
    """

    __slots__ = ("_origin",)

    def __init__(self, iterator: Iterable[T]) -> None:
        (self._origin,) = itertools.tee(iterator, 1)

    def __iter__(self) -> Iterator[T]:
        return copy.copy(self._origin)

    def __repr__(self) -> str:
        return "CloningIterable(...)"


def into_iterable(iterator: Iterable[T]) -> CloningIterable[T]:
    """Wrap ``iterator`` into a :class:`CloningIterable`."""
    return CloningIterable(iterator)