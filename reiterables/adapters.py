"""Lazy adapters that turn re-iterables into new re-iterables.

Every adapter wraps one or more iterables that can be traversed many times,
such as lists, tuples, ranges or other adapters. Each call to ``iter()`` on
an adapter starts a fresh traversal of the wrapped data, so an adapter can
be iterated as often as needed and always reflects the current contents of
what it wraps.
"""

from __future__ import annotations

import copy
import itertools
from collections.abc import Iterator as IteratorABC
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
)

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "Chained",
    "Cloned",
    "Copied",
    "Enumerated",
    "FilterMapped",
    "Filtered",
    "FlatMapped",
    "Flattened",
    "Fused",
    "Mapped",
    "MappedWhile",
    "Zipped",
]


def _require_reiterable(obj: Any, role: str) -> None:
    """Reject one-shot iterators, which cannot be traversed more than once."""
    if isinstance(obj, IteratorABC):
        raise TypeError(
            f"{role} must be re-iterable, got a one-shot iterator of type "
            f"{type(obj).__name__}; wrap it with into_iterable() first"
        )
    if not isinstance(obj, Iterable):
        raise TypeError(f"{role} must be iterable, got {type(obj).__name__}")


class _Adapter:
    """Validates that the wrapped fields named in ``_wrapped`` are re-iterable."""

    _wrapped: ClassVar[Tuple[str, ...]] = ("source",)

    def __post_init__(self) -> None:
        for role in self._wrapped:
            _require_reiterable(getattr(self, role), role)


@dataclass(frozen=True)
class Chained(_Adapter, Generic[T]):
    """Yields the elements of ``first`` followed by those of ``second``."""

    _wrapped = ("first", "second")

    first: Iterable[T]
    second: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return itertools.chain(self.first, self.second)


@dataclass(frozen=True)
class Cloned(_Adapter, Generic[T]):
    """Yields deep copies of the elements of ``source``."""

    source: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return map(copy.deepcopy, self.source)


@dataclass(frozen=True)
class Copied(_Adapter, Generic[T]):
    """Yields shallow copies of the elements of ``source``."""

    source: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return map(copy.copy, self.source)


@dataclass(frozen=True)
class Enumerated(_Adapter, Generic[T]):
    """Yields ``(index, element)`` pairs of ``source``, counting from zero."""

    source: Iterable[T]

    def __iter__(self) -> Iterator[Tuple[int, T]]:
        return enumerate(self.source)


@dataclass(frozen=True)
class FilterMapped(_Adapter, Generic[T, U]):
    """Maps each element and keeps only the results that are not ``None``."""

    source: Iterable[T]
    function: Callable[[T], Optional[U]]

    def __iter__(self) -> Iterator[U]:
        return (y for y in map(self.function, self.source) if y is not None)


@dataclass(frozen=True)
class Filtered(_Adapter, Generic[T]):
    """Yields the elements of ``source`` for which ``predicate`` holds."""

    source: Iterable[T]
    predicate: Callable[[T], bool]

    def __iter__(self) -> Iterator[T]:
        return filter(self.predicate, self.source)


@dataclass(frozen=True)
class FlatMapped(_Adapter, Generic[T, U]):
    """Maps each element to an iterable and yields the elements of those in turn."""

    source: Iterable[T]
    function: Callable[[T], Iterable[U]]

    def __iter__(self) -> Iterator[U]:
        return itertools.chain.from_iterable(map(self.function, self.source))


@dataclass(frozen=True)
class Flattened(_Adapter, Generic[T]):
    """Yields the elements of each iterable element of ``source`` in turn."""

    source: Iterable[Iterable[T]]

    def __iter__(self) -> Iterator[T]:
        return itertools.chain.from_iterable(self.source)


@dataclass(frozen=True)
class Fused(_Adapter, Generic[T]):
    """Yields the elements of ``source`` and stays exhausted once it ends.

    Even if the wrapped iterator would produce more elements after signalling
    its end, the fused iterator never yields again.
    """

    source: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        yield from self.source


@dataclass(frozen=True)
class Mapped(_Adapter, Generic[T, U]):
    """Yields ``function(element)`` for every element of ``source``."""

    source: Iterable[T]
    function: Callable[[T], U]

    def __iter__(self) -> Iterator[U]:
        return map(self.function, self.source)


@dataclass(frozen=True)
class MappedWhile(_Adapter, Generic[T, U]):
    """Maps elements until ``function`` returns ``None`` for the first time."""

    source: Iterable[T]
    function: Callable[[T], Optional[U]]

    def __iter__(self) -> Iterator[U]:
        for x in self.source:
            y = self.function(x)
            if y is None:
                return
            yield y


@dataclass(frozen=True)
class Zipped(_Adapter, Generic[T, U]):
    """Yields pairs of elements of ``first`` and ``second`` until either ends."""

    _wrapped = ("first", "second")

    first: Iterable[T]
    second: Iterable[U]

    def __iter__(self) -> Iterator[Tuple[T, U]]:
        return zip(self.first, self.second)