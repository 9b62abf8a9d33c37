"""Basic re-iterable sources: empty, single-value and repeating iterables."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

__all__ = [
    "Empty",
    "EmptyCol",
    "Once",
    "OnceCol",
    "Repeat",
    "RepeatN",
    "empty",
    "empty_col",
    "once",
    "once_col",
    "repeat",
    "repeat_n",
]


class Empty(Generic[T]):
    """An iterable which does not yield any element."""

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmptyCol(Empty[T]):
    """A collection without any element."""

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __len__(self) -> int:
        return 0


@dataclass(frozen=True)
class Once(Generic[T]):
    """An iterable which yields a wrapped value exactly once per iteration."""

    value: T

    def __iter__(self) -> Iterator[T]:
        yield self.value


@dataclass
class OnceCol(Generic[T]):
    """A collection holding exactly one element, which may be replaced."""

    value: T

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True)
class Repeat(Generic[T]):
    """An iterable which yields the same value infinitely many times."""

    value: T

    def __iter__(self) -> Iterator[T]:
        return itertools.repeat(self.value)


@dataclass(frozen=True)
class RepeatN(Generic[T]):
    """An iterable which yields the same value ``count`` times."""

    value: T
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")

    def __iter__(self) -> Iterator[T]:
        return itertools.repeat(self.value, self.count)

    def __len__(self) -> int:
        return self.count


def empty() -> Empty:
    """Create an iterable which does not yield any element."""
    return Empty()


def empty_col() -> EmptyCol:
    """Create a collection without any element."""
    return EmptyCol()


def once(value: T) -> Once[T]:
    """Create an iterable which yields only ``value``."""
    return Once(value)


def once_col(value: T) -> OnceCol[T]:
    """Create a collection with a single element ``value``."""
    return OnceCol(value)


def repeat(value: T) -> Repeat[T]:
    """Create an iterable which yields ``value`` forever."""
    return Repeat(value)


def repeat_n(value: T, count: int) -> RepeatN[T]:
    """Create an iterable which yields ``value`` exactly ``count`` times."""
    return RepeatN(value, count)