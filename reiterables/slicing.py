"""Re-iterable adapters that select, skip or reorder elements by position.

Like the other adapters, each of these wraps an iterable that can be
traversed many times. Every call to ``iter()`` starts a fresh traversal,
so the result always reflects the current contents of the wrapped data.
"""

from __future__ import annotations

import itertools
from collections.abc import Reversible
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Iterable, Iterator, Tuple, TypeVar

from .adapters import _Adapter

T = TypeVar("T")

__all__ = [
    "Reversed",
    "Skipped",
    "SkippedWhile",
    "SteppedBy",
    "Taken",
    "TakenWhile",
]


def _require_count(value: Any, role: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{role} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{role} must be non-negative, got {value}")


def _is_reversible(obj: Any) -> bool:
    if isinstance(obj, Reversible):
        return True
    return hasattr(obj, "__len__") and hasattr(obj, "__getitem__")


class _Counted(_Adapter):
    """Also validates the non-negative integer fields named in ``_counts``."""

    _counts: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        for role in self._counts:
            _require_count(getattr(self, role), role)


@dataclass(frozen=True)
class Reversed(_Adapter, Generic[T]):
    """Yields the elements of ``source`` in reverse order.

    ``source`` must support ``reversed()``: a sequence, a range, or any
    object implementing ``__reversed__``.
    """

    source: Iterable[T]

    def __post_init__(self) -> None:
        super().__post_init__()
        if not _is_reversible(self.source):
            raise TypeError(
                f"source must be reversible, got {type(self.source).__name__}"
            )

    def __iter__(self) -> Iterator[T]:
        return reversed(self.source)  # type: ignore[call-overload]


@dataclass(frozen=True)
class Skipped(_Counted, Generic[T]):
    """Yields the elements of ``source`` after skipping the first ``n``."""

    _counts = ("n",)

    source: Iterable[T]
    n: int

    def __iter__(self) -> Iterator[T]:
        return itertools.islice(self.source, self.n, None)


@dataclass(frozen=True)
class SkippedWhile(_Adapter, Generic[T]):
    """Skips leading elements while ``predicate`` holds, then yields the rest."""

    source: Iterable[T]
    predicate: Callable[[T], bool]

    def __iter__(self) -> Iterator[T]:
        return itertools.dropwhile(self.predicate, self.source)


@dataclass(frozen=True)
class SteppedBy(_Counted, Generic[T]):
    """Yields the first element of ``source`` and then every ``step``-th one."""

    _counts = ("step",)

    source: Iterable[T]
    step: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.step == 0:
            raise ValueError("step must be positive, got 0")

    def __iter__(self) -> Iterator[T]:
        return itertools.islice(self.source, 0, None, self.step)


@dataclass(frozen=True)
class Taken(_Counted, Generic[T]):
    """Yields at most the first ``n`` elements of ``source``."""

    _counts = ("n",)

    source: Iterable[T]
    n: int

    def __iter__(self) -> Iterator[T]:
        return itertools.islice(self.source, self.n)


@dataclass(frozen=True)
class TakenWhile(_Adapter, Generic[T]):
    """Yields leading elements of ``source`` as long as ``predicate`` holds."""

    source: Iterable[T]
    predicate: Callable[[T], bool]

    def __iter__(self) -> Iterator[T]:
        return itertools.takewhile(self.predicate, self.source)