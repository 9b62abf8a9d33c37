import itertools

import pytest

from reiterables.sources import (
    Empty,
    EmptyCol,
    Once,
    OnceCol,
    Repeat,
    RepeatN,
    empty,
    empty_col,
    once,
    once_col,
    repeat,
    repeat_n,
)


def test_empty():
    it = empty()
    assert isinstance(it, Empty)
    assert sum(1 for _ in it) == 0
    assert sum(it) == 0
    assert list(it) == []


def test_empty_col():
    col = empty_col()
    assert isinstance(col, EmptyCol)
    assert sum(1 for _ in col) == 0
    assert sum(col) == 0
    touched = [x + 10 for x in col]
    assert touched == []
    assert len(col) == 0
    assert sum(col) == 0


def test_once():
    it = once(42)
    assert isinstance(it, Once)
    assert sum(1 for _ in it) == 1
    assert sum(it) == 42
    assert list(it) == [42]


def test_once_can_be_iterated_repeatedly():
    it = once("x")
    assert list(it) == ["x"]
    assert list(it) == ["x"]


def test_once_col():
    col = once_col(42)
    assert isinstance(col, OnceCol)
    assert sum(1 for _ in col) == 1
    assert sum(col) == 42

    col.value += 10

    assert len(col) == 1
    assert sum(col) == 52


def test_repeat():
    it = repeat(42)
    assert isinstance(it, Repeat)
    first = list(itertools.islice(it, 3))
    assert len(first) == 3
    assert sum(first) == 3 * 42
    again = list(itertools.islice(it, 3))
    assert again == [42, 42, 42]


def test_repeat_n():
    it = repeat_n(42, 3)
    assert isinstance(it, RepeatN)
    assert sum(1 for _ in it) == 3
    assert sum(it) == 3 * 42
    assert len(it) == 3


def test_repeat_n_zero():
    it = repeat_n("a", 0)
    assert list(it) == []
    assert len(it) == 0


def test_repeat_n_negative_count_raises():
    with pytest.raises(ValueError):
        repeat_n(1, -1)