import pytest

from reiterables.adapters import Copied, Filtered, Mapped
from reiterables.slicing import (
    Reversed,
    Skipped,
    SkippedWhile,
    SteppedBy,
    Taken,
    TakenWhile,
)

BASE = [1, 3, 7, 2, 8]


def check(values, col):
    assert sum(1 for _ in col) == len(values)
    assert sum(col) == sum(values)
    assert list(col) == values


def cells(values):
    return [[v] for v in values]


def contents(col):
    return list(Mapped(col, lambda c: c[0]))


def bump(col):
    for c in col:
        c[0] += 10


def below(limit):
    return lambda c: c[0] < limit


def above(limit):
    return lambda c: c[0] > limit


# Each case: adapter, its argument on plain values, its argument on cells,
# expected plain result, expected borrowed contents after bump,
# expected owned contents after bump.
CASES = [
    (Skipped, 0, 0, BASE, [11, 13, 17, 12, 18], [11, 13, 17, 12, 18]),
    (Skipped, 2, 2, [7, 2, 8], [1, 3, 17, 12, 18], [17, 12, 18]),
    (Skipped, 5, 10, [], BASE, []),
    (
        SkippedWhile,
        lambda x: x > 100,
        above(100),
        BASE,
        [11, 13, 17, 12, 18],
        [11, 13, 17, 12, 18],
    ),
    (SkippedWhile, lambda x: x < 5, below(5), [7, 2, 8], [1, 3, 17, 12, 18], [17, 12, 18]),
    (SkippedWhile, lambda x: x < 10, below(100), [], BASE, []),
    (SteppedBy, 1, 1, BASE, [11, 13, 17, 12, 18], [11, 13, 17, 12, 18]),
    (SteppedBy, 2, 2, [1, 7, 8], [11, 3, 17, 2, 18], [11, 17, 18]),
    (SteppedBy, 10, 10, [1], [11, 3, 7, 2, 8], [11]),
    (Taken, 0, 0, [], BASE, []),
    (Taken, 2, 2, [1, 3], [11, 13, 7, 2, 8], [11, 13]),
    (Taken, 5, 10, BASE, [11, 13, 17, 12, 18], [11, 13, 17, 12, 18]),
    (TakenWhile, lambda x: x > 100, above(100), [], BASE, []),
    # owned: after the update the leading elements are no longer below 5
    (TakenWhile, lambda x: x < 5, below(5), [1, 3], [11, 13, 7, 2, 8], []),
    (
        TakenWhile,
        lambda x: x < 100,
        below(100),
        BASE,
        [11, 13, 17, 12, 18],
        [11, 13, 17, 12, 18],
    ),
]


@pytest.mark.parametrize("adapter, arg, _cell_arg, expected, _b, _o", CASES)
def test_values(adapter, arg, _cell_arg, expected, _b, _o):
    check(expected, Copied(adapter(BASE, arg)))


@pytest.mark.parametrize("adapter, _arg, cell_arg, _e, borrowed, _o", CASES)
def test_mut(adapter, _arg, cell_arg, _e, borrowed, _o):
    a = cells(BASE)
    bump(adapter(a, cell_arg))
    check(borrowed, contents(a))


@pytest.mark.parametrize("adapter, _arg, cell_arg, _e, _b, owned", CASES)
def test_into(adapter, _arg, cell_arg, _e, _b, owned):
    col = adapter(cells(BASE), cell_arg)
    bump(col)
    check(owned, contents(col))


@pytest.mark.parametrize(
    "adapter, arg, error",
    [
        (Skipped, -1, ValueError),
        (Taken, -3, ValueError),
        (SteppedBy, 0, ValueError),
        (Taken, 1.5, TypeError),
    ],
)
def test_invalid_counts(adapter, arg, error):
    with pytest.raises(error):
        adapter([1, 2, 3], arg)


# reversed


def test_reversed():
    col = Copied(Reversed(BASE))
    assert sum(1 for _ in col) == 5
    assert sum(col) == 21
    assert list(col) == [8, 2, 7, 3, 1]


def test_reversed_mut():
    a = cells(BASE)
    bump(Reversed(a))
    assert list(Reversed(contents(a))) == [18, 12, 17, 13, 11]


def test_into_reversed():
    col = Reversed(cells(BASE))
    bump(col)
    assert contents(col) == [18, 12, 17, 13, 11]


def test_reversed_range():
    assert list(Reversed(range(1, 5))) == [4, 3, 2, 1]


@pytest.mark.parametrize(
    "source",
    [Filtered([1, 2, 3], lambda x: x > 1), iter([1, 2, 3])],
)
def test_reversed_rejects(source):
    with pytest.raises(TypeError):
        Reversed(source)


def test_skipped_while_keeps_later_matches():
    assert list(SkippedWhile([1, 9, 1], lambda x: x < 5)) == [9, 1]


def test_adapters_are_reiterable():
    col = Taken(Skipped(range(10), 2), 3)
    assert list(col) == [2, 3, 4]
    assert list(col) == [2, 3, 4]