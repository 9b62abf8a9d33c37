# reiterables

A Python iterator can be walked over only once. Many tasks need to walk over
the same lazy sequence several times: counting it, summing it, then taking its
minimum. `reiterables` provides sources and adapters that are *iterables*:
every call to `iter()` starts a fresh pass over the data, and nothing is
computed until it is iterated.

The package has no dependencies beyond the standard library.

## Installation

```
pip install reiterables
```

## Sources

`reiterables.sources` provides:

- `empty()`: an `Empty` iterable that yields nothing.
- `empty_col()`: an `EmptyCol`, like `Empty` but with `len()` of 0.
- `once(value)`: a `Once` iterable that yields `value` a single time.
- `once_col(value)`: a `OnceCol` holding just `value`; it has `len()` of 1 and
  its `value` attribute may be replaced.
- `repeat(value)`: a `Repeat` iterable that yields `value` forever.
- `repeat_n(value, count)`: a `RepeatN` iterable that yields `value` exactly
  `count` times and has `len()` of `count`. A negative `count` raises
  `ValueError`.

```python
from reiterables.sources import once, once_col, repeat_n

threes = repeat_n(42, 3)
assert list(threes) == [42, 42, 42]
assert sum(threes) == 126       # iterate again, same result
assert len(threes) == 3

assert list(once(7)) == [7]

single = once_col(42)
single.value += 10
assert list(single) == [52]
```

## Turning an iterator into an iterable

`reiterables.cloning.into_iterable(iterator)` wraps an iterator in a
`CloningIterable`. Each pass works on its own copy of the iterator, starting
from the beginning, so the data can be read many times:

```python
from reiterables.cloning import into_iterable

numbers = [1, 10, 7, 6, 3, 8, 2]
evens = into_iterable(x for x in numbers if x % 2 == 0)

assert sum(1 for _ in evens) == 4
assert sum(evens) == 26
assert min(evens) == 2
assert max(evens) == 10
```

## Adapters

`reiterables.adapters` provides lazy, re-iterable versions of the usual
iterator operations. Each is a frozen dataclass:

| Adapter | Yields |
| --- | --- |
| `Chained(first, second)` | the elements of `first`, then those of `second` |
| `Cloned(source)` | deep copies of the elements |
| `Copied(source)` | shallow copies of the elements |
| `Enumerated(source)` | `(index, element)` pairs, counting from 0 |
| `FilterMapped(source, function)` | `function(x)` for each element, dropping `None` results |
| `Filtered(source, predicate)` | the elements for which `predicate` holds |
| `FlatMapped(source, function)` | the elements of each `function(x)` in turn |
| `Flattened(source)` | the elements of each inner iterable in turn |
| `Fused(source)` | the elements; once finished, it stays finished |
| `Mapped(source, function)` | `function(x)` for each element |
| `MappedWhile(source, function)` | `function(x)` until it first returns `None` |
| `Zipped(first, second)` | pairs from both, until either ends |

`reiterables.slicing` provides adapters that work by position:

| Adapter | Yields |
| --- | --- |
| `Reversed(source)` | the elements in reverse order; `source` must support `reversed()` |
| `Skipped(source, n)` | the elements after the first `n` |
| `SkippedWhile(source, predicate)` | the elements from the first one for which `predicate` fails |
| `SteppedBy(source, step)` | the first element and then every `step`-th one |
| `Taken(source, n)` | at most the first `n` elements |
| `TakenWhile(source, predicate)` | the leading elements for which `predicate` holds |

Adapters read the iterable they wrap again on every pass, so a change to the
wrapped data shows up on the next pass. Because every adapter is itself an
iterable, adapters can be nested:

```python
from reiterables.adapters import Chained, FilterMapped, Filtered, Mapped, Zipped
from reiterables.slicing import Reversed, Skipped, SteppedBy, Taken, TakenWhile
from reiterables.sources import repeat

data = [1, 3, 4, 8, 10]
small = Filtered(data, lambda x: x < 5)
doubled = Mapped(small, lambda x: x * 2)
assert list(doubled) == [2, 6, 8]

data.append(2)
assert list(doubled) == [2, 6, 8, 4]

assert list(Chained([1, 3, 4], (8, 10))) == [1, 3, 4, 8, 10]
assert list(FilterMapped([1, 4, 7, 11], lambda x: str(x) if x % 2 == 0 else None)) == ["4"]
assert list(Zipped([1, 2, 3, 4], [False, True, False])) == [(1, False), (2, True), (3, False)]

values = [1, 3, 7, 2, 8]
assert list(Skipped(values, 2)) == [7, 2, 8]
assert list(SteppedBy(values, 2)) == [1, 7, 8]
assert list(TakenWhile(values, lambda x: x < 5)) == [1, 3]
assert list(Reversed(values)) == [8, 2, 7, 3, 1]

three = Taken(repeat(42), 3)
assert list(three) == [42, 42, 42]
assert sum(three) == 126
```

### Errors

Adapters check their arguments when they are created:

- Wrapping a one-shot iterator (a generator, `iter(...)`, `map(...)` and so
  on) raises `TypeError`, since it could not be traversed twice. Wrap it with
  `into_iterable()` first.
- Wrapping something that is not iterable raises `TypeError`.
- `Reversed` raises `TypeError` if `source` cannot be reversed.
- `Skipped`, `Taken` and `SteppedBy` raise `TypeError` for a count that is not
  an integer and `ValueError` for a negative one; `SteppedBy` also rejects a
  `step` of 0 with `ValueError`.

## What it does not do

Adapters yield values; they do not give write access to the elements of the
data they wrap. To change elements, change the wrapped container itself; the
next pass over any adapter on it sees the change.

## Running the tests

```
pip install -e ".[test]"
pytest
```