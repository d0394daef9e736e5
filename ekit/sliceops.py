"""Aggregation, lookup, filtering, mapping and reversal over sequences.

``None`` is accepted wherever a sequence is expected and is treated as
empty, except by the functions that change a list in place.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")
D = TypeVar("D")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

MatchFunc = Callable[[T], bool]


def _items(src: Iterable[T] | None) -> list[T]:
    return list(src) if src is not None else []


def max_of(ts: Iterable[T]) -> T:
    """Return the largest element.

    Raises ValueError when ``ts`` is empty or None. On ties the first
    largest element wins.
    """
    items = _items(ts)
    if not items:
        raise ValueError("max_of requires at least one value")
    return max(items)


def min_of(ts: Iterable[T]) -> T:
    """Return the smallest element.

    Raises ValueError when ``ts`` is empty or None. On ties the first
    smallest element wins.
    """
    items = _items(ts)
    if not items:
        raise ValueError("min_of requires at least one value")
    return min(items)


def sum_of(ts: Iterable[T] | None):
    """Return the sum of the elements; 0 for an empty or None input."""
    return sum(_items(ts))


def filter_delete(
    src: MutableSequence[T], m: Callable[[int, T], bool]
) -> MutableSequence[T]:
    """Remove, in place, every element for which ``m(index, element)`` holds.

    The surviving elements keep their order. The same list is returned.
    """
    src[:] = [item for idx, item in enumerate(src) if not m(idx, item)]
    return src


def find(src: Iterable[T] | None, match: MatchFunc[T]) -> T | None:
    """Return the first element ``match`` accepts, or None if there is none."""
    return next((item for item in _items(src) if match(item)), None)


def find_all(src: Iterable[T] | None, match: MatchFunc[T]) -> list[T]:
    """Return every element ``match`` accepts, in order. Never None."""
    return [item for item in _items(src) if match(item)]


def index(src: Iterable[T] | None, dst: T) -> int:
    """Return the index of the first element equal to ``dst``, or -1."""
    return index_func(src, lambda item: item == dst)


def index_func(src: Iterable[T] | None, match: MatchFunc[T]) -> int:
    """Return the index of the first element ``match`` accepts, or -1."""
    return next((idx for idx, item in enumerate(_items(src)) if match(item)), -1)


def last_index(src: Sequence[T] | None, dst: T) -> int:
    """Return the index of the last element equal to ``dst``, or -1."""
    return last_index_func(src, lambda item: item == dst)


def last_index_func(src: Sequence[T] | None, match: MatchFunc[T]) -> int:
    """Return the index of the last element ``match`` accepts, or -1."""
    items = _items(src)
    return next(
        (idx for idx in reversed(range(len(items))) if match(items[idx])), -1
    )


def index_all(src: Iterable[T] | None, dst: T) -> list[int]:
    """Return the indexes of every element equal to ``dst``."""
    return index_all_func(src, lambda item: item == dst)


def index_all_func(src: Iterable[T] | None, match: MatchFunc[T]) -> list[int]:
    """Return the indexes of every element ``match`` accepts."""
    return [idx for idx, item in enumerate(_items(src)) if match(item)]


def filter_map(
    src: Iterable[T] | None, m: Callable[[int, T], tuple[D, bool]]
) -> list[D]:
    """Map and filter in one pass.

    ``m(index, element)`` returns ``(value, keep)``; ``value`` is collected
    only when ``keep`` is true. Every element is visited either way.
    """
    result: list[D] = []
    for idx, item in enumerate(_items(src)):
        value, keep = m(idx, item)
        if keep:
            result.append(value)
    return result


def map_items(src: Iterable[T] | None, m: Callable[[int, T], D]) -> list[D]:
    """Return ``[m(index, element) for each element]``."""
    return [m(idx, item) for idx, item in enumerate(_items(src))]


def to_map(elements: Iterable[T] | None, fn: Callable[[T], K]) -> dict[K, T]:
    """Build a dict keyed by ``fn(element)``; later elements win on clashes."""
    return to_map_v(elements, lambda element: (fn(element), element))


def to_map_v(
    elements: Iterable[T] | None, fn: Callable[[T], tuple[K, V]]
) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs ``fn`` returns.

    Later elements win when keys clash. Always returns a dict.
    """
    return dict(fn(element) for element in _items(elements))


def reverse(src: Iterable[T] | None) -> list[T]:
    """Return a new list with the elements in reverse order."""
    return _items(src)[::-1]


def reverse_self(src: MutableSequence[T] | None) -> None:
    """Reverse ``src`` in place. A None input is left alone."""
    if src is not None:
        src.reverse()