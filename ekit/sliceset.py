"""Membership and set operations over sequences.

Every operation comes in two forms. The plain form works on hashable
elements and compares them with ``==``. The ``*_func`` form takes a
caller-supplied equality predicate and works on any elements.

``None`` is accepted wherever a sequence is expected and is treated as
empty. Set-like results hold no duplicates.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqualFunc = Callable[[T, T], bool]
MatchFunc = Callable[[T], bool]


def _items(src: Iterable[T] | None) -> list[T]:
    return list(src) if src is not None else []


def _dedupe(data: Iterable[H]) -> list[H]:
    return list(dict.fromkeys(data))


def _dedupe_func(data: Sequence[T], equal: EqualFunc[T]) -> list[T]:
    """Drop duplicates, keeping the last occurrence of each element."""
    return [
        value
        for pos, value in enumerate(data)
        if not any(equal(later, value) for later in data[pos + 1:])
    ]


def contains(src: Iterable[T] | None, dst: T) -> bool:
    """Return True if ``dst`` is an element of ``src``."""
    return contains_func(src, lambda item: item == dst)


def contains_func(src: Iterable[T] | None, equal: MatchFunc[T]) -> bool:
    """Return True if ``equal`` holds for some element of ``src``."""
    return any(equal(item) for item in _items(src))


def contains_any(src: Iterable[H] | None, dst: Iterable[H] | None) -> bool:
    """Return True if ``src`` holds at least one element of ``dst``."""
    present = set(_items(src))
    return any(item in present for item in _items(dst))


def contains_any_func(
    src: Iterable[T] | None, dst: Iterable[T] | None, equal: EqualFunc[T]
) -> bool:
    """Return True if ``src`` holds at least one element of ``dst`` under ``equal``."""
    src_items = _items(src)
    return any(
        equal(s, d) for d in _items(dst) for s in src_items
    )


def contains_all(src: Iterable[H] | None, dst: Iterable[H] | None) -> bool:
    """Return True if ``src`` holds every element of ``dst``."""
    present = set(_items(src))
    return all(item in present for item in _items(dst))


def contains_all_func(
    src: Iterable[T] | None, dst: Iterable[T] | None, equal: EqualFunc[T]
) -> bool:
    """Return True if ``src`` holds every element of ``dst`` under ``equal``."""
    src_items = _items(src)
    return all(
        contains_func(src_items, lambda s, d=d: equal(s, d)) for d in _items(dst)
    )


def diff_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Return the distinct elements of ``src`` that are not in ``dst``.

    The order of the result is not part of the contract.
    """
    excluded = set(_items(dst))
    return [item for item in _dedupe(_items(src)) if item not in excluded]


def diff_set_func(
    src: Iterable[T] | None, dst: Iterable[T] | None, equal: EqualFunc[T]
) -> list[T]:
    """Return the distinct elements of ``src`` not in ``dst`` under ``equal``."""
    dst_items = _items(dst)
    kept = [
        value
        for value in _items(src)
        if not contains_func(dst_items, lambda d, v=value: equal(d, v))
    ]
    return _dedupe_func(kept, equal)


def intersect_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Return the distinct elements present in both ``src`` and ``dst``.

    The order of the result is not part of the contract.
    """
    present = set(_items(src))
    return _dedupe(item for item in _items(dst) if item in present)


def intersect_set_func(
    src: Iterable[T] | None, dst: Iterable[T] | None, equal: EqualFunc[T]
) -> list[T]:
    """Return the distinct elements present in both sequences under ``equal``."""
    src_items = _items(src)
    shared = [
        value
        for value in _items(dst)
        if contains_func(src_items, lambda s, v=value: equal(s, v))
    ]
    return _dedupe_func(shared, equal)


def symmetric_diff_set(
    src: Iterable[H] | None, dst: Iterable[H] | None
) -> list[H]:
    """Return the distinct elements that are in exactly one of the sequences.

    The order of the result is not part of the contract.
    """
    return list(set(_items(src)) ^ set(_items(dst)))


def symmetric_diff_set_func(
    src: Iterable[T] | None, dst: Iterable[T] | None, equal: EqualFunc[T]
) -> list[T]:
    """Return the distinct elements in exactly one sequence under ``equal``."""
    src_items, dst_items = _items(src), _items(dst)
    only_src = [
        value
        for value in src_items
        if not contains_func(dst_items, lambda d, v=value: equal(d, v))
    ]
    only_dst = [
        value
        for value in dst_items
        if not contains_func(src_items, lambda s, v=value: equal(s, v))
    ]
    return _dedupe_func(only_src + only_dst, equal)


def union_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Return the distinct elements present in either sequence.

    The order of the result is not part of the contract.
    """
    return _dedupe([*_items(dst), *_items(src)])


def union_set_func(
    src: Iterable[T] | None, dst: Iterable[T] | None, equal: EqualFunc[T]
) -> list[T]:
    """Return the distinct elements present in either sequence under ``equal``."""
    return _dedupe_func([*_items(dst), *_items(src)], equal)