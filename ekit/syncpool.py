"""Object pools: a plain reuse pool and one that caps outstanding objects."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """A thread-safe pool of reusable objects.

    ``get`` hands out a previously returned object when one is available and
    otherwise builds a new one with ``factory``.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._items: deque[T] = deque()
        self._lock = threading.Lock()

    def get(self) -> T:
        """Take an object from the pool, creating one if the pool is empty."""
        with self._lock:
            if self._items:
                return self._items.pop()
        return self._factory()

    def put(self, item: T) -> None:
        """Return an object to the pool for later reuse."""
        with self._lock:
            self._items.append(item)


class LimitPool(Generic[T]):
    """A pool that hands out at most ``max_tokens`` objects at a time.

    Every successful ``get`` consumes a token and every ``put`` gives one
    back, which bounds the memory held by objects taken from the pool.
    """

    def __init__(self, max_tokens: int, factory: Callable[[], T]) -> None:
        self._pool: Pool[T] = Pool(factory)
        self._tokens = max_tokens
        self._lock = threading.Lock()

    def get(self) -> tuple[T | None, bool]:
        """Return ``(item, True)``, or ``(None, False)`` when no token is left."""
        with self._lock:
            if self._tokens <= 0:
                return None, False
            self._tokens -= 1
        return self._pool.get(), True

    def put(self, item: T) -> None:
        """Return an object to the pool and release its token."""
        self._pool.put(item)
        with self._lock:
            self._tokens += 1