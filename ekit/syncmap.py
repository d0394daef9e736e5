"""A thread-safe dictionary with load-or-store style operations."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SyncMap(Generic[K, V]):
    """A dictionary safe to use from several threads.

    A missing key and a key whose value is None are different things: the
    boolean returned by the lookups tells them apart.
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def load(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, True)`` for a stored key, else ``(None, False)``."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def store(self, key: K, value: V) -> None:
        """Set the value for ``key``."""
        with self._lock:
            self._data[key] = value

    def load_or_store(self, key: K, value: V) -> tuple[V, bool]:
        """Return the existing value and True, or store ``value`` and return it with False."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = value
            return value, False

    def load_or_store_func(self, key: K, fn: Callable[[], V]) -> tuple[V, bool]:
        """Like ``load_or_store``, but build the value with ``fn`` only when needed.

        An exception raised by ``fn`` propagates and nothing is stored.
        """
        val, ok = self.load(key)
        if ok:
            return val, True
        return self.load_or_store(key, fn())

    def load_and_delete(self, key: K) -> tuple[V | None, bool]:
        """Remove ``key``, returning its value and whether it was present."""
        with self._lock:
            if key in self._data:
                return self._data.pop(key), True
            return None, False

    def delete(self, key: K) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._data.pop(key, None)

    def range(self, f: Callable[[K, V], bool]) -> None:
        """Call ``f(key, value)`` for each entry; stop when it returns False."""
        with self._lock:
            entries = list(self._data.items())
        for key, value in entries:
            if not f(key, value):
                break