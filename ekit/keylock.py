"""Reader-writer locks, and a fixed set of them selected by key hash."""

from __future__ import annotations

import threading

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619


def _fnv1a_32(data: bytes) -> int:
    h = _FNV_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h


class RWLock:
    """A reader-writer lock that favours writers.

    Any number of readers may hold the lock together; a writer holds it
    alone. Once a writer is waiting, new readers wait behind it. The lock is
    not tied to a thread: any thread may release it.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self, blocking: bool = True) -> bool:
        """Take a read lock. Without blocking, return False if it is not free."""
        with self._cond:
            if not blocking:
                if self._writer or self._waiting_writers:
                    return False
            else:
                while self._writer or self._waiting_writers:
                    self._cond.wait()
            self._readers += 1
            return True

    def release_read(self) -> None:
        """Release one read lock."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read of an unlocked RWLock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, blocking: bool = True) -> bool:
        """Take the write lock. Without blocking, return False if it is not free."""
        with self._cond:
            if not blocking:
                if self._writer or self._readers:
                    return False
            else:
                self._waiting_writers += 1
                try:
                    while self._writer or self._readers:
                        self._cond.wait()
                finally:
                    self._waiting_writers -= 1
            self._writer = True
            return True

    def release_write(self) -> None:
        """Release the write lock."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write of an unlocked RWLock")
            self._writer = False
            self._cond.notify_all()


class SegmentKeysLock:
    """Locks keys through a fixed number of reader-writer locks.

    Each key maps to one of ``size`` locks by its FNV-1a hash, so distinct
    keys may share a lock. More segments mean less contention and more memory.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be a positive number of segments")
        self._locks = [RWLock() for _ in range(size)]

    def _get_lock(self, key: str) -> RWLock:
        return self._locks[_fnv1a_32(key.encode("utf-8")) % len(self._locks)]

    def rlock(self, key: str) -> None:
        """Take the read lock for ``key``."""
        self._get_lock(key).acquire_read()

    def try_rlock(self, key: str) -> bool:
        """Try to take the read lock for ``key`` without waiting."""
        return self._get_lock(key).acquire_read(blocking=False)

    def runlock(self, key: str) -> None:
        """Release a read lock for ``key``."""
        self._get_lock(key).release_read()

    def lock(self, key: str) -> None:
        """Take the write lock for ``key``."""
        self._get_lock(key).acquire_write()

    def try_lock(self, key: str) -> bool:
        """Try to take the write lock for ``key`` without waiting."""
        return self._get_lock(key).acquire_write(blocking=False)

    def unlock(self, key: str) -> None:
        """Release the write lock for ``key``."""
        self._get_lock(key).release_write()