"""A condition variable whose wait can give up after a timeout."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class Cond:
    """A condition variable tied to a lock.

    Waiters are woken in the order they started waiting. ``wait`` accepts a
    timeout and raises TimeoutError when it expires before a wake-up arrives.
    If a wake-up races with the timeout, it is passed on to the next waiter
    so that no signal is lost.

    The lock must be held when calling ``wait``. ``signal`` and ``broadcast``
    may be called with or without it. The condition can also be used as a
    context manager, which takes and releases the lock.
    """

    def __init__(self, lock: Any = None) -> None:
        self.lock = lock if lock is not None else threading.Lock()
        self._mutex = threading.Lock()
        self._waiters: deque[threading.Event] = deque()

    def __enter__(self) -> Cond:
        self.lock.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.lock.release()

    def __copy__(self) -> Cond:
        raise TypeError("Cond cannot be copied")

    def __deepcopy__(self, memo: dict) -> Cond:
        raise TypeError("Cond cannot be copied")

    def wait(self, timeout: float | None = None) -> None:
        """Release the lock, wait for a wake-up, then take the lock again.

        With a timeout in seconds, raise TimeoutError once it expires; the
        lock is held again when the exception leaves. A wake-up may still
        have been delivered just as the timeout fired. Callers should wait
        in a loop that re-checks their condition.
        """
        waiter = threading.Event()
        with self._mutex:
            self._waiters.append(waiter)
        self.lock.release()
        try:
            if waiter.wait(timeout):
                return
            with self._mutex:
                if waiter.is_set():
                    # Woken just as the timeout fired: hand the wake-up on.
                    if self._waiters:
                        self._notify_next()
                else:
                    self._waiters.remove(waiter)
            raise TimeoutError("Cond.wait timed out")
        finally:
            self.lock.acquire()

    def signal(self) -> None:
        """Wake the longest-waiting waiter, if there is one."""
        with self._mutex:
            if self._waiters:
                self._notify_next()

    def broadcast(self) -> None:
        """Wake every waiter."""
        with self._mutex:
            while self._waiters:
                self._notify_next()

    def _notify_next(self) -> None:
        self._waiters.popleft().set()