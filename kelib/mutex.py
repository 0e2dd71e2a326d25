"""A lock that knows which thread holds it."""

from __future__ import annotations

import threading
from typing import Any


class Mutex:
    """Non-reentrant lock that records its owning thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._owner: int | None = None

    @property
    def owner(self) -> int | None:
        """Identifier of the thread holding the lock, or None."""
        return self._owner

    def locked(self) -> bool:
        return self._lock.locked()

    def acquire(self) -> None:
        self._lock.acquire()
        self._owner = threading.get_ident()

    def release(self) -> None:
        if self._owner != threading.get_ident():
            raise RuntimeError("mutex released by a thread that does not own it")
        self._owner = None
        self._lock.release()

    def __enter__(self) -> Mutex:
        self.acquire()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.release()

    def assert_current_thread_owns(self) -> None:
        """Raise AssertionError unless the calling thread holds the lock."""
        if self._owner != threading.get_ident():
            raise AssertionError("current thread does not own the mutex")