"""Per-record re-entrant locks.

Stock and order mutations are check-then-write sequences. A ``KeyedLock``
serializes them per record id inside one process.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class KeyedLock:
    """A registry of ``threading.RLock`` objects keyed by record id."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, key: str) -> threading.RLock:
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, *keys: str) -> Iterator[None]:
        """Hold the locks for every key, acquired in sorted order."""
        ordered = sorted({str(key) for key in keys})
        acquired: list[threading.RLock] = []
        try:
            for key in ordered:
                lock = self._lock_for(key)
                lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()

    def reset(self) -> None:
        """Forget every lock (useful between tests)."""
        with self._registry_lock:
            self._locks.clear()


inventory_locks = KeyedLock()
order_locks = KeyedLock()
