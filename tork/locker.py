"""Named exclusive locks."""

from __future__ import annotations

import hashlib
import threading
from abc import ABC, abstractmethod

LOCKER_INMEMORY = "inmemory"
LOCKER_POSTGRES = "postgres"


class LockError(Exception):
    """Raised when a lock cannot be acquired or released."""


class Lock(ABC):
    """A held lock. Usable as a context manager that releases on exit."""

    @abstractmethod
    def release_lock(self) -> None:
        """Release the lock."""

    def __enter__(self) -> Lock:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release_lock()


class Locker(ABC):
    """Hands out exclusive locks by key."""

    @abstractmethod
    def acquire_lock(self, key: str) -> Lock:
        """Acquire the lock for ``key`` or raise LockError if it is held."""


class _InMemoryLock(Lock):
    def __init__(self, key: str, locker: InMemoryLocker) -> None:
        self._key = key
        self._locker = locker

    def release_lock(self) -> None:
        self._locker._release(self._key)


class InMemoryLocker(Locker):
    """A locker whose locks live in this process only."""

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._held: set[str] = set()

    def acquire_lock(self, key: str) -> Lock:
        with self._mutex:
            if key in self._held:
                raise LockError(f"failed to acquire lock for key '{key}'")
            self._held.add(key)
        return _InMemoryLock(key, self)

    def _release(self, key: str) -> None:
        with self._mutex:
            if key not in self._held:
                raise LockError(f"failed to release lock for key '{key}'")
            self._held.remove(key)


def hash_key(key: str) -> int:
    """Map a key to a signed 64-bit integer suitable for advisory locks."""
    digest = hashlib.sha256(key.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=True)