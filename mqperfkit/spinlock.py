"""A simple mutual-exclusion lock usable as a context manager."""

from __future__ import annotations

import threading
from types import TracebackType


class SpinLock:
    """Mutual-exclusion lock; created unlocked."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def acquire(self) -> bool:
        """Block until the lock is held by the caller."""
        return self._lock.acquire()

    def release(self) -> None:
        """Release the lock; raises RuntimeError if it is not held."""
        self._lock.release()

    def locked(self) -> bool:
        """Whether the lock is currently held."""
        return self._lock.locked()

    def __enter__(self) -> SpinLock:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()