"""A blocking first-in first-out queue safe to share between threads."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """FIFO queue whose ``pop`` waits until an item is available."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._ready = threading.Condition()

    def push(self, item: T) -> None:
        """Append ``item`` and wake one waiting consumer."""
        with self._ready:
            self._items.append(item)
            self._ready.notify()

    def pop(self, timeout: Optional[float] = None) -> T:
        """Remove and return the oldest item, waiting while the queue is empty.

        Raises ``queue.Empty`` if ``timeout`` seconds pass with nothing to take.
        """
        with self._ready:
            if not self._ready.wait_for(lambda: self._items, timeout):
                raise queue.Empty
            return self._items.popleft()

    def __len__(self) -> int:
        with self._ready:
            return len(self._items)