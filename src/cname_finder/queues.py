"""Closable hand-off queues shared between pipeline threads."""

from __future__ import annotations

import queue
from collections.abc import Iterator
from threading import Lock
from typing import Generic, TypeVar

from .errors import QueueClosedError

T = TypeVar("T")

_CLOSED = object()


class ClosableQueue(Generic[T]):
    """Unbounded FIFO that consumers drain until it is closed.

    ``close()`` enqueues a single marker after the last item. A consumer that
    takes the marker puts it back before returning, so every consumer sees the
    closure no matter how many are waiting.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[object] = queue.Queue()
        self._lock = Lock()
        self._closed = False

    def put(self, item: T) -> None:
        with self._lock:
            if self._closed:
                raise QueueClosedError("put() on a closed queue")
            self._queue.put(item)

    def close(self) -> None:
        """Signal that no more items will be put. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    def get(self) -> T | None:
        """Block for the next item; return None once closed and drained."""
        item = self._queue.get()
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            return None
        return item  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self.get()
            if item is None:
                return
            yield item
