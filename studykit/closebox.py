"""A value channel that writers close safely, exactly once."""

from __future__ import annotations

import queue
import threading
from typing import Iterator

_CLOSED = object()


class Box:
    """Channel of strings with a closed flag guarded by a lock."""

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False
        self._once_done = False

    def is_closed(self) -> bool:
        with self._lock:
            return self._closed

    def _close_locked(self) -> None:
        if self._closed:
            raise RuntimeError("close of closed channel")
        self._closed = True
        self._queue.put(_CLOSED)

    def safe_close_once(self) -> None:
        """Close the box on the first call only.

        Raises RuntimeError if :meth:`safe_close` already closed it.
        """
        with self._lock:
            if self._once_done:
                return
            self._once_done = True
            self._close_locked()

    def safe_close(self) -> None:
        """Close the box if it is open, reporting what happened."""
        with self._lock:
            print("closing")
            if not self._closed:
                print("box is closed")
                self._close_locked()
            else:
                print("box is already closed")

    def _try_send(self, value: str) -> bool:
        with self._lock:
            if self._closed:
                return False
            self._queue.put(value)
            return True

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                self._queue.put(_CLOSED)
                return
            yield item


def write_values(number: int, count: int, box: Box) -> int:
    """Send ``count`` values tagged with ``number``, then close the box.

    Stops early if the box is already closed. Returns how many were sent.
    """
    for i in range(count):
        value = f"{number} = {i}"
        if not box._try_send(value):
            print(number, "box was closed ")
            return i
        print("write ", value)
    print(number, "end writing")
    box.safe_close_once()
    return count


def read_values(box: Box) -> list[str]:
    """Read and print values until the box is closed; return them."""
    values = []
    for value in box:
        print(f"Read value of {value}")
        values.append(value)
    return values