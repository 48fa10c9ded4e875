"""Fan one stream of published values out to every subscriber."""

from __future__ import annotations

import queue
import threading
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_CLOSED = object()


class _Subscription(Generic[T]):
    """Iterator over published values that stops once the publisher closes."""

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue = queue.SimpleQueue()

    def _deliver(self, value: T) -> None:
        self._queue.put(value)

    def _end(self) -> None:
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self._queue.get()
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise StopIteration
        return item


class PubSub(Generic[T]):
    """Publishes each value to all subscriptions, in order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[_Subscription[T]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def subscribe(self) -> _Subscription[T]:
        """Return a new subscription; raise RuntimeError once closed."""
        with self._lock:
            if self._closed:
                raise RuntimeError("pubsub is closed")
            subscription: _Subscription[T] = _Subscription()
            self._subscribers.append(subscription)
            return subscription

    def publish(self, value: T) -> None:
        """Deliver ``value`` to every subscriber; ignored once closed."""
        with self._lock:
            if self._closed:
                return
            for subscription in self._subscribers:
                subscription._deliver(value)

    def close(self) -> None:
        """End every subscription; calling it again does nothing."""
        with self._lock:
            if self._closed:
                return
            for subscription in self._subscribers:
                subscription._end()
            self._closed = True