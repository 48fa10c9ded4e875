"""A dictionary guarded by a lock for use from several threads."""

from __future__ import annotations

import threading
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ProtectedMap(Generic[K, V]):
    """Thread-safe mapping with put and get."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[K, V] = {}

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def get(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        with self._lock:
            return self._data[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)