"""Least-recently-used cache with a fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Keeps at most ``capacity`` entries, evicting the least recently used."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: OrderedDict[K, V] = OrderedDict()

    def put(self, key: K, value: V) -> None:
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return
        if len(self._items) == self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value

    def get(self, key: K) -> V:
        """Return the value for ``key`` and mark it recently used; raise KeyError if absent."""
        value = self._items[key]
        self._items.move_to_end(key)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)