"""LIFO stacks: a generic one, an integer one and a thread-safe one."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def normalize_path(path: str) -> str:
    """Resolve ``.`` and ``..`` in a slash-separated path.

    The remaining components are emitted in pop order, innermost first,
    each preceded by ``/``. A ``..`` at the root is ignored.
    """
    stack: Stack[str] = Stack()
    for part in path.split("/"):
        if part == "..":
            if not stack.empty():
                stack.pop()
        elif part not in (".", ""):
            stack.push(part)
    pieces = []
    while not stack.empty():
        pieces.append("/" + stack.pop())
    return "".join(pieces)


class IntStack:
    """A stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class ConcurrentIntStack:
    """A stack of integers safe to share between threads."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._lock = threading.Lock()

    def push(self, value: int) -> None:
        with self._lock:
            self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError if empty."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from empty stack")
            return self._items.pop()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)