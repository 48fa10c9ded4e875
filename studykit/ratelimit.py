"""In-memory rate limiters: fixed window, sliding window and token bucket."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

Clock = Callable[[], float]

_DEFAULT_WINDOW = 60.0
_NANOS = 1_000_000_000


@dataclass(frozen=True)
class Decision:
    """Result of one limiter check; ``retry_after`` is in seconds."""

    allowed: bool
    retry_after: float = 0.0


class Limiter(ABC):
    """Narrow contract that keeps callers independent of the algorithm."""

    @abstractmethod
    def allow(self, key: str) -> Decision:
        """Record one hit for ``key`` and decide whether it may pass."""


class InMemoryFixedWindowLimiter(Limiter):
    """Counts hits per key in fixed, epoch-aligned windows.

    Cheap and simple, but allows bursts around window edges and keeps
    state local to the process.
    """

    def __init__(self, limit: int, window: float = _DEFAULT_WINDOW, *, clock: Clock = time.time) -> None:
        if window <= 0:
            window = _DEFAULT_WINDOW
        self.limit = int(limit)
        self.window = window
        self.clock = clock
        self._window_ns = max(1, round(window * _NANOS))
        self._lock = threading.Lock()
        self._state: dict[str, tuple[int, int]] = {}

    def allow(self, key: str) -> Decision:
        now_ns = round(self.clock() * _NANOS)
        bucket = now_ns // self._window_ns
        retry_after_ns = self._window_ns - now_ns % self._window_ns
        if retry_after_ns <= 0:
            retry_after_ns = self._window_ns

        with self._lock:
            current_bucket, count = self._state.get(key, (bucket, 0))
            if current_bucket != bucket:
                count = 0
            count += 1
            self._state[key] = (bucket, count)

        if count > self.limit:
            return Decision(allowed=False, retry_after=retry_after_ns / _NANOS)
        return Decision(allowed=True)


class InMemorySlidingWindowLimiter(Limiter):
    """Keeps one timestamp per accepted hit and prunes those outside the window."""

    def __init__(self, limit: int, window: float = _DEFAULT_WINDOW, *, clock: Clock = time.time) -> None:
        if window <= 0:
            window = _DEFAULT_WINDOW
        self.limit = int(limit)
        self.window = window
        self.clock = clock
        self._lock = threading.Lock()
        self._hits: dict[str, list[float]] = {}

    def allow(self, key: str) -> Decision:
        now = self.clock()
        cutoff = now - self.window

        with self._lock:
            hits = [ts for ts in self._hits.get(key, []) if ts > cutoff]
            if len(hits) >= self.limit:
                retry_after = max(0.0, hits[0] + self.window - now) if hits else 0.0
                self._hits[key] = hits
                return Decision(allowed=False, retry_after=retry_after)
            hits.append(now)
            self._hits[key] = hits
        return Decision(allowed=True)


@dataclass
class _Bucket:
    tokens: float
    last: float


class InMemoryTokenBucketLimiter(Limiter):
    """Token bucket allowing short bursts and a steady refill rate.

    ``refill_rate`` is in tokens per second.
    """

    def __init__(self, capacity: int, refill_rate: float, *, clock: Clock = time.time) -> None:
        if capacity <= 0:
            capacity = 1
        if refill_rate <= 0:
            refill_rate = 1.0
        self.capacity = float(capacity)
        self.refill_rate = float(refill_rate)
        self.clock = clock
        self._lock = threading.Lock()
        self._buckets: dict[str, _Bucket] = {}

    def allow(self, key: str) -> Decision:
        now = self.clock()

        with self._lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = _Bucket(tokens=self.capacity, last=now)
                self._buckets[key] = bucket

            elapsed = now - bucket.last
            if elapsed > 0:
                bucket.tokens = min(self.capacity, bucket.tokens + elapsed * self.refill_rate)
                bucket.last = now

            if bucket.tokens >= 1:
                bucket.tokens -= 1
                return Decision(allowed=True)

            missing = 1 - bucket.tokens
            retry_after = max(0.0, missing / self.refill_rate)
        return Decision(allowed=False, retry_after=retry_after)


class SlidingWindowLimiter:
    """Key-less sliding window limiter: at most ``limit`` calls per ``interval`` seconds."""

    def __init__(self, interval: float, limit: int, *, clock: Clock = time.time) -> None:
        self.interval = interval
        self.limit = limit
        self.clock = clock
        self._lock = threading.Lock()
        self._timestamps: list[float] = []

    def allow(self) -> bool:
        now = self.clock()
        window_start = now - self.interval
        with self._lock:
            self._timestamps = [ts for ts in self._timestamps if ts >= window_start]
            if len(self._timestamps) < self.limit:
                self._timestamps.append(now)
                return True
        return False