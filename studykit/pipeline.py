"""Channel-style pipelines, worker pools and a ticker-paced batch sender."""

from __future__ import annotations

import logging
import math
import queue
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Protocol, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

log = logging.getLogger(__name__)

_BATCH_WORKERS = 32


def generate(count: int = 10) -> Iterator[int]:
    """Yield the numbers 1 to ``count``."""
    yield from range(1, count + 1)


def square(values: Iterable[int], max_delay: float = 1.0) -> Iterator[int]:
    """Yield the square of each value after a random pause of up to ``max_delay`` seconds."""
    for n in values:
        if max_delay > 0:
            time.sleep(random.uniform(0, max_delay))
        yield n * n


def _run_workers(target: Callable[[int], None], count: int) -> None:
    errors: list[BaseException] = []
    errors_lock = threading.Lock()

    def run(worker_id: int) -> None:
        try:
            target(worker_id)
        except Exception as exc:
            with errors_lock:
                errors.append(exc)

    threads = [threading.Thread(target=run, args=(i,), daemon=True) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]


def _fill(values: Iterable[T]) -> queue.Queue:
    tasks: queue.Queue = queue.Queue()
    for value in values:
        tasks.put(value)
    return tasks


def pool_workers(func: Callable[[T], R], values: Iterable[T], count: int = 3) -> list[R]:
    """Apply ``func`` to every value with ``count`` worker threads.

    Results come back in completion order. The first exception raised by
    ``func`` is re-raised once all workers stop.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    tasks = _fill(values)
    results: list[R] = []
    lock = threading.Lock()

    def work(worker_id: int) -> None:
        while True:
            try:
                value = tasks.get_nowait()
            except queue.Empty:
                return
            result = func(value)
            print("worker", worker_id, "got value", result)
            with lock:
                results.append(result)

    _run_workers(work, count)
    return results


def _process_data(value: int) -> int:
    time.sleep(random.uniform(0, 1.0))
    return value * 2


def process_parallel(
    values: Iterable[int],
    num_workers: int = 5,
    process: Callable[[int], int] | None = None,
    timeout: float | None = None,
) -> list[int]:
    """Process values with ``num_workers`` threads, keeping results produced before the deadline.

    Without ``process`` each value is doubled after a random pause of up to a
    second. Once ``timeout`` seconds pass no new value is started and late
    results are dropped.
    """
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1")
    process = process or _process_data
    deadline = None if timeout is None else time.monotonic() + timeout
    tasks = _fill(values)
    results: list[int] = []
    lock = threading.Lock()

    def expired() -> bool:
        return deadline is not None and time.monotonic() >= deadline

    def work(worker_id: int) -> None:
        while not expired():
            try:
                value = tasks.get_nowait()
            except queue.Empty:
                return
            result = process(value)
            if expired():
                return
            with lock:
                results.append(result)
            print(f"{worker_id} - {result}")

    _run_workers(work, num_workers)
    return results


@dataclass(frozen=True)
class Request:
    payload: str


class _Client(Protocol):
    def send_request(self, request: Request) -> None: ...


class TickerRateLimiter:
    """Lets one caller through per tick, at ``rps`` ticks per second.

    Like a ticker with a one-slot buffer, a tick missed while nobody waited
    is available at once; further missed ticks are dropped.
    """

    def __init__(
        self,
        rps: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if rps <= 0:
            raise ValueError("rps must be positive")
        self.interval = 1.0 / rps
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._next = clock() + self.interval

    def wait(self) -> None:
        """Block until the next tick."""
        with self._lock:
            now = self._clock()
            if now < self._next:
                self._sleep(self._next - now)
                self._next += self.interval
            else:
                missed = math.floor((now - self._next) / self.interval) + 1
                self._next += missed * self.interval


def make_batch_api_calls(
    client: _Client,
    requests: Sequence[Request],
    rps: float = 100,
) -> list[tuple[Request, Exception]]:
    """Send every request at no more than ``rps`` per second.

    Failures are logged and returned as ``(request, error)`` pairs.
    """
    limiter = TickerRateLimiter(rps)
    failures: list[tuple[Request, Exception]] = []
    lock = threading.Lock()

    def send(request: Request) -> None:
        limiter.wait()
        try:
            client.send_request(request)
        except Exception as exc:
            log.error("send request: %s", exc)
            with lock:
                failures.append((request, exc))

    with ThreadPoolExecutor(max_workers=_BATCH_WORKERS) as pool:
        list(pool.map(send, requests))
    return failures