"""Fetch many ids through a cached worker pool with a deadline and first-error policy."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

DEFAULT_DELAY = 0.05

_DONE = object()


@dataclass(frozen=True)
class Result:
    id: int
    data: str


class FetchError(Exception):
    """Raised once the results are drained if a fetch failed; the failure is the cause."""


class _Cancelled(Exception):
    pass


class _Context:
    """Cancellation flag plus an optional deadline."""

    def __init__(self, timeout: float | None) -> None:
        self._cancelled = threading.Event()
        self._deadline = None if timeout is None else time.monotonic() + timeout

    def cancel(self) -> None:
        self._cancelled.set()

    def done(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def sleep(self, seconds: float) -> bool:
        """Sleep for ``seconds``; return False if cancelled or past the deadline first."""
        now = time.monotonic()
        end = now + seconds
        if self._deadline is not None:
            end = min(end, self._deadline)
        self._cancelled.wait(max(0.0, end - now))
        return not self.done()


class Fetcher:
    """Fetches results by id, caching each one after its first successful fetch.

    ``fetch`` is called with an id and returns a :class:`Result`; without it
    a simulated request waits ``delay`` seconds and returns ``value-<id>``.
    ``timeout`` is the deadline, in seconds, of every :meth:`fetch_all` run;
    None means no deadline.
    """

    def __init__(
        self,
        fetch: Callable[[int], Result] | None = None,
        *,
        delay: float = DEFAULT_DELAY,
        timeout: float | None = None,
    ) -> None:
        self._fetch = fetch
        self.delay = delay
        self.timeout = timeout
        self._lock = threading.Lock()
        self._cache: dict[int, Result] = {}

    def cached(self, id: int) -> Result | None:
        """Return the cached result for ``id``, or None."""
        with self._lock:
            return self._cache.get(id)

    def _fetch_one(self, id: int, ctx: _Context) -> Result:
        if self._fetch is None:
            if not ctx.sleep(self.delay):
                raise _Cancelled
            return Result(id=id, data=f"value-{id}")
        result = self._fetch(id)
        if ctx.done():
            raise _Cancelled
        return result

    def _work(
        self,
        jobs: queue.Queue,
        out: queue.Queue,
        ctx: _Context,
        errors: list[Exception],
        errors_lock: threading.Lock,
    ) -> None:
        try:
            while not ctx.done():
                try:
                    id = jobs.get_nowait()
                except queue.Empty:
                    return
                cached = self.cached(id)
                if cached is not None:
                    out.put(cached)
                    continue
                try:
                    result = self._fetch_one(id, ctx)
                except _Cancelled:
                    return
                except Exception as exc:
                    with errors_lock:
                        if not errors:
                            errors.append(exc)
                    ctx.cancel()
                    return
                with self._lock:
                    self._cache[id] = result
                out.put(result)
        finally:
            out.put(_DONE)

    def fetch_all(self, ids: Iterable[int], workers: int = 4) -> Iterator[Result]:
        """Fetch every id with ``workers`` threads and yield results as they arrive.

        Once the fetcher's ``timeout`` passes, work stops quietly. The first
        failing fetch stops all work; it is raised as :class:`FetchError`
        after the results already produced have been yielded.
        """
        workers = max(1, workers)
        jobs: queue.Queue = queue.Queue()
        for id in ids:
            jobs.put(id)
        out: queue.Queue = queue.Queue()
        ctx = _Context(self.timeout)
        errors: list[Exception] = []
        errors_lock = threading.Lock()
        for _ in range(workers):
            threading.Thread(
                target=self._work,
                args=(jobs, out, ctx, errors, errors_lock),
                daemon=True,
            ).start()
        return self._drain(out, ctx, workers, errors)

    @staticmethod
    def _drain(
        out: queue.Queue,
        ctx: _Context,
        workers: int,
        errors: list[Exception],
    ) -> Iterator[Result]:
        finished = 0
        try:
            while finished < workers:
                item = out.get()
                if item is _DONE:
                    finished += 1
                    continue
                yield item
        finally:
            ctx.cancel()
        if errors:
            raise FetchError(str(errors[0])) from errors[0]