"""Collapse concurrent calls for the same key into a single execution."""

from __future__ import annotations

import threading
from typing import Any, Callable, Hashable

ERROR_MESSAGE = "error from single flight"


class SingleflightError(Exception):
    """Raised to every caller when the shared task fails.

    The task's own exception is attached as ``__cause__``.
    """


class _Call:
    __slots__ = ("done", "value", "error")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.value: Any = None
        self.error: Exception | None = None


class Singleflight:
    """Runs at most one task per key at a time; callers arriving meanwhile share its result.

    ``timeout`` bounds, in seconds, how long each call of :meth:`do` waits;
    None waits for as long as the task runs.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout
        self._lock = threading.Lock()
        self._calls: dict[Hashable, _Call] = {}

    def do(self, key: Hashable, task: Callable[[], Any]) -> Any:
        """Return the result of ``task``, or of the call already in flight for ``key``.

        The task runs in a background thread. Raises :class:`TimeoutError` if
        the result is not ready within the instance's ``timeout`` (the task
        keeps running), and :class:`SingleflightError` if the task raised.
        """
        timeout = self.timeout
        with self._lock:
            call = self._calls.get(key)
            if call is None:
                call = _Call()
                self._calls[key] = call
                threading.Thread(target=self._run, args=(key, call, task), daemon=True).start()
        return self._wait(key, call, timeout)

    @staticmethod
    def _wait(key: Hashable, call: _Call, timeout: float | None) -> Any:
        if not call.done.wait(timeout):
            raise TimeoutError(f"waiting for {key!r} timed out")
        if call.error is not None:
            raise SingleflightError(ERROR_MESSAGE) from call.error
        return call.value

    def _run(self, key: Hashable, call: _Call, task: Callable[[], Any]) -> None:
        try:
            call.value = task()
        except Exception as exc:  # every failure is reported to all waiters
            call.error = exc
        finally:
            with self._lock:
                if self._calls.get(key) is call:
                    del self._calls[key]
            call.done.set()