"""An in-process bidirectional stream that acknowledges every event it is sent."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass

CANCELED = "context canceled"
DEADLINE_EXCEEDED = "context deadline exceeded"

_POLL = 0.02


@dataclass(frozen=True)
class UserEvent:
    kind: str


@dataclass(frozen=True)
class StreamAck:
    message: str


class StreamClosed(Exception):
    """Raised once the stream has been closed or its deadline has passed."""


class LocalStream:
    """Echo stream: each sent :class:`UserEvent` comes back as a :class:`StreamAck`.

    Both directions hold at most one pending item. ``timeout`` gives the
    stream a lifetime in seconds.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._cancelled = threading.Event()
        self._close_lock = threading.Lock()
        self._sent: queue.Queue[UserEvent] = queue.Queue(maxsize=1)
        self._acks: queue.Queue[StreamAck] = queue.Queue(maxsize=1)
        self._finished = threading.Event()
        threading.Thread(target=self._echo, daemon=True).start()

    def _reason(self) -> str | None:
        if self._cancelled.is_set():
            return CANCELED
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DEADLINE_EXCEEDED
        return None

    @property
    def closed(self) -> bool:
        return self._reason() is not None

    def _raise_if_done(self) -> None:
        reason = self._reason()
        if reason is not None:
            raise StreamClosed(reason)

    def _echo(self) -> None:
        try:
            while self._reason() is None:
                try:
                    event = self._sent.get(timeout=_POLL)
                except queue.Empty:
                    continue
                ack = StreamAck(f"ack for {event.kind}")
                while self._reason() is None:
                    try:
                        self._acks.put(ack, timeout=_POLL)
                        break
                    except queue.Full:
                        continue
        finally:
            self._finished.set()

    def send(self, event: UserEvent) -> None:
        """Queue ``event``; raise StreamClosed if the stream is done."""
        while True:
            self._raise_if_done()
            try:
                self._sent.put(event, timeout=_POLL)
                return
            except queue.Full:
                continue

    def recv(self) -> StreamAck:
        """Wait for the next ack; raise StreamClosed or, if the stream ended, EOFError."""
        while True:
            self._raise_if_done()
            try:
                return self._acks.get(timeout=_POLL)
            except queue.Empty:
                if self._finished.is_set() and self._acks.empty():
                    raise EOFError("stream ended") from None

    def close(self) -> None:
        """Cancel the stream; further calls do nothing."""
        with self._close_lock:
            self._cancelled.set()

    def __enter__(self) -> LocalStream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()