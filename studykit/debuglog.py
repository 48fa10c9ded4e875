"""Tiny loggers with a debug switch."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, TextIO

RFC3339 = "%Y-%m-%dT%H:%M:%S%z"
DEBUG_OFF_PREFIX = "Debug is turned off; "


def _local_now() -> datetime:
    return datetime.now().astimezone()


class LoggerLevel(Enum):
    """Severity of a log line; the value is the printed label."""

    INFO = "Info"
    ERROR = "Error"
    WARN = "Warn"
    DEBUG = "Debug"


@dataclass
class Logger:
    """Writes ``[Level] time message`` lines; ``time_format`` is a strftime pattern."""

    time_format: str = ""
    debug: bool = False
    stream: TextIO | None = field(default=None, repr=False, compare=False)
    clock: Callable[[], datetime] = field(default=_local_now, repr=False, compare=False)

    def log(self, level: LoggerLevel, message: str) -> None:
        if level in (LoggerLevel.INFO, LoggerLevel.DEBUG) and not self.debug:
            message = DEBUG_OFF_PREFIX + message
        self._write(level.value, message)

    def switch_debug(self) -> Logger:
        """Toggle the debug flag and return this logger."""
        self.debug = not self.debug
        return self

    def _write(self, level: str, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"[{level}] {self.clock().strftime(self.time_format)} {text}\n")


def print_loggers(loggers: Iterable[Logger]) -> None:
    """Make every logger introduce itself at Info level."""
    for index, logger in enumerate(loggers):
        logger._write(LoggerLevel.INFO.value, f"I'm logger[{index}] = {logger!r}")


def _rfc3339(moment: datetime) -> str:
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


@dataclass
class StatementLog:
    """Writes timestamped statements only while ``debug`` is on."""

    debug: bool = False
    stream: TextIO | None = field(default=None, repr=False, compare=False)
    clock: Callable[[], datetime] = field(default=_local_now, repr=False, compare=False)

    def log(self, statement: str) -> None:
        if not self.debug:
            return
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"{_rfc3339(self.clock())} {statement}\n")