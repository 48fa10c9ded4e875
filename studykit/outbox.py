"""Worker that turns consumed transfer messages into payments."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Protocol, Sequence


@dataclass(frozen=True)
class KafkaMessage:
    offset: int
    from_account: int
    to_account: int
    amount: int


class _Consumer(Protocol):
    def read(self) -> Sequence[KafkaMessage]: ...

    def ack(self, offset: int) -> None: ...


class _Antifraud(Protocol):
    def is_valid(self, from_account: int, to_account: int, amount: int) -> bool: ...


class _Limits(Protocol):
    def is_limited(self, account: int, amount: int) -> bool: ...

    def update_limits(self, account: int, amount: int) -> None: ...


class _PaymentGateway(Protocol):
    def transfer(self, from_account: int, to_account: int, amount: int) -> None: ...


class Worker:
    """Reads messages, checks fraud and limits, transfers money and acknowledges."""

    def __init__(
        self,
        consumer: _Consumer,
        db: Any,
        antifraud: _Antifraud,
        limits: _Limits,
        payment: _PaymentGateway,
    ) -> None:
        self.consumer = consumer
        self.db = db
        self.antifraud = antifraud
        self.limits = limits
        self.payment = payment

    def work(self, stop: threading.Event) -> None:
        """Process batches until ``stop`` is set.

        Any exception from a collaborator ends the loop and propagates.
        Messages rejected by antifraud or limits are skipped without an ack.
        """
        while not stop.is_set():
            for message in self.consumer.read():
                self._process(message)

    def _process(self, message: KafkaMessage) -> None:
        print(
            f"Send money from {message.from_account} to {message.to_account}, "
            f"amount: {message.amount}"
        )
        if not self.antifraud.is_valid(message.from_account, message.to_account, message.amount):
            return
        if self.limits.is_limited(message.from_account, message.amount):
            return
        self.payment.transfer(message.from_account, message.to_account, message.amount)
        self.limits.update_limits(message.from_account, message.amount)
        self.consumer.ack(message.offset)