import time

import pytest

from studykit.stream import (
    CANCELED,
    DEADLINE_EXCEEDED,
    LocalStream,
    StreamAck,
    StreamClosed,
    UserEvent,
)


def test_send_then_recv_acknowledges():
    with LocalStream() as stream:
        stream.send(UserEvent("ping"))
        assert stream.recv() == StreamAck("ack for ping")


def test_acks_keep_send_order():
    with LocalStream() as stream:
        stream.send(UserEvent("a"))
        stream.send(UserEvent("b"))
        first = stream.recv()
        second = stream.recv()
        assert [first.message, second.message] == ["ack for a", "ack for b"]


def test_send_after_close_raises_canceled():
    stream = LocalStream()
    stream.close()
    with pytest.raises(StreamClosed) as info:
        stream.send(UserEvent("ping"))
    assert str(info.value) == CANCELED


def test_recv_after_close_raises_canceled():
    stream = LocalStream()
    stream.close()
    stream.close()
    assert stream.closed is True
    with pytest.raises(StreamClosed) as info:
        stream.recv()
    assert str(info.value) == CANCELED


def test_deadline_ends_the_stream():
    stream = LocalStream(timeout=0.05)
    time.sleep(0.1)
    with pytest.raises(StreamClosed) as info:
        stream.send(UserEvent("ping"))
    assert str(info.value) == DEADLINE_EXCEEDED


def test_context_manager_closes():
    with LocalStream() as stream:
        assert stream.closed is False
    with pytest.raises(StreamClosed):
        stream.recv()