import threading

import pytest

from studykit.closebox import Box, read_values, write_values


def test_write_then_read_all_values():
    box = Box()
    assert write_values(1, 3, box) == 3
    assert box.is_closed() is True
    assert read_values(box) == ["1 = 0", "1 = 1", "1 = 2"]


def test_writer_after_close_sends_nothing(capsys):
    box = Box()
    write_values(1, 2, box)
    capsys.readouterr()
    assert write_values(3, 3, box) == 0
    assert capsys.readouterr().out == "3 box was closed \n"
    assert read_values(box) == ["1 = 0", "1 = 1"]


def test_safe_close_reports_state(capsys):
    box = Box()
    box.safe_close()
    box.safe_close()
    assert capsys.readouterr().out == (
        "closing\nbox is closed\nclosing\nbox is already closed\n"
    )
    assert box.is_closed() is True


def test_safe_close_once_after_safe_close_raises():
    box = Box()
    box.safe_close()
    with pytest.raises(RuntimeError):
        box.safe_close_once()


def test_safe_close_once_is_idempotent():
    box = Box()
    box.safe_close_once()
    box.safe_close_once()
    assert box.is_closed() is True
    assert list(box) == []


def test_reader_in_another_thread():
    box = Box()
    received = []
    reader = threading.Thread(target=lambda: received.extend(read_values(box)))
    reader.start()
    sent = write_values(2, 10, box)
    reader.join(5)
    assert sent == 10
    assert received == [f"2 = {i}" for i in range(10)]


def test_read_prints_values(capsys):
    box = Box()
    write_values(5, 1, box)
    capsys.readouterr()
    read_values(box)
    assert capsys.readouterr().out == "Read value of 5 = 0\n"