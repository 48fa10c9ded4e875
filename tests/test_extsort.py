import random

import pytest

from studykit.extsort import main, merge_chunks, split_and_sort_chunks, write_chunk_to_file


def _read(path):
    return [int(line) for line in path.read_text(encoding="utf-8").splitlines()]


@pytest.fixture
def numbers():
    rng = random.Random(42)
    return [rng.randint(-1000, 1000) for _ in range(37)]


def test_write_chunk_round_trip(tmp_path, numbers):
    path = tmp_path / "c.txt"
    write_chunk_to_file(path, numbers)
    assert _read(path) == numbers


def test_split_makes_sorted_chunks(tmp_path, numbers):
    src = tmp_path / "in.txt"
    write_chunk_to_file(src, numbers)
    chunks = split_and_sort_chunks(src, tmp_path, chunk_size=8 * 5)
    assert len(chunks) == -(-len(numbers) // 5)
    contents = [_read(tmp_path / p.split("/")[-1]) if False else _read(__import_path(p)) for p in chunks]
    assert all(chunk == sorted(chunk) for chunk in contents)
    assert sorted(n for chunk in contents for n in chunk) == sorted(numbers)


def __import_path(p):
    from pathlib import Path

    return Path(p)


def test_split_and_merge_sorts(tmp_path, numbers):
    src = tmp_path / "in.txt"
    out = tmp_path / "out.txt"
    write_chunk_to_file(src, numbers)
    chunks = split_and_sort_chunks(src, tmp_path, chunk_size=16)
    merge_chunks(chunks, out)
    assert _read(out) == sorted(numbers)


def test_single_chunk_when_large(tmp_path, numbers):
    src = tmp_path / "in.txt"
    write_chunk_to_file(src, numbers)
    chunks = split_and_sort_chunks(src, tmp_path)
    assert len(chunks) == 1


def test_empty_input_has_no_chunks(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("", encoding="utf-8")
    assert split_and_sort_chunks(src, tmp_path) == []


def test_bad_line_raises(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("1\nabc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        split_and_sort_chunks(src, tmp_path)


def test_main_sorts_file(tmp_path, numbers):
    src = tmp_path / "in.txt"
    out = tmp_path / "out.txt"
    write_chunk_to_file(src, numbers)
    code = main([str(src), str(out), "--chunk-dir", str(tmp_path), "--chunk-size", "24"])
    assert code == 0
    assert _read(out) == sorted(numbers)