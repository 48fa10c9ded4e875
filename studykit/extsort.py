"""External sort of a file of integers: sorted chunks, then a k-way merge."""

from __future__ import annotations

import argparse
import heapq
from contextlib import ExitStack
from pathlib import Path
from typing import Iterable, Iterator, Sequence, TextIO

CHUNK_SIZE = 1 << 30
_BYTES_PER_NUMBER = 8


def _read_numbers(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        yield int(line.strip())


def write_chunk_to_file(filename: str | Path, numbers: Iterable[int]) -> None:
    """Write one number per line."""
    with open(filename, "w", encoding="utf-8") as out:
        out.writelines(f"{num}\n" for num in numbers)


def split_and_sort_chunks(
    input_file: str | Path,
    chunk_dir: str | Path = ".",
    chunk_size: int = CHUNK_SIZE,
) -> list[str]:
    """Split ``input_file`` into sorted chunk files and return their paths.

    A chunk is flushed once it holds ``chunk_size`` bytes' worth of
    8-byte numbers. Raises :class:`ValueError` on a line that is not an integer.
    """
    chunk_dir = Path(chunk_dir)
    chunk_files: list[str] = []
    numbers: list[int] = []

    def flush() -> None:
        numbers.sort()
        path = chunk_dir / f"chunk_{len(chunk_files)}.txt"
        write_chunk_to_file(path, numbers)
        chunk_files.append(str(path))
        numbers.clear()

    with open(input_file, encoding="utf-8") as src:
        for num in _read_numbers(src):
            numbers.append(num)
            if len(numbers) * _BYTES_PER_NUMBER >= chunk_size:
                flush()
    if numbers:
        flush()
    return chunk_files


def merge_chunks(chunk_files: Sequence[str | Path], output_file: str | Path) -> None:
    """Merge sorted chunk files into one sorted ``output_file``."""
    with ExitStack() as stack:
        sources: list[TextIO] = [
            stack.enter_context(open(path, encoding="utf-8")) for path in chunk_files
        ]
        merged = heapq.merge(*(_read_numbers(src) for src in sources))
        write_chunk_to_file(output_file, merged)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sort a large file of integers.")
    parser.add_argument("input", nargs="?", default="bigfile.txt")
    parser.add_argument("output", nargs="?", default="sorted_output.txt")
    parser.add_argument("--chunk-dir", default=".")
    parser.add_argument("--chunk-size", type=int, default=CHUNK_SIZE)
    args = parser.parse_args(argv)
    chunks = split_and_sort_chunks(args.input, args.chunk_dir, args.chunk_size)
    merge_chunks(chunks, args.output)
    return 0