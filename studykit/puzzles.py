"""Interview puzzles: flight routes, window averages, flood fills and brackets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Flight:
    start: int
    end: int


def find_route(flights: Iterable[Flight]) -> list[int]:
    """Return ``[origin, destination]`` of the route the unordered flights form.

    Raises :class:`ValueError` if there are no flights, no flight starts
    the route, or the route loops.
    """
    flights = list(flights)
    route = {flight.start: flight.end for flight in flights}
    ends = {flight.end for flight in flights}
    start = next((f.start for f in flights if f.start not in ends), None)
    if start is None:
        raise ValueError("no flight starts the route")

    current = route[start]
    for _ in range(len(route)):
        if current not in route:
            return [start, current]
        current = route[current]
    raise ValueError("flights form a loop")


def _check_window(nums: Sequence[int], k: int) -> None:
    if k < 1 or k > len(nums):
        raise ValueError("k must be between 1 and len(nums)")


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Maximum average of any ``k`` consecutive numbers, by a sliding window."""
    _check_window(nums, k)
    total = sum(nums[:k])
    best = total
    for leaving, entering in zip(nums, nums[k:]):
        total += entering - leaving
        best = max(best, total)
    return best / k


_MIN_INT32 = -(2**31)


def find_max_average_naive(nums: Sequence[int], k: int) -> float:
    """Brute-force window average that skips the last window.

    When no window is considered the result is ``-2**31 / k``.
    """
    _check_window(nums, k)
    best = _MIN_INT32
    for i in range(len(nums) - k):
        best = max(best, sum(nums[i:i + k]))
    return best / k


def _neighbours(i: int, j: int, rows: int, cols: int):
    for di, dj in _DIRECTIONS:
        ni, nj = i + di, j + dj
        if 0 <= ni < rows and 0 <= nj < cols:
            yield ni, nj


def count_strokes(grid: Sequence[Sequence[int]]) -> int:
    """Count 4-connected regions of equal colour in ``grid``."""
    if not grid:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]
    strokes = 0
    for i in range(rows):
        for j in range(cols):
            if visited[i][j]:
                continue
            strokes += 1
            color = grid[i][j]
            pending = [(i, j)]
            while pending:
                ci, cj = pending.pop()
                if visited[ci][cj] or grid[ci][cj] != color:
                    continue
                visited[ci][cj] = True
                pending.extend(_neighbours(ci, cj, rows, cols))
    return strokes


def count_fills(
    grid: list[list[int]],
    on_step: Callable[[list[list[int]]], None] | None = None,
) -> int:
    """Flood-fill every region in place and return how many fills were needed.

    The n-th region is repainted with colour ``n + 10``. ``on_step`` is
    called with the grid after each painted cell.
    """
    if not grid:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]
    count = 0
    for x in range(rows):
        for y in range(cols):
            if visited[x][y]:
                continue
            count += 1
            new_color = count + 10
            original = grid[x][y]
            pending = [(x, y)]
            while pending:
                i, j = pending.pop()
                if visited[i][j]:
                    continue
                visited[i][j] = True
                grid[i][j] = new_color
                if on_step is not None:
                    on_step(grid)
                pending.extend(
                    (ni, nj)
                    for ni, nj in _neighbours(i, j, rows, cols)
                    if not visited[ni][nj] and grid[ni][nj] == original
                )
    return count


def find_replace_index(brackets: str) -> int:
    """Index of the one bracket whose flip makes the sequence balanced, or -1."""
    n = len(brackets)
    if n % 2 != 0:
        return -1

    balance = 0
    bad_index = -1
    problems = 0
    for i, ch in enumerate(brackets):
        balance += 1 if ch == "(" else -1
        if balance < 0:
            problems += 1
            if problems == 1:
                bad_index = i

    if balance == 0 and problems == 1:
        return bad_index

    if balance == 2 and problems == 0:
        opened = 0
        for i, ch in enumerate(brackets):
            if ch == "(":
                opened += 1
            if opened > n // 2:
                return i

    return -1