"""Select the k largest values with a bounded min-heap."""

from __future__ import annotations

import heapq
from typing import Iterable


def top_k_elements(values: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` largest values in ascending order.

    A min-heap of at most ``k`` items is kept, so memory stays O(k).
    Raises :class:`ValueError` if ``k`` is not positive and there is
    at least one value to consider.
    """
    heap: list[int] = []
    for num in values:
        if len(heap) < k:
            heapq.heappush(heap, num)
        elif not heap:
            raise ValueError("k must be positive")
        elif num > heap[0]:
            heapq.heapreplace(heap, num)
    return [heapq.heappop(heap) for _ in range(len(heap))]