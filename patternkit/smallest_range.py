"""Smallest range covering at least one number from each sorted list."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def smallest_range(lists: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(start, end)`` of the narrowest range touching every list.

    Each list must be sorted in non-decreasing order. Among ranges of equal
    width, the one found first while sweeping upwards is returned.
    """
    if not lists:
        raise ValueError("at least one list is required")
    if any(len(values) == 0 for values in lists):
        raise ValueError("every list must hold at least one number")

    heap = [(values[0], index, 0) for index, values in enumerate(lists)]
    heapq.heapify(heap)
    highest = max(values[0] for values in lists)
    best_width = math.inf
    best = (0, 0)

    while True:
        value, index, position = heapq.heappop(heap)
        if highest - value < best_width:
            best_width = highest - value
            best = (value, highest)
        source = lists[index]
        if position + 1 >= len(source):
            return best
        following = source[position + 1]
        heapq.heappush(heap, (following, index, position + 1))
        highest = max(highest, following)