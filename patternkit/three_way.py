"""Three-way partitioning of numbers around zero (Dutch national flag)."""

from __future__ import annotations

from collections.abc import Iterable


def three_way_sort(values: Iterable[int]) -> list[int]:
    """Return the values arranged as negatives, then zeros, then positives.

    The input is not modified. The arrangement inside the negative and
    positive blocks follows the single-pass swapping scheme, so it is not
    necessarily ascending.
    """
    result = list(values)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        current = result[mid]
        if current < 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif current > 0:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            mid += 1
    return result