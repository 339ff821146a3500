"""Sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""

from __future__ import annotations

from collections.abc import Sequence

MODULUS = 1_000_000_007


def sum_subarray_mins(values: Sequence[int]) -> int:
    """Return the sum of min(sub) over all contiguous subarrays, mod ``MODULUS``."""
    total = 0
    stack: list[int] = []

    def settle(end: int) -> None:
        nonlocal total
        index = stack.pop()
        left = stack[-1] if stack else -1
        total = (total + values[index] * (end - index) * (index - left)) % MODULUS

    for position, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            settle(position)
        stack.append(position)
    while stack:
        settle(len(values))
    return total