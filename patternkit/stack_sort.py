"""Sorting a stack using only stack operations.

A stack is a list whose last element is the top.
"""

from __future__ import annotations

from typing import Any


def insert_sorted(stack: list[Any], value: Any) -> None:
    """Push ``value`` onto a sorted stack so that it stays sorted (largest on top)."""
    lifted = []
    while stack and stack[-1] > value:
        lifted.append(stack.pop())
    stack.append(value)
    while lifted:
        stack.append(lifted.pop())


def sort_stack(stack: list[Any]) -> None:
    """Sort the stack in place so that the largest element is on top."""
    popped = []
    while stack:
        popped.append(stack.pop())
    for value in reversed(popped):
        insert_sorted(stack, value)