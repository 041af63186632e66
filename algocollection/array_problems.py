"""Stack-, heap- and window-based array problems."""

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, Optional


def reverse_stack(stack: Iterable[Any]) -> list[Any]:
    """Return the stack (listed bottom to top) with its order reversed."""
    source = list(stack)
    reversed_stack: list[Any] = []
    while source:
        reversed_stack.append(source.pop())
    return reversed_stack


def nearest_greater_to_right(values: Sequence[Any]) -> list[Optional[Any]]:
    """For each item, the first later item strictly greater than it, or None."""
    stack: list[Any] = []
    answers: list[Optional[Any]] = []
    for value in reversed(values):
        while stack and stack[-1] <= value:
            stack.pop()
        answers.append(stack[-1] if stack else None)
        stack.append(value)
    answers.reverse()
    return answers


def nearest_smaller_to_left(values: Iterable[Any]) -> list[Optional[Any]]:
    """For each item, the closest earlier item strictly smaller than it, or None."""
    stack: list[Any] = []
    answers: list[Optional[Any]] = []
    for value in values:
        while stack and stack[-1] >= value:
            stack.pop()
        answers.append(stack[-1] if stack else None)
        stack.append(value)
    return answers


def daily_temperatures(temperatures: Sequence[Any]) -> list[int]:
    """For each day, how many days until a warmer one; 0 if none comes."""
    waits = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        current = temperatures[index]
        while stack and temperatures[stack[-1]] <= current:
            stack.pop()
        if stack:
            waits[index] = stack[-1] - index
        stack.append(index)
    return waits


def k_largest(values: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` largest items in ascending order, using a bounded min-heap."""
    heap: list[Any] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            heapq.heappop(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def top_k_frequent(values: Iterable[Hashable], k: int) -> list[Hashable]:
    """Return the ``k`` most frequent items, least frequent of them first.

    Ties in frequency are broken by the items' own order, the larger winning.
    """
    heap: list[tuple[int, Any]] = []
    for value, frequency in Counter(values).items():
        heapq.heappush(heap, (frequency, value))
        if len(heap) > k:
            heapq.heappop(heap)
    return [heapq.heappop(heap)[1] for _ in range(len(heap))]


def max_sum_subarray(values: Sequence[int], k: int) -> int:
    """Return the largest sum of any ``k`` consecutive items."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    if len(values) < k:
        raise ValueError(f"window size {k} exceeds sequence length {len(values)}")
    window = sum(values[:k])
    best = window
    for leaving, entering in zip(values, values[k:]):
        window += entering - leaving
        best = max(best, window)
    return best