"""Searching a sequence for a value."""

from collections.abc import Sequence
from typing import Any, Optional


def _bisect(items: Sequence[Any], target: Any, descending: bool) -> Optional[int]:
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        go_right = value > target if descending else value < target
        if go_right:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of ``target`` in ascending ``items``, or None if absent."""
    return _bisect(items, target, descending=False)


def binary_search_descending(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of ``target`` in descending ``items``, or None if absent."""
    return _bisect(items, target, descending=True)


def linear_search(items: Sequence[Any], target: Any) -> list[int]:
    """Return every index at which ``target`` occurs, in increasing order."""
    return [index for index, value in enumerate(items) if value == target]