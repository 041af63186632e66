"""Classic sorting algorithms. Each returns a new list and leaves its input alone."""

from collections.abc import Iterable
from itertools import chain
from typing import Any


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with an iteratively built max-heap."""
    heap = list(values)
    size = len(heap)
    for i in range(1, size):
        j = i
        while j > 0 and heap[j] > heap[(j - 1) // 2]:
            parent = (j - 1) // 2
            heap[j], heap[parent] = heap[parent], heap[j]
            j = parent
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        j = 0
        while (child := 2 * j + 1) < end:
            if child + 1 < end and heap[child] < heap[child + 1]:
                child += 1
            if heap[j] < heap[child]:
                heap[j], heap[child] = heap[child], heap[j]
            j = child
    return heap


def _count_partition(data: list[Any], low: int, high: int) -> int:
    pivot = data[low]
    position = low + sum(1 for value in data[low + 1 : high + 1] if value < pivot)
    data[low], data[position] = data[position], data[low]
    i, j = low, high
    while i < position < j:
        if data[i] < pivot:
            i += 1
        elif data[j] >= pivot:
            j -= 1
        else:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1
    return position


def _lomuto_partition(data: list[Any], low: int, high: int) -> int:
    pivot = data[high]
    boundary = low - 1
    for j in range(low, high):
        if data[j] <= pivot:
            boundary += 1
            data[boundary], data[j] = data[j], data[boundary]
    data[boundary + 1], data[high] = data[high], data[boundary + 1]
    return boundary + 1


def _quick(values: Iterable[Any], partition) -> list[Any]:
    data = list(values)
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = partition(data, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return data


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the first element as pivot, placed by counting smaller items."""
    return _quick(values, _count_partition)


def lomuto_quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element as pivot (Lomuto partition)."""
    return _quick(values, _lomuto_partition)


def radix_sort(values: Iterable[int]) -> list[int]:
    """LSD base-10 radix sort of non-negative integers."""
    data = list(values)
    if not data:
        return data
    if min(data) < 0:
        raise ValueError("radix sort requires non-negative integers")
    largest = max(data)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // place) % 10].append(value)
        data = list(chain.from_iterable(buckets))
        place *= 10
    return data


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by distributing them into buckets."""
    data = list(values)
    count = len(data)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in data:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort requires values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return list(chain.from_iterable(sorted(bucket) for bucket in buckets))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Counting sort over the range between the smallest and largest integer."""
    data = list(values)
    if not data:
        return data
    smallest, largest = min(data), max(data)
    counts = [0] * (largest - smallest + 1)
    for value in data:
        counts[value - smallest] += 1
    return [
        smallest + offset
        for offset, count in enumerate(counts)
        for _ in range(count)
    ]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    data = list(values)
    for i in range(1, len(data)):
        current = data[i]
        j = i - 1
        while j >= 0 and current < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    data = list(values)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    data = list(values)
    size = len(data)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front of the unsorted part."""
    data = list(values)
    size = len(data)
    for i in range(size - 1):
        smallest = min(range(i, size), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def reverse_array(values: Iterable[Any]) -> list[Any]:
    """Return the items in reverse order by swapping from both ends inward."""
    data = list(values)
    size = len(data)
    for i in range(size // 2):
        data[i], data[size - 1 - i] = data[size - 1 - i], data[i]
    return data