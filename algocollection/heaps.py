"""An array-backed binary min-heap."""

from typing import Any, Optional


class HeapFullError(OverflowError):
    """Raised when inserting into a heap that has reached its capacity."""


class MinHeap:
    """A binary min-heap; ``capacity`` of None means unbounded."""

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._data: list[Any] = []

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index != 0 and self._data[self._parent(index)] > self._data[index]:
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and self._data[left] < self._data[smallest]:
                smallest = left
            if right < size and self._data[right] < self._data[smallest]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"heap index {index} out of range")

    def insert(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        if self.capacity is not None and len(self._data) >= self.capacity:
            raise HeapFullError("heap is full")
        self._data.append(key)
        self._sift_up(len(self._data) - 1)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._data:
            raise IndexError("extract from an empty heap")
        last = self._data.pop()
        if not self._data:
            return last
        smallest = self._data[0]
        self._data[0] = last
        self._sift_down(0)
        return smallest

    def peek(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._data:
            raise IndexError("peek into an empty heap")
        return self._data[0]

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Set the key at ``index`` to ``new_value``, assumed not larger, and restore order."""
        self._check_index(index)
        self._data[index] = new_value
        self._sift_up(index)

    def delete_key(self, index: int) -> Any:
        """Remove the key at ``index`` and return it."""
        self._check_index(index)
        # Float the key to the root as if it were minus infinity, then extract it.
        while index != 0:
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent
        return self.extract_min()

    def __len__(self) -> int:
        return len(self._data)

    def items(self) -> list[Any]:
        """Return the keys in array order."""
        return list(self._data)