"""Fixed-capacity stack and queue."""

from typing import Any


class ContainerFullError(OverflowError):
    """Raised when adding to a container that has no room left."""


class ContainerEmptyError(IndexError):
    """Raised when taking from a container that holds nothing."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) == self.capacity:
            raise ContainerFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise ContainerEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise ContainerEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[Any]:
        """Return the items from bottom to top."""
        return list(self._items)


class BoundedQueue:
    """A FIFO queue over a fixed array of ``capacity`` slots.

    Slots freed by dequeuing are not reused, so at most ``capacity`` items
    can ever be enqueued.
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if len(self._slots) == self.capacity:
            raise ContainerFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self._front >= len(self._slots):
            raise ContainerEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def items(self) -> list[Any]:
        """Return the items from front to rear."""
        return self._slots[self._front :]