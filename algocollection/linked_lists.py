"""Singly and doubly linked lists, and per-day lists built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A singly linked list with constant-time append and prepend."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


@dataclass(eq=False)
class _DoubleNode:
    key: Any
    data: Any
    previous: Optional[_DoubleNode] = None
    next: Optional[_DoubleNode] = None


class DoublyLinkedList:
    """A doubly linked list of ``(key, data)`` pairs with unique keys."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._index: dict[Any, _DoubleNode] = {}

    def _require_new(self, key: Any) -> None:
        if key in self._index:
            raise ValueError(f"a node with key {key!r} already exists")

    def _require(self, key: Any) -> _DoubleNode:
        try:
            return self._index[key]
        except KeyError:
            raise KeyError(f"no node with key {key!r}") from None

    def find(self, key: Any) -> Optional[Any]:
        """Return the data stored under ``key``, or None if there is no such node."""
        node = self._index.get(key)
        return None if node is None else node.data

    def append(self, key: Any, data: Any) -> None:
        """Add a node at the end of the list."""
        self._require_new(key)
        node = _DoubleNode(key, data, previous=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._index[key] = node

    def prepend(self, key: Any, data: Any) -> None:
        """Add a node at the front of the list."""
        self._require_new(key)
        node = _DoubleNode(key, data, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.previous = node
        self._head = node
        self._index[key] = node

    def insert_after(self, existing_key: Any, key: Any, data: Any) -> None:
        """Insert a new node directly after the node holding ``existing_key``."""
        anchor = self._require(existing_key)
        self._require_new(key)
        node = _DoubleNode(key, data, previous=anchor, next=anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.previous = node
        anchor.next = node
        self._index[key] = node

    def delete(self, key: Any) -> Any:
        """Unlink the node holding ``key`` and return its data."""
        node = self._require(key)
        if node.previous is None:
            self._head = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self._tail = node.previous
        else:
            node.next.previous = node.previous
        del self._index[key]
        return node.data

    def update(self, key: Any, data: Any) -> None:
        """Replace the data stored under ``key``."""
        self._require(key).data = data

    def items(self) -> list[tuple[Any, Any]]:
        """Return the ``(key, data)`` pairs from head to tail."""
        pairs = []
        node = self._head
        while node is not None:
            pairs.append((node.key, node.data))
            node = node.next
        return pairs


def _check_day(day: int, days: int) -> int:
    if not 1 <= day <= days:
        raise ValueError(f"day must be between 1 and {days}, got {day}")
    return day - 1


class DayLists:
    """One list of values per day of the week, days numbered from 1."""

    def __init__(self, days: int = 7) -> None:
        if days < 1:
            raise ValueError(f"there must be at least one day, got {days}")
        self.days = days
        self._lists = [SinglyLinkedList() for _ in range(days)]

    def add(self, day: int, value: Any) -> None:
        """Append ``value`` to the list of ``day``."""
        self._lists[_check_day(day, self.days)].append(value)

    def entries(self, day: int) -> list[Any]:
        """Return the values of ``day`` in the order they were added."""
        return list(self._lists[_check_day(day, self.days)])


class Timetable:
    """Per-day lists of ``(subject, slot)`` entries kept ordered by slot."""

    def __init__(self, days: int = 7) -> None:
        if days < 1:
            raise ValueError(f"there must be at least one day, got {days}")
        self.days = days
        self._lists: list[list[tuple[str, int]]] = [[] for _ in range(days)]

    def add(self, day: int, subject: str, slot: int) -> None:
        """Insert an entry so that the day's slots stay in non-decreasing order."""
        entries = self._lists[_check_day(day, self.days)]
        if not entries or entries[0][1] > slot:
            entries.insert(0, (subject, slot))
            return
        position = 1
        while position < len(entries) and entries[position][1] < slot:
            position += 1
        entries.insert(position, (subject, slot))

    def entries(self, day: int) -> list[tuple[str, int]]:
        """Return the day's ``(subject, slot)`` entries ordered by slot."""
        return list(self._lists[_check_day(day, self.days)])

    def busiest_day(self) -> Optional[int]:
        """Return the earliest day with the most entries, or None if all are empty."""
        best_day: Optional[int] = None
        best_count = 0
        for day, entries in enumerate(self._lists, start=1):
            if len(entries) > best_count:
                best_day, best_count = day, len(entries)
        return best_day