"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list with insertion at either end."""

    def __init__(self) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self._first is None

    def insert_back(self, value: int) -> None:
        """Append *value* at the end of the list."""
        node = _Node(value)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node

    def insert_front(self, value: int) -> None:
        """Prepend *value* at the start of the list."""
        node = _Node(value, self._first)
        self._first = node
        if self._last is None:
            self._last = node

    def find(self, value: int) -> bool:
        """Return True if some node holds *value*."""
        return any(data == value for data in self)

    def __iter__(self) -> Iterator[int]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(data == value for data in self)

    def render(self) -> str:
        """Return the values separated by spaces."""
        return " ".join(str(data) for data in self)