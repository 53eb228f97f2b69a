"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["LinkedList"]


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list of values addressed by zero-based position."""

    def __init__(self) -> None:
        self.head: _Node | None = None

    def is_empty(self) -> bool:
        """Tell whether the list holds no values."""
        return self.head is None

    def insert_at_beginning(self, value: int) -> None:
        """Put a value in front of the list."""
        self.head = _Node(value, self.head)

    def insert_at_end(self, value: int) -> None:
        """Append a value to the list."""
        new = _Node(value)
        if self.head is None:
            self.head = new
            return
        node = self.head
        while node.next is not None:
            node = node.next
        node.next = new

    def _node_before(self, pos: int) -> _Node:
        node = self.head
        for _ in range(pos - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError("position out of range")
        return node

    def insert_at_position(self, pos: int, value: int) -> None:
        """Insert a value so that it ends up at index pos."""
        if pos < 0:
            raise ValueError("position should be >= 0")
        if pos == 0:
            self.insert_at_beginning(value)
            return
        prev = self._node_before(pos)
        prev.next = _Node(value, prev.next)

    def delete_from_beginning(self) -> None:
        """Remove the first value."""
        if self.head is None:
            raise IndexError("list is empty")
        self.head = self.head.next

    def delete_from_end(self) -> None:
        """Remove the last value."""
        if self.head is None:
            raise IndexError("list is empty")
        if self.head.next is None:
            self.head = None
            return
        node = self.head
        while node.next.next is not None:
            node = node.next
        node.next = None

    def delete_from_position(self, pos: int) -> None:
        """Remove the value at index pos."""
        if pos < 0:
            raise ValueError("position should be >= 0")
        if pos == 0:
            self.delete_from_beginning()
            return
        prev = self._node_before(pos)
        if prev.next is None:
            raise IndexError("position out of range")
        prev.next = prev.next.next

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return " -> ".join([*map(str, self), "null"])