"""Doubly linked list nodes and operations on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "DNode",
    "from_values",
    "to_values",
    "delete_last_node",
    "reverse_dll",
    "add_node",
]


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list; nodes compare by identity."""

    data: int = 0
    prev: DNode | None = field(default=None, repr=False)
    next: DNode | None = field(default=None, repr=False)


def from_values(values: Iterable[int]) -> DNode | None:
    """Build a doubly linked list and return its head, or None if empty."""
    head = tail = None
    for value in values:
        node = DNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: DNode | None) -> list[int]:
    """Return the values in forward order."""
    values = []
    while head is not None:
        values.append(head.data)
        head = head.next
    return values


def delete_last_node(head: DNode | None) -> DNode | None:
    """Remove the last node; a list of at most one node becomes empty."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next.prev = None
    node.next = None
    return head


def reverse_dll(head: DNode | None) -> DNode | None:
    """Reverse the list in place and return the new head."""
    new_head = head
    node = head
    while node is not None:
        node.prev, node.next = node.next, node.prev
        new_head = node
        node = node.prev
    return new_head


def add_node(head: DNode | None, pos: int, data: int) -> DNode | None:
    """Insert a node after the node at index pos; out of range leaves the list as is."""
    if head is None:
        return head
    node = head
    for _ in range(pos):
        node = node.next
        if node is None:
            return head
    new = DNode(data, prev=node, next=node.next)
    if node.next is not None:
        node.next.prev = new
    node.next = new
    return head