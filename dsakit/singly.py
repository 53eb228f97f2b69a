"""Singly linked list nodes and the classic two-pointer algorithms on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "ListNode",
    "from_values",
    "to_values",
    "has_cycle",
    "detect_cycle",
    "loop_length",
    "middle_node",
    "delete_middle",
    "remove_nth_from_end",
    "delete_node",
    "odd_even_list",
    "is_palindrome",
    "reverse_list",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list from the values and return its head, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def _meeting_point(head: ListNode | None) -> ListNode | None:
    """Return the node where the slow and fast pointers meet, or None."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from head ever revisits a node."""
    return _meeting_point(head) is not None


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None if there is none."""
    meet = _meeting_point(head)
    if meet is None:
        return None
    slow = head
    while slow is not meet:
        slow = slow.next
        meet = meet.next
    return slow


def loop_length(head: ListNode | None) -> int:
    """Return the number of nodes in the cycle, or 0 if there is none."""
    meet = _meeting_point(head)
    if meet is None:
        return 0
    count = 1
    node = meet.next
    while node is not meet:
        count += 1
        node = node.next
    return count


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Unlink the middle node (index len // 2) and return the head."""
    if head is None or head.next is None:
        return None
    slow, fast = head, head.next
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end (1-based) and return the head."""
    count = len(to_values(head))
    if not 1 <= n <= count:
        raise IndexError(f"n must be between 1 and {count}, got {n}")
    if n == count:
        return head.next
    prev = head
    for _ in range(count - n - 1):
        prev = prev.next
    prev.next = prev.next.next
    return head


def delete_node(node: ListNode) -> None:
    """Delete a non-tail node in place by taking over its successor."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the tail node in place")
    node.val = successor.val
    node.next = successor.next


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Regroup nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd, even = head, head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the values read the same both ways; the list is left intact."""
    middle = middle_node(head)
    tail = reverse_list(middle)
    try:
        first, second = head, tail
        while second is not None:
            if first.val != second.val:
                return False
            first = first.next
            second = second.next
        return True
    finally:
        reverse_list(tail)