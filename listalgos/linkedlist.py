"""Singly linked list nodes and the classic algorithms that work on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One node of a singly linked list of integers."""

    data: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list.

        Never ends on a cyclic list.
        """
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def from_values(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order; ``None`` when there are none."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Node | None) -> list[int]:
    """Return the values of a (non-cyclic) list as a Python list."""
    return [] if head is None else list(head)


def format_list(head: Node | None) -> str:
    """Render a list as ``1 -> 2 -> 3 -> NULL``."""
    return " -> ".join(str(value) for value in to_values(head)) + " -> NULL"


def reverse_list(head: Node | None) -> Node | None:
    """Reverse a list in place and return its new head."""
    prev: Node | None = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def find_middle(head: Node | None) -> Node:
    """Return the middle node; for an even length, the second of the two middles."""
    if head is None:
        raise ValueError("an empty list has no middle")
    slow = head
    fast: Node | None = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def has_cycle(head: Node | None) -> bool:
    """Tell whether following ``next`` links from ``head`` ever loops."""
    slow = head
    fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def make_cyclic(values: Iterable[int]) -> Node:
    """Build a list from ``values`` whose last node links back to the first."""
    head = from_values(values)
    if head is None:
        raise ValueError("a cyclic list needs at least one value")
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    return head


def merge_sorted(list1: Node | None, list2: Node | None) -> Node | None:
    """Merge two sorted lists by relinking their nodes; ties take ``list1`` first."""
    dummy = Node(0)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.data <= list2.data:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def remove_element(head: Node | None, val: int) -> Node | None:
    """Unlink every node holding ``val`` and return the new head."""
    while head is not None and head.data == val:
        head = head.next
    if head is None:
        return None
    prev = head
    current = head.next
    while current is not None:
        if current.data == val:
            prev.next = current.next
        else:
            prev = current
        current = current.next
    return head