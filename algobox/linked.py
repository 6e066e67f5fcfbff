"""Singly linked lists: building, merging and laying out in a spiral."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

__all__ = [
    "ListNode",
    "linked_list_from",
    "linked_list_values",
    "merge_two_lists",
    "merge_k_lists",
    "spiral_matrix",
]


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def linked_list_from(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def linked_list_values(head: Optional[ListNode]) -> list[int]:
    """The values of a linked list, head first."""
    return list(head) if head is not None else []


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list, reusing their nodes."""
    dummy = ListNode(-1)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of ascending lists, folding from the last one backwards."""
    if not lists:
        return None
    if len(lists) == 1:
        return lists[0]
    head = merge_two_lists(lists[-1], lists[-2])
    for node in reversed(lists[:-2]):
        head = merge_two_lists(head, node)
    return head


def _spiral_positions(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Fill an ``m`` by ``n`` grid clockwise from the top left with the list's values.

    Cells left over hold -1; values beyond ``m * n`` are ignored.
    """
    matrix = [[-1] * n for _ in range(m)]
    values: Iterable[int] = head if head is not None else ()
    for (row, col), value in zip(_spiral_positions(m, n), values):
        matrix[row][col] = value
    return matrix