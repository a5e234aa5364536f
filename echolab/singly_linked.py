"""A singly linked list of integers reachable from its head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = ["ListNode", "SinglyLinkedList"]


@dataclass(eq=False)
class ListNode:
    """One element of a singly linked list."""

    val: int
    next: ListNode | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list that keeps only its head; tail insertion walks the list."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: ListNode | None = None
        for value in values:
            self.insert_tail(value)

    @property
    def head(self) -> ListNode | None:
        return self._head

    def insert_head(self, value: int) -> ListNode:
        node = ListNode(value, self._head)
        self._head = node
        return node

    def insert_tail(self, value: int) -> ListNode:
        node = ListNode(value)
        if self._head is None:
            self._head = node
            return node
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def _nodes(self) -> Iterator[ListNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def delete_one(self, value: int) -> bool:
        """Remove the first node holding value; report whether one was removed."""
        if self._head is None:
            return False
        if self._head.val == value:
            self._head = self._head.next
            return True
        prev = self._head
        while prev.next is not None:
            if prev.next.val == value:
                prev.next = prev.next.next
                return True
            prev = prev.next
        return False

    def delete_all(self, value: int) -> int:
        """Remove every node holding value; return how many were removed."""
        removed = 0
        while self._head is not None and self._head.val == value:
            self._head = self._head.next
            removed += 1
        if self._head is None:
            return removed
        prev = self._head
        while prev.next is not None:
            if prev.next.val == value:
                prev.next = prev.next.next
                removed += 1
            else:
                prev = prev.next
        return removed

    def find(self, value: int) -> ListNode | None:
        """First node holding value, or None."""
        return next((node for node in self._nodes() if node.val == value), None)

    def change_one(self, old: int, new: int) -> bool:
        """Set the first node holding old to new; report whether one was found."""
        node = self.find(old)
        if node is None:
            return False
        node.val = new
        return True

    def change_all(self, old: int, new: int) -> int:
        """Set every node holding old to new; return how many were changed."""
        changed = 0
        for node in self._nodes():
            if node.val == old:
                node.val = new
                changed += 1
        return changed

    def format(self) -> str:
        """Values from head onwards, each followed by a space."""
        return "".join(f"{value} " for value in self)

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"