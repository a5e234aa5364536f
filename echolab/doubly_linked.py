"""A doubly linked list of integers with head and tail insertion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = ["Node", "DoublyLinkedList"]


@dataclass(eq=False)
class Node:
    """One element of a doubly linked list."""

    val: int
    prev: Node | None = field(default=None, repr=False)
    next: Node | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A non-circular doubly linked list that keeps both a head and a tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.insert_tail(value)

    def front(self) -> int:
        """Value at the head; IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("front of an empty list")
        return self._head.val

    def back(self) -> int:
        """Value at the tail; IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("back of an empty list")
        return self._tail.val

    def insert_head(self, value: int) -> Node:
        node = Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._size += 1
        return node

    def insert_tail(self, value: int) -> Node:
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _unlink(self, node: Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    def delete_one(self, value: int) -> bool:
        """Remove the first node holding value; report whether one was removed."""
        node = self.find(value)
        if node is None:
            return False
        self._unlink(node)
        return True

    def delete_all(self, value: int) -> int:
        """Remove every node holding value; return how many were removed."""
        removed = 0
        for node in self._nodes():
            if node.val == value:
                self._unlink(node)
                removed += 1
        return removed

    def find(self, value: int) -> Node | None:
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
        """Values from head to tail, each followed by a space."""
        return "".join(f"{value} " for value in self)

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.val
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"