"""Singly and doubly linked lists with positional insertion and deletion.

Positions are 1-based: position 1 is the first node.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Node",
    "SinglyLinkedList",
    "DoublyNode",
    "DoublyLinkedList",
    "delete_node",
]


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


@dataclass(eq=False, repr=False)
class DoublyNode:
    """A node of a doubly linked list."""

    data: Any
    next: DoublyNode | None = None
    prev: DoublyNode | None = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.data!r})"


def delete_node(node: Node) -> None:
    """Remove ``node`` from its list without access to the head.

    The following node's value is moved into ``node`` and the following node
    is unlinked, so ``node`` must not be the last node.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node without the head")
    node.data = following.data
    node.next = following.next


class SinglyLinkedList:
    """A singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} is out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = Node(value)
        last = self._last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the beginning."""
        self.head = Node(value, self.head)

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        if position < 1:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            self.prepend(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if position < 1 or self.head is None:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            return self.pop_first()
        previous = self._node_at(position - 1)
        removed = previous.next
        if removed is None:
            raise IndexError(f"position {position} is out of range")
        previous.next = removed.next
        return removed.data

    def pop_first(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        removed = self.head
        self.head = removed.next
        return removed.data

    def pop_last(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            return self.pop_first()
        node = self.head
        while node.next is not None and node.next.next is not None:
            node = node.next
        removed = node.next
        node.next = None
        return removed.data

    def find(self, value: Any) -> Node:
        """Return the first node holding ``value``."""
        for node in self._nodes():
            if node.data == value:
                return node
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = DoublyNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"