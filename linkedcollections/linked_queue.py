"""A first-in, first-out queue built on singly linked nodes."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO, TypeVar

from .linked_stack import _NodeChain
from .nodes import Node

T = TypeVar("T")


class LinkedQueue(_NodeChain[T]):
    """A queue with positional access, kept as a chain of nodes."""

    def __init__(self) -> None:
        super().__init__()
        self._tail: Optional[Node[T]] = None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return self._values()

    def is_empty(self) -> bool:
        return self._count == 0

    def get_item(self, index: int) -> T:
        """Return the value at ``index``, counting from the front."""
        return self._node_at(index).value

    def update_item(self, index: int, value: T) -> bool:
        """Set the value at ``index``; return whether the index existed."""
        return self._set_value_at(index, value)

    def print_values(self, file: Optional[TextIO] = None) -> None:
        """Print the values on one line, front to back."""
        print(self._format_values("Values: "), file=file)

    def enqueue(self, value: T) -> None:
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def dequeue(self) -> T:
        """Remove the front value and return it."""
        value = self._pop_head("dequeue from an empty queue")
        if self._head is None:
            self._tail = None
        return value

    def front(self) -> T:
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def rear(self) -> T:
        if self._tail is None:
            raise IndexError("queue is empty")
        return self._tail.value

    def reverse(self) -> None:
        self._tail = self._head
        self._reverse_links()

    def clear(self) -> None:
        self._unlink_all()
        self._tail = None

    def insert_first(self, value: T) -> None:
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._count += 1

    def insert_after(self, index: int, value: T) -> bool:
        """Insert ``value`` after position ``index``; return whether it existed."""
        node = self._link_after(index, value)
        if node is None:
            return False
        if node.next is None:
            self._tail = node
        return True