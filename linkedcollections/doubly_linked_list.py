"""A doubly linked list whose callers work with the nodes themselves."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO, TypeVar

from .linked_stack import _NodeChain
from .nodes import DoublyNode

T = TypeVar("T")


class DoublyLinkedList(_NodeChain[T]):
    """A list of ``DoublyNode`` objects linked in both directions."""

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return self._values()

    def is_empty(self) -> bool:
        return self._count == 0

    def get_item(self, index: int) -> T:
        """Return the value at ``index``."""
        return self._node_at(index).value

    def update_item(self, index: int, value: T) -> bool:
        """Set the value at ``index``; return whether the index existed."""
        return self._set_value_at(index, value)

    def print_values(self, file: Optional[TextIO] = None) -> None:
        """Print the values on one line, first to last."""
        print(self._format_values("Nodes Values: "), file=file)

    def iter_backward(self) -> Iterator[T]:
        """Yield the values from the last node to the first."""
        current = self._last_node()
        while current is not None:
            yield current.value
            current = current.previous

    def print_values_backward(self, file: Optional[TextIO] = None) -> None:
        text = "".join(f"{value} " for value in self.iter_backward())
        print("Nodes Values Backward: " + text, end="", file=file)

    def insert_first(self, node: DoublyNode[T]) -> None:
        """Put ``node`` at the front of the list."""
        node.previous = None
        node.next = self._head
        if self._head is not None:
            self._head.previous = node
        self._head = node
        self._count += 1

    def find_node(self, target: Optional[DoublyNode[T]]) -> Optional[DoublyNode[T]]:
        """Return ``target`` if it is one of this list's nodes, else ``None``."""
        return next((node for node in self._nodes() if node is target), None)

    def insert_after(
        self, previous_node: Optional[DoublyNode[T]], node: Optional[DoublyNode[T]]
    ) -> None:
        """Link ``node`` right after ``previous_node``."""
        found = self.find_node(previous_node) if previous_node is not None else None
        if found is None or node is None:
            raise ValueError("can't insert after: node is missing or not in the list")
        node.next = found.next
        node.previous = found
        if found.next is not None:
            found.next.previous = node
        found.next = node
        self._count += 1

    def insert_last(self, node: Optional[DoublyNode[T]]) -> None:
        """Put ``node`` at the end of the list."""
        if node is None:
            raise ValueError("can't insert last: no node given")
        node.next = None
        tail = self._last_node()
        node.previous = tail
        if tail is None:
            self._head = node
        else:
            tail.next = node
        self._count += 1

    def delete_node(self, target: Optional[DoublyNode[T]]) -> None:
        """Unlink ``target`` from the list."""
        if self._head is None or target is None:
            raise ValueError("can't delete: list is empty or no node given")
        if self.find_node(target) is None:
            raise ValueError("node not found")
        if target.previous is None:
            self._head = target.next
        else:
            target.previous.next = target.next
        if target.next is not None:
            target.next.previous = target.previous
        target.previous = target.next = None
        self._count -= 1

    def delete_first(self) -> T:
        """Remove the first node and return its value."""
        value = self._pop_head("can't delete first: list is empty")
        if self._head is not None:
            self._head.previous = None
        return value

    def delete_last(self) -> T:
        """Remove the last node and return its value."""
        tail = self._last_node()
        if tail is None:
            raise IndexError("can't delete last: list is empty")
        if tail.previous is None:
            self._head = None
        else:
            tail.previous.next = None
        tail.previous = None
        self._count -= 1
        return tail.value

    def clear(self) -> None:
        for node in self._nodes():
            node.previous = None
        self._unlink_all()

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        nodes = list(self._nodes())
        for node in nodes:
            node.previous, node.next = node.next, node.previous
        if nodes:
            self._head = nodes[-1]

    def get_node(self, index: int) -> DoublyNode[T]:
        """Return the node at ``index``."""
        return self._node_at(index)

    def insert_value_after(self, index: int, value: T) -> DoublyNode[T]:
        """Insert a new node holding ``value`` after the node at ``index``."""
        node = DoublyNode(value)
        self.insert_after(self.get_node(index), node)
        return node