"""A last-in, first-out stack built on singly linked nodes."""

from __future__ import annotations

from itertools import islice
from typing import Any, Generic, Iterator, Optional, TextIO, TypeVar

from .nodes import Node

T = TypeVar("T")


class _NodeChain(Generic[T]):
    """Link handling shared by collections kept as a chain of forward links."""

    def __init__(self) -> None:
        self._head: Optional[Any] = None
        self._count = 0

    def _nodes(self) -> Iterator[Any]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _values(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def _format_values(self, label: str) -> str:
        return label + "".join(f"{value} " for value in self._values())

    def _last_node(self) -> Optional[Any]:
        last = None
        for last in self._nodes():
            pass
        return last

    def _find_node(self, index: int) -> Optional[Any]:
        if not 0 <= index < self._count:
            return None
        return next(islice(self._nodes(), index, None))

    def _node_at(self, index: int) -> Any:
        node = self._find_node(index)
        if node is None:
            raise IndexError("index out of range")
        return node

    def _set_value_at(self, index: int, value: T) -> bool:
        node = self._find_node(index)
        if node is None:
            return False
        node.value = value
        return True

    def _pop_head(self, message: str) -> T:
        head = self._head
        if head is None:
            raise IndexError(message)
        self._head = head.next
        head.next = None
        self._count -= 1
        return head.value

    def _link_after(self, index: int, value: T) -> Optional[Node[T]]:
        target = self._find_node(index)
        if target is None:
            return None
        target.next = Node(value, target.next)
        self._count += 1
        return target.next

    def _reverse_links(self) -> None:
        previous = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def _unlink_all(self) -> None:
        for node in list(self._nodes()):
            node.next = None
        self._head = None
        self._count = 0


class LinkedStack(_NodeChain[T]):
    """A stack with positional access; iteration runs from top to bottom."""

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return self._values()

    def is_empty(self) -> bool:
        return self._count == 0

    def get_item(self, index: int) -> T:
        """Return the value at ``index``, counting from the top."""
        return self._node_at(index).value

    def update_item(self, index: int, value: T) -> bool:
        """Set the value at ``index``; return whether the index existed."""
        return self._set_value_at(index, value)

    def print_values(self, file: Optional[TextIO] = None) -> None:
        """Print the values on one line, top to bottom."""
        print(self._format_values("Values: "), file=file)

    def push(self, value: T) -> None:
        self._head = Node(value, self._head)
        self._count += 1

    def pop(self) -> T:
        """Remove the top value and return it."""
        return self._pop_head("pop from an empty stack")

    def top(self) -> T:
        if self._head is None:
            raise IndexError("stack is empty")
        return self._head.value

    def bottom(self) -> T:
        last = self._last_node()
        if last is None:
            raise IndexError("stack is empty")
        return last.value

    def reverse(self) -> None:
        self._reverse_links()

    def clear(self) -> None:
        self._unlink_all()

    def insert_last(self, value: T) -> None:
        """Put ``value`` beneath every other value."""
        node = Node(value)
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node
        self._count += 1

    def insert_after(self, index: int, value: T) -> bool:
        """Insert ``value`` after position ``index``; return whether it existed."""
        return self._link_after(index, value) is not None