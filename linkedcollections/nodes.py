"""Node types that back the linked collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A singly linked node holding one value."""

    value: Optional[T] = None
    next: Optional[Node[T]] = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyNode(Generic[T]):
    """A node linked both to its predecessor and to its successor."""

    value: Optional[T] = None
    previous: Optional[DoublyNode[T]] = field(default=None, repr=False)
    next: Optional[DoublyNode[T]] = field(default=None, repr=False)