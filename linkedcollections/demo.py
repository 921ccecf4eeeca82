"""Walk-through of the three linked collections, printed step by step."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Optional, Sequence, TextIO

from .doubly_linked_list import DoublyLinkedList
from .linked_queue import LinkedQueue
from .linked_stack import LinkedStack
from .nodes import DoublyNode

_SAMPLE = (10, 20, 30, 40, 50)


def _show(out: TextIO, title: str, collection: Any, action: Callable[[], Any] = lambda: None) -> None:
    """Print ``title``, run ``action`` and print the collection's values."""
    print(title, file=out)
    action()
    collection.print_values(out)


def _answer(out: TextIO, title: str, value: Any) -> None:
    """Print a heading followed by a value, booleans in lower case."""
    text = str(value).lower() if isinstance(value, bool) else str(value)
    print(f"\n■ {title}{text}", file=out)


def _fresh_list(
    numbers: DoublyLinkedList[int], values: Sequence[int]
) -> list[DoublyNode[int]]:
    nodes = [DoublyNode(value) for value in values]
    for node in nodes:
        numbers.insert_first(node)
    return nodes


def run_doubly_linked_list_demo(file: Optional[TextIO] = None) -> None:
    out = sys.stdout if file is None else file
    numbers: DoublyLinkedList[int] = DoublyLinkedList()
    nodes: list[DoublyNode[int]] = []
    _show(out, "■ After Insert First Nodes", numbers,
          lambda: nodes.extend(_fresh_list(numbers, [11, 22, 33, 44, 55])))
    _, second, _, fourth, _ = nodes

    found = numbers.find_node(fourth)
    _answer(out, "Node Found = ", found.value)

    steps: list[tuple[str, Callable[[], Any]]] = [
        ("Insert First Found Node", lambda: numbers.insert_first(DoublyNode(found.value))),
        ("Insert After Node", lambda: numbers.insert_after(fourth, DoublyNode(66))),
        ("Insert Last Node", lambda: numbers.insert_last(DoublyNode(777))),
        ("Delete Node", lambda: numbers.delete_node(second)),
        ("Delete First Node", numbers.delete_first),
        ("Delete Last Node", numbers.delete_last),
    ]
    for title, action in steps:
        _show(out, f"\n■ After {title}", numbers, action)

    _answer(out, "Count of Nodes: ", len(numbers))
    _answer(out, "Is Empty?\n", numbers.is_empty())

    _show(out, "\n■ After Clear Nodes:", numbers, numbers.clear)

    def refill_and_reverse() -> None:
        _fresh_list(numbers, [11, 22, 33, 44, 55])
        numbers.reverse()

    _show(out, "\n■ After Reverse Nodes:", numbers, refill_and_reverse)

    index = 2
    for label in ("Node", "Node Value"):
        _answer(out, f"{label} of {index} is: ", numbers.get_item(index))
    _answer(out, "Is Updated?\n", numbers.update_item(index, 333))
    numbers.print_values(out)

    _show(out, "\n■ After Insert After by Index:", numbers,
          lambda: numbers.insert_value_after(3, 666))


def run_queue_demo(file: Optional[TextIO] = None) -> None:
    out = sys.stdout if file is None else file
    values: LinkedQueue[int] = LinkedQueue()

    _show(out, "■ After Enqueue Values: ", values,
          lambda: [values.enqueue(value) for value in _SAMPLE])

    def dequeue_twice() -> None:
        values.dequeue()
        values.dequeue()

    _show(out, "\n■ After Dequeue Values: ", values, dequeue_twice)

    _answer(out, "Count of Values: ", len(values))
    _answer(out, "Front Value: ", values.front())
    _answer(out, "Rear (Back) Value: ", values.rear())
    _answer(out, "Is Empty?\n", values.is_empty())
    _answer(out, "Get Item: ", values.get_item(1))
    _answer(out, "Update Item?\n", values.update_item(2, 22))
    values.print_values(out)

    _show(out, "\n■ After Reverse Nodes:", values, values.reverse)
    _show(out, "\n■ After Clear Nodes:", values, values.clear)
    _show(out, "\n■ After Insert First Nodes:", values,
          lambda: [values.insert_first(value) for value in _SAMPLE])
    _show(out, "\n■ After Insert After Node:", values,
          lambda: values.insert_after(1, 666))


def run_stack_demo(file: Optional[TextIO] = None) -> None:
    out = sys.stdout if file is None else file
    values: LinkedStack[int] = LinkedStack()

    _show(out, "■ After Push:", values,
          lambda: [values.push(value) for value in _SAMPLE])

    _answer(out, "Is Empty?\n", values.is_empty())
    _answer(out, "Top = ", values.top())
    _answer(out, "Bottom = ", values.bottom())

    _show(out, "\n■ After Pop:", values, values.pop)

    _answer(out, "Get Item: ", values.get_item(2))

    _show(out, "\n■ After Reverse:", values, values.reverse)

    _answer(out, "After Update Item:\n", values.update_item(1, 22))
    values.print_values(out)

    _show(out, "\n■ After Clear:", values, values.clear)
    _show(out, "\n■ After Insert Last:", values,
          lambda: [values.insert_last(value) for value in _SAMPLE])

    _answer(out, "After Insert After:\n", values.insert_after(4, 666))
    values.print_values(out)


_DEMOS = {
    "list": run_doubly_linked_list_demo,
    "queue": run_queue_demo,
    "stack": run_stack_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show the linked collections at work.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which collection to show (default: all)",
    )
    args = parser.parse_args(argv)
    selected = _DEMOS.values() if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in selected:
        demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())