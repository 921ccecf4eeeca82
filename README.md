# linkedcollections

Small collections built from linked nodes.

- `linkedcollections.doubly_linked_list.DoublyLinkedList`: a doubly linked
  list whose callers work with `DoublyNode` objects directly. Nodes can be
  inserted at the front (`insert_first`), at the back (`insert_last`) or after
  a node already in the list (`insert_after`). A new value can also be inserted
  after an index (`insert_value_after`, which returns the new node). The list
  can delete a given node (`delete_node`), the first or last node
  (`delete_first`, `delete_last`, which return the removed value), find a node
  (`find_node`), reverse itself in place, and read or update by index
  (`get_node`, `get_item`, `update_item`). `iter_backward()` yields the values
  from last to first.
- `linkedcollections.linked_queue.LinkedQueue`: a singly linked FIFO queue
  with `enqueue`, `dequeue` (returns the value), `front`, `rear`, plus
  `get_item`, `update_item`, `reverse`, `clear`, `insert_first` and
  `insert_after(index, value)`.
- `linkedcollections.linked_stack.LinkedStack`: a singly linked LIFO stack
  with `push`, `pop` (returns the value), `top`, `bottom`, plus `get_item`,
  `update_item`, `reverse`, `clear`, `insert_last` and
  `insert_after(index, value)`. Index 0 is the top.
- `linkedcollections.nodes`: the `Node` and `DoublyNode` dataclasses behind
  them. Each has a `value` and links to its neighbours.

All three collections support `len()`, iteration from first to last, and
`is_empty()`. `print_values(file)` prints the values on one line. With no
file given, it prints to standard output.

### Errors

- Reading from an empty collection raises `IndexError`. This covers `front`,
  `rear`, `top`, `bottom`, `dequeue`, `pop`, `delete_first` and `delete_last`.
- Reading by an index that is out of range raises `IndexError`. This covers
  `get_item` and `get_node`.
- `update_item` returns `False` when the index is out of range. So does
  `insert_after(index, value)` on the queue and the stack.
- On the doubly linked list, `insert_after`, `insert_last` and `delete_node`
  raise `ValueError` when a node is missing or is not in the list.

## Installation

```
pip install .
```

## Usage

```python
from linkedcollections.doubly_linked_list import DoublyLinkedList
from linkedcollections.nodes import DoublyNode
from linkedcollections.linked_queue import LinkedQueue
from linkedcollections.linked_stack import LinkedStack

numbers = DoublyLinkedList()
for value in (11, 22, 33):
    numbers.insert_first(DoublyNode(value))
print(list(numbers))               # [33, 22, 11]
numbers.reverse()
print(list(numbers))               # [11, 22, 33]
numbers.insert_value_after(1, 666)
print(list(numbers))               # [11, 22, 666, 33]

queue = LinkedQueue()
for value in (10, 20, 30):
    queue.enqueue(value)
queue.dequeue()
print(queue.front(), queue.rear()) # 20 30

stack = LinkedStack()
for value in (10, 20, 30):
    stack.push(value)
print(stack.top(), stack.bottom()) # 30 10
```

## Demo

The `linkedcollections-demo` command walks through the operations and prints each step:

```
linkedcollections-demo          # all three collections
linkedcollections-demo list     # only the doubly linked list
linkedcollections-demo queue
linkedcollections-demo stack
```

The same walk-throughs can be run from code. Call `run_doubly_linked_list_demo`, `run_queue_demo` or `run_stack_demo` in `linkedcollections.demo`. Each takes an optional text stream to print to.

## Tests

```
pip install .[test]
pytest
```