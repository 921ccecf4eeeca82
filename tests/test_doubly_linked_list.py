import io

import pytest

from linkedcollections.doubly_linked_list import DoublyLinkedList
from linkedcollections.nodes import DoublyNode


def _build(values):
    items = DoublyLinkedList()
    nodes = [DoublyNode(value) for value in values]
    for node in nodes:
        items.insert_last(node)
    return items, nodes


def _check_links(items):
    assert list(items.iter_backward()) == list(reversed(list(items)))
    assert len(list(items)) == len(items)


def test_insert_first_puts_nodes_in_front():
    items = DoublyLinkedList()
    for value in [11, 22, 33, 44, 55]:
        items.insert_first(DoublyNode(value))
    assert list(items) == [55, 44, 33, 22, 11]
    _check_links(items)


@pytest.mark.parametrize(
    "values, backward, expected",
    [
        ([1, 2], False, "Nodes Values: 1 2 \n"),
        ([], False, "Nodes Values: \n"),
        ([1, 2], True, "Nodes Values Backward: 2 1 "),
    ],
)
def test_printed_text(values, backward, expected):
    items, _ = _build(values)
    sink = io.StringIO()
    if backward:
        items.print_values_backward(sink)
    else:
        items.print_values(sink)
    assert sink.getvalue() == expected


def test_find_node_returns_member_or_none():
    items, nodes = _build([5, 6, 7])
    assert items.find_node(nodes[1]) is nodes[1]
    assert items.find_node(DoublyNode(6)) is None


def test_insert_after_middle_and_tail():
    items, nodes = _build([1, 2, 3])
    items.insert_after(nodes[0], DoublyNode(9))
    items.insert_after(nodes[2], DoublyNode(8))
    assert list(items) == [1, 9, 2, 3, 8]
    assert len(items) == 5
    _check_links(items)


@pytest.mark.parametrize("foreign", [True, False])
def test_insert_after_rejects_bad_nodes(foreign):
    items, nodes = _build([1])
    with pytest.raises(ValueError):
        if foreign:
            items.insert_after(DoublyNode(1), DoublyNode(2))
        else:
            items.insert_after(nodes[0], None)
    assert list(items) == [1]


def test_insert_last_on_empty_and_none():
    items = DoublyLinkedList()
    items.insert_last(DoublyNode(4))
    assert list(items) == [4]
    with pytest.raises(ValueError):
        items.insert_last(None)


@pytest.mark.parametrize("position", [0, 1, 2])
def test_delete_node_at_each_position(position):
    values = [10, 20, 30]
    items, nodes = _build(values)
    items.delete_node(nodes[position])
    assert list(items) == values[:position] + values[position + 1:]
    assert len(items) == 2
    _check_links(items)


@pytest.mark.parametrize(
    "values, target, pattern",
    [([], DoublyNode(1), "empty"), ([1, 2], DoublyNode(1), "not found"), ([1, 2], None, "no node")],
)
def test_delete_node_errors(values, target, pattern):
    items, _ = _build(values)
    with pytest.raises(ValueError, match=pattern):
        items.delete_node(target)


def test_delete_first_and_last_return_values():
    items, _ = _build([1, 2, 3])
    assert items.delete_first() == 1
    assert items.delete_last() == 3
    assert list(items) == [2]
    assert items.delete_last() == 2
    assert items.is_empty() is True


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_on_empty_raises(method):
    with pytest.raises(IndexError, match="list is empty"):
        getattr(DoublyLinkedList(), method)()


def test_clear_empties_list():
    items, _ = _build([1, 2, 3])
    items.clear()
    assert (len(items), items.is_empty(), list(items)) == (0, True, [])


@pytest.mark.parametrize("values", [[11, 22, 33, 44, 55], [7], []])
def test_reverse(values):
    items, _ = _build(values)
    items.reverse()
    assert list(items) == values[::-1]
    _check_links(items)
    items.insert_last(DoublyNode(99))
    assert list(items)[-1] == 99


def test_get_node_and_item():
    items, nodes = _build([11, 22, 33])
    assert items.get_node(2) is nodes[2]
    assert items.get_item(1) == 22


@pytest.mark.parametrize("index", [3, -1, 100])
def test_get_item_out_of_range(index):
    items, _ = _build([11, 22, 33])
    with pytest.raises(IndexError):
        items.get_item(index)


def test_update_item():
    items, _ = _build([11, 22, 33])
    assert items.update_item(2, 333) is True
    assert list(items) == [11, 22, 333]
    assert items.update_item(3, 1) is False


def test_insert_value_after():
    items, _ = _build([1, 2, 3])
    node = items.insert_value_after(1, 666)
    assert node.value == 666
    assert list(items) == [1, 2, 666, 3]
    _check_links(items)
    with pytest.raises(IndexError):
        items.insert_value_after(4, 5)