from linkedcollections.nodes import DoublyNode, Node


def test_node_defaults_to_no_value_and_no_link():
    node = Node()
    assert node.value is None
    assert node.next is None


def test_node_chain_can_be_walked():
    third = Node(3)
    second = Node(2, third)
    first = Node(1, second)
    values = []
    current = first
    while current is not None:
        values.append(current.value)
        current = current.next
    assert values == [1, 2, 3]


def test_nodes_compare_by_identity():
    node = Node(5)
    assert node == node
    assert (Node(5) == Node(5)) is False


def test_doubly_node_links_both_ways():
    left = DoublyNode("a")
    right = DoublyNode("b", previous=left)
    left.next = right
    assert left.next.previous is left
    assert right.previous.next is right


def test_doubly_node_repr_does_not_follow_links():
    left = DoublyNode(1)
    right = DoublyNode(2, previous=left)
    left.next = right
    assert repr(left) == "DoublyNode(value=1)"


def test_value_can_be_replaced():
    node = DoublyNode(10)
    node.value = 20
    assert node.value == 20