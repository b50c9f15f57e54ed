import pytest

from algokit.linked_list import (
    DoublyLinkedList,
    SinglyLinkedList,
    delete_node,
)

VALUES = [1, 2, 3, 4, 5]


def test_build_keeps_order():
    assert list(SinglyLinkedList(VALUES)) == VALUES
    assert len(SinglyLinkedList(VALUES)) == 5


def test_empty_list():
    empty = SinglyLinkedList()
    assert list(empty) == []
    assert len(empty) == 0


def test_append_builds_same_list():
    linked = SinglyLinkedList()
    for value in VALUES:
        linked.append(value)
    assert list(linked) == VALUES


def test_prepend_reverses_order():
    linked = SinglyLinkedList()
    for value in VALUES:
        linked.prepend(value)
    assert list(linked) == VALUES[::-1]


def test_delete_node_without_head():
    linked = SinglyLinkedList(VALUES)
    delete_node(linked.find(3))
    assert list(linked) == [1, 2, 4, 5]


def test_delete_last_node_without_head_rejected():
    linked = SinglyLinkedList(VALUES)
    with pytest.raises(ValueError):
        delete_node(linked.find(5))
    assert list(linked) == VALUES


def test_find_missing_value():
    with pytest.raises(ValueError):
        SinglyLinkedList(VALUES).find(42)


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5])
def test_delete_at_each_position(position):
    linked = SinglyLinkedList(VALUES)
    removed = linked.delete_at(position)
    expected = VALUES[: position - 1] + VALUES[position:]
    assert removed == VALUES[position - 1]
    assert list(linked) == expected


@pytest.mark.parametrize("position", [0, 6, -1])
def test_delete_at_out_of_range(position):
    linked = SinglyLinkedList(VALUES)
    with pytest.raises(IndexError):
        linked.delete_at(position)
    assert list(linked) == VALUES


def test_pop_first():
    linked = SinglyLinkedList(VALUES)
    assert linked.pop_first() == 1
    assert list(linked) == [2, 3, 4, 5]


def test_pop_last():
    linked = SinglyLinkedList(VALUES)
    assert linked.pop_last() == 5
    assert list(linked) == [1, 2, 3, 4]


def test_pop_last_single_node():
    linked = SinglyLinkedList([7])
    assert linked.pop_last() == 7
    assert list(linked) == []


@pytest.mark.parametrize("method", ["pop_first", "pop_last"])
def test_pop_from_empty(method):
    with pytest.raises(IndexError):
        getattr(SinglyLinkedList(), method)()


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5, 6])
def test_insert_each_position(position):
    linked = SinglyLinkedList(VALUES)
    linked.insert(position, 30)
    expected = VALUES[: position - 1] + [30] + VALUES[position - 1 :]
    assert list(linked) == expected


def test_insert_fifth_position():
    linked = SinglyLinkedList(VALUES)
    linked.insert(5, 30)
    assert list(linked) == [1, 2, 3, 4, 30, 5]


@pytest.mark.parametrize("position", [0, 7])
def test_insert_out_of_range(position):
    linked = SinglyLinkedList(VALUES)
    with pytest.raises(IndexError):
        linked.insert(position, 30)
    assert list(linked) == VALUES


def test_insert_then_delete_round_trip():
    linked = SinglyLinkedList(VALUES)
    linked.insert(3, 99)
    assert linked.delete_at(3) == 99
    assert list(linked) == VALUES


def test_doubly_forward_and_backward():
    linked = DoublyLinkedList(VALUES)
    assert list(linked) == VALUES
    assert list(reversed(linked)) == VALUES[::-1]
    assert len(linked) == 5


def test_doubly_links_are_consistent():
    linked = DoublyLinkedList(VALUES)
    node = linked.head
    while node.next is not None:
        assert node.next.prev is node
        node = node.next
    assert node is linked.tail
    assert linked.head.prev is None


def test_doubly_append_and_empty():
    linked = DoublyLinkedList()
    assert list(reversed(linked)) == []
    linked.append("a")
    linked.append("b")
    assert list(linked) == ["a", "b"]
    assert list(reversed(linked)) == ["b", "a"]
    assert len(linked) == 2