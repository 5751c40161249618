import pytest

from algokit.doubly_linked_list import DNode, DoublyLinkedList


def consistent(dll):
    forward = list(dll)
    return list(reversed(dll)) == forward[::-1] and len(dll) == len(forward)


def test_demo_insert_after_index():
    dll = DoublyLinkedList()
    dll.add_last(3)
    dll.add_last(2)
    dll.add_last(1)
    dll.insert(0, 0)
    assert dll.format("asc") == "3->0->2->1"
    assert consistent(dll)


def test_dnode_links():
    tail = DNode(5)
    head = DNode(10, tail, None)
    assert head.next is tail
    assert tail.prev is None and tail.next is None


def test_add_first_and_last_order():
    dll = DoublyLinkedList()
    dll.add_last(2)
    dll.add_first(1)
    dll.add_last(3)
    assert list(dll) == [1, 2, 3]
    assert consistent(dll)


def test_format_descending_is_reverse():
    dll = DoublyLinkedList([1, 2, 3])
    assert dll.format("dsc") == "->".join(str(v) for v in reversed([1, 2, 3]))
    assert str(dll) == dll.format("asc")


def test_format_unknown_mode():
    with pytest.raises(ValueError):
        DoublyLinkedList([1]).format("sideways")


def test_insert_at_end_updates_tail():
    dll = DoublyLinkedList([1, 2])
    dll.insert(1, 9)
    assert list(reversed(dll))[0] == 9
    assert consistent(dll)


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_out_of_range(index):
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.insert(index, 7)


def test_insert_into_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().insert(0, 1)


def test_get_from_both_halves():
    items = [10, 20, 30, 40, 50, 60]
    dll = DoublyLinkedList(items)
    assert [dll.get(i) for i in range(len(items))] == items
    assert [dll[i] for i in range(len(items))] == items


@pytest.mark.parametrize("index", [-1, 4])
def test_get_out_of_range(index):
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2, 3, 4]).get(index)


def test_setitem_and_update_at():
    dll = DoublyLinkedList([1, 2, 3, 4, 5])
    dll[4] = 50
    dll.update_at(0, 10)
    assert dll[4] == 50 and dll[0] == 10
    with pytest.raises(IndexError):
        dll[5] = 1


def test_find():
    dll = DoublyLinkedList(["a", "b", "a"])
    assert dll.find("a") == 0
    assert dll.find("b") == 1
    assert dll.find("z") == -1


def test_update_data():
    dll = DoublyLinkedList([1, 2, 2])
    dll.update_data(2, 7)
    assert dll.find(7) == 1
    assert dll[2] == 2
    with pytest.raises(ValueError):
        dll.update_data(99, 1)


def test_delete_at():
    dll = DoublyLinkedList([1, 2, 3, 4])
    assert dll.delete_at(3) is True
    assert dll.delete_at(0) is True
    assert list(dll) == [2, 3]
    assert dll.delete_at(2) is False
    assert dll.delete_at(-1) is False
    assert consistent(dll)


def test_delete_data():
    dll = DoublyLinkedList([5, 6, 5])
    assert dll.delete_data(5) is True
    assert list(dll) == [6, 5]
    assert dll.delete_data(42) is False
    assert consistent(dll)


def test_delete_last_element_empties():
    dll = DoublyLinkedList([1])
    assert dll.delete_data(1) is True
    assert dll.is_empty()
    assert list(reversed(dll)) == []


def test_assign_copies():
    source = DoublyLinkedList([3, 1, 2])
    target = DoublyLinkedList([9])
    target.assign(source)
    assert list(target) == list(source)
    target[0] = 100
    assert source[0] == 3


def test_assign_self():
    dll = DoublyLinkedList([1, 2])
    dll.assign(dll)
    assert list(dll) == [1, 2]


def test_clear():
    dll = DoublyLinkedList([1, 2, 3])
    dll.clear()
    assert dll.is_empty()
    assert len(dll) == 0
    assert list(dll) == []


def test_sort():
    items = [5, 3, 9, 1, 3, 7]
    dll = DoublyLinkedList(items)
    dll.sort()
    assert list(dll) == sorted(items)
    assert consistent(dll)


def test_duplicate():
    items = [1, 2, 3]
    dll = DoublyLinkedList(items)
    dll.duplicate()
    result = list(dll)
    assert len(dll) == 2 * len(items)
    assert result[::2] == items
    assert result[1::2] == items
    assert consistent(dll)


def test_remove_duplicates():
    items = [4, 1, 4, 2, 1, 4]
    dll = DoublyLinkedList(items)
    dll.remove_duplicates()
    assert list(dll) == list(dict.fromkeys(items))
    assert consistent(dll)


def test_duplicate_then_remove_restores():
    items = [3, 1, 2]
    dll = DoublyLinkedList(items)
    dll.duplicate()
    dll.remove_duplicates()
    assert list(dll) == items
    assert consistent(dll)