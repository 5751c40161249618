import io

import pytest

from algokit.linked_list import LinkedList, Node, main


@pytest.fixture
def kitchen():
    values = LinkedList()
    for item in ("Olla", "Estufa", "Jarra", "Plato"):
        values.add_first(item)
    return values


def test_node_links():
    tail = Node(5)
    head = Node(10, tail)
    assert head.next is tail
    assert head.next.data == 5
    assert tail.next is None


def test_add_first_reverses(kitchen):
    assert len(kitchen) == 4
    assert list(kitchen) == ["Plato", "Jarra", "Estufa", "Olla"]
    assert str(kitchen) == "Plato->Jarra->Estufa->Olla"


def test_source_scenario(kitchen):
    kitchen.add_last("Sarten")
    assert kitchen.find("Olla") == 3
    kitchen.update_data("Olla", "Cuchillo")
    kitchen.update_at(1, "Salero")
    assert list(kitchen) == ["Plato", "Salero", "Estufa", "Cuchillo", "Sarten"]
    assert kitchen.get(0) == "Plato"
    assert kitchen.get(2) == "Estufa"
    assert kitchen[0] == kitchen.get(0)
    assert kitchen[2] == kitchen.get(2)


def test_find_last_and_missing(kitchen):
    assert kitchen.find("Olla") == len(kitchen) - 1
    assert kitchen.find("Nada") == -1


def test_insert_goes_after_index():
    values = LinkedList(["a", "b"])
    values.insert(0, "x")
    assert list(values) == ["a", "x", "b"]
    values.insert(2, "y")
    assert list(values) == ["a", "x", "b", "y"]
    assert len(values) == 4


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_insert_out_of_range(index):
    values = LinkedList(["a", "b"])
    with pytest.raises(IndexError):
        values.insert(index, "x")
    assert list(values) == ["a", "b"]


def test_insert_into_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().insert(0, 1)


def test_get_out_of_range():
    values = LinkedList([1, 2])
    with pytest.raises(IndexError):
        values.get(2)
    with pytest.raises(IndexError):
        values[-1]


def test_update_errors():
    values = LinkedList([1, 2])
    with pytest.raises(ValueError):
        values.update_data(9, 0)
    with pytest.raises(IndexError):
        values.update_at(2, 0)


def test_delete_data_head_middle_tail():
    values = LinkedList([1, 2, 3, 4])
    values.delete_data(1)
    values.delete_data(3)
    values.delete_data(4)
    assert list(values) == [2]
    assert len(values) == 1
    with pytest.raises(ValueError):
        values.delete_data(7)


def test_delete_at():
    values = LinkedList([1, 2, 3, 4])
    values.delete_at(0)
    values.delete_at(2)
    assert list(values) == [2, 3]
    assert len(values) == 2
    with pytest.raises(IndexError):
        values.delete_at(2)


def test_assign_copies(kitchen):
    other = LinkedList(["z"])
    other.assign(kitchen)
    assert list(other) == list(kitchen)
    other.add_last("extra")
    assert len(kitchen) == 4
    kitchen.assign(kitchen)
    assert len(kitchen) == 4


def test_clear_and_empty(kitchen):
    assert not kitchen.is_empty()
    kitchen.clear()
    assert kitchen.is_empty()
    assert list(kitchen) == []
    assert str(kitchen) == ""


def test_main_menu(monkeypatch, capsys):
    script = "n\ny\n0\n5\ny\n1\n6\ny\n8\n6\nn\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "5->6" in out
    assert "0. addFirst" in out


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("n\ny\n5\n3\n"))
    assert main([]) == 0
    assert "Index out of range" in capsys.readouterr().out