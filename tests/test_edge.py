import dataclasses

import pytest

from algokit.edge import Edge


def test_default_weight_is_zero():
    edge = Edge("A", "B")
    assert edge.weight == 0
    assert (edge.source, edge.target) == ("A", "B")


def test_weighted_edge():
    edge = Edge(8, 0, 5)
    assert (edge.source, edge.target, edge.weight) == (8, 0, 5)


def test_equality_by_value():
    assert Edge(1, 2, 3) == Edge(1, 2, 3)
    assert not Edge(1, 2, 3) == Edge(2, 1, 3)


def test_edges_are_immutable():
    edge = Edge(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.weight = 4
    assert edge.weight == 0