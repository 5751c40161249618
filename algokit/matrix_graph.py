"""Directed graphs stored as adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from algokit.edge import Edge

T = TypeVar("T")

VERTEX_EXISTS = "Vertex already exists"
VERTEX_MISSING = "Vertex does not exist"
ENDPOINT_MISSING = "Source or target vertex does not exist"


class _MatrixGraph(Generic[T]):
    def __init__(self, vertices: Iterable[T] = ()) -> None:
        self._vertices: list[T] = list(vertices)

    @property
    def vertices(self) -> list[T]:
        return list(self._vertices)

    def _index(self, vertex: T) -> int:
        try:
            return self._vertices.index(vertex)
        except ValueError:
            return -1

    def _endpoints(self, source: T, target: T) -> tuple[int, int]:
        source_index = self._index(source)
        target_index = self._index(target)
        if source_index == -1 or target_index == -1:
            raise ValueError(ENDPOINT_MISSING)
        return source_index, target_index

    def _header(self) -> str:
        return "   " + "".join(f" {vertex}" for vertex in self._vertices)


class BoolMatrixGraph(_MatrixGraph[T]):
    """Unweighted directed graph; edges to unknown vertices are ignored."""

    def __init__(self, vertices: Iterable[T] = (), edges: Iterable[Edge[T]] = ()) -> None:
        super().__init__(vertices)
        size = len(self._vertices)
        self._matrix = [[False] * size for _ in range(size)]
        for edge in edges:
            source, target = self._index(edge.source), self._index(edge.target)
            if source != -1 and target != -1:
                self._matrix[source][target] = True

    def has_edge(self, source: T, target: T) -> bool:
        """Whether an arc runs from ``source`` to ``target``."""
        row, column = self._endpoints(source, target)
        return self._matrix[row][column]

    def format(self) -> str:
        """Render the matrix with T/F cells under a header of vertex names."""
        lines = [self._header()]
        for vertex, row in zip(self._vertices, self._matrix):
            lines.append(f"{vertex} - " + "".join("T " if cell else "F " for cell in row))
        return "\n".join(lines)


class WeightedMatrixGraph(_MatrixGraph[T]):
    """Weighted directed graph; a weight of 0 means no edge."""

    def __init__(self, vertices: Iterable[T] = (), edges: Iterable[Edge[T]] = ()) -> None:
        super().__init__(vertices)
        size = len(self._vertices)
        self._matrix = [[0] * size for _ in range(size)]
        for edge in edges:
            source, target = self._index(edge.source), self._index(edge.target)
            if source != -1 and target != -1:
                self._matrix[source][target] = edge.weight

    def add_vertex(self, vertex: T) -> None:
        """Add a new, unconnected vertex."""
        if self._index(vertex) != -1:
            raise ValueError(VERTEX_EXISTS)
        self._vertices.append(vertex)
        for row in self._matrix:
            row.append(0)
        self._matrix.append([0] * len(self._vertices))

    def add_edge(self, edge: Edge[T]) -> None:
        """Set the weight of the arc described by ``edge``."""
        row, column = self._endpoints(edge.source, edge.target)
        self._matrix[row][column] = edge.weight

    def remove_vertex(self, vertex: T) -> None:
        """Remove ``vertex`` and every arc touching it."""
        index = self._index(vertex)
        if index == -1:
            raise ValueError(VERTEX_MISSING)
        del self._vertices[index]
        del self._matrix[index]
        for row in self._matrix:
            del row[index]

    def remove_edge(self, edge: Edge[T]) -> None:
        """Clear the arc from ``edge.source`` to ``edge.target``."""
        row, column = self._endpoints(edge.source, edge.target)
        self._matrix[row][column] = 0

    def weight(self, source: T, target: T) -> int:
        """Weight of the arc from ``source`` to ``target``; 0 if there is none."""
        row, column = self._endpoints(source, target)
        return self._matrix[row][column]

    def format(self) -> str:
        """Render the weight matrix under a header of vertex names."""
        lines = [self._header()]
        for vertex, row in zip(self._vertices, self._matrix):
            lines.append(f"{vertex} - " + "".join(f"{cell} " for cell in row))
        return "\n".join(lines)