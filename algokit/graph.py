"""A directed, weighted graph stored as adjacency lists."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from algokit.edge import Edge
from algokit.matrix_graph import VERTEX_EXISTS, VERTEX_MISSING

T = TypeVar("T")

EDGE_EXISTS = "Edge already exists"
ENDPOINT_MISSING = "One of the vertices does not exist"
SOURCE_MISSING = "Source vertex does not exist"


@dataclass
class ShortestPath(Generic[T]):
    """A cheapest route from the start vertex and its total weight."""

    path: list[T] = field(default_factory=list)
    cost: int = 0

    def __str__(self) -> str:
        return " ".join(str(vertex) for vertex in self.path) + f" - {self.cost}"


class Graph(Generic[T]):
    """Directed graph; every vertex keeps the list of arcs leaving it."""

    def __init__(self, vertices: Iterable[T] = (), edges: Iterable[Edge[T]] = ()) -> None:
        self._vertices: list[T] = list(vertices)
        self._adjacency: list[list[Edge[T]]] = [[] for _ in self._vertices]
        for edge in edges:
            source = self._index(edge.source)
            if source != -1 and self._index(edge.target) != -1:
                self._adjacency[source].append(edge)

    @property
    def vertices(self) -> list[T]:
        return list(self._vertices)

    @property
    def edges(self) -> list[Edge[T]]:
        """Every arc, grouped by source in vertex order."""
        return [edge for arcs in self._adjacency for edge in arcs]

    def neighbors(self, vertex: T) -> list[Edge[T]]:
        """Arcs leaving ``vertex``."""
        index = self._index(vertex)
        if index == -1:
            raise ValueError(VERTEX_MISSING)
        return list(self._adjacency[index])

    def _index(self, vertex: T) -> int:
        try:
            return self._vertices.index(vertex)
        except ValueError:
            return -1

    def _require(self, vertex: T) -> int:
        index = self._index(vertex)
        if index == -1:
            raise ValueError(VERTEX_MISSING)
        return index

    def add_vertex(self, vertex: T) -> None:
        """Add a new, unconnected vertex."""
        if self._index(vertex) != -1:
            raise ValueError(VERTEX_EXISTS)
        self._vertices.append(vertex)
        self._adjacency.append([])

    def add_edge(self, edge: Edge[T]) -> None:
        """Add an arc; both ends must exist and the arc must be new."""
        source = self._index(edge.source)
        if source == -1 or self._index(edge.target) == -1:
            raise ValueError(ENDPOINT_MISSING)
        if any(arc.target == edge.target for arc in self._adjacency[source]):
            raise ValueError(EDGE_EXISTS)
        self._adjacency[source].append(edge)

    def remove_vertex(self, vertex: T) -> None:
        """Remove ``vertex`` together with every arc touching it."""
        index = self._require(vertex)
        for arcs in self._adjacency:
            arcs[:] = [arc for arc in arcs if arc.target != vertex]
        del self._vertices[index]
        del self._adjacency[index]

    def remove_edge(self, edge: Edge[T]) -> None:
        """Remove the arcs from ``edge.source`` to ``edge.target``, if any."""
        source = self._index(edge.source)
        if source == -1:
            raise ValueError(SOURCE_MISSING)
        arcs = self._adjacency[source]
        arcs[:] = [arc for arc in arcs if arc.target != edge.target]

    def bfs(self, vertex: T) -> list[T]:
        """Vertices reachable from ``vertex`` in breadth-first order."""
        start = self._require(vertex)
        visited = [False] * len(self._vertices)
        visited[start] = True
        order: list[T] = []
        pending: deque[int] = deque([start])
        while pending:
            current = pending.popleft()
            order.append(self._vertices[current])
            for arc in self._adjacency[current]:
                neighbor = self._index(arc.target)
                if not visited[neighbor]:
                    visited[neighbor] = True
                    pending.append(neighbor)
        return order

    def dfs(self, vertex: T) -> list[T]:
        """Vertices reachable from ``vertex`` in depth-first order."""
        start = self._require(vertex)
        visited = [False] * len(self._vertices)
        visited[start] = True
        order = [self._vertices[start]]
        stack: list[Iterator[Edge[T]]] = [iter(self._adjacency[start])]
        while stack:
            for arc in stack[-1]:
                neighbor = self._index(arc.target)
                if not visited[neighbor]:
                    visited[neighbor] = True
                    order.append(self._vertices[neighbor])
                    stack.append(iter(self._adjacency[neighbor]))
                    break
            else:
                stack.pop()
        return order

    def _closest_unvisited(self, visited: list[bool], cost: list[float]) -> int:
        best, best_cost = -1, math.inf
        for index, (done, value) in enumerate(zip(visited, cost)):
            if not done and value < best_cost:
                best, best_cost = index, value
        return best

    def dijkstra(self, vertex: T) -> dict[T, ShortestPath[T] | None]:
        """Cheapest route from ``vertex`` to every vertex; None where unreachable."""
        start = self._require(vertex)
        size = len(self._vertices)
        visited = [False] * size
        cost: list[float] = [math.inf] * size
        previous = [-1] * size
        cost[start] = 0
        current = start
        while current != -1:
            visited[current] = True
            for arc in self._adjacency[current]:
                neighbor = self._index(arc.target)
                if not visited[neighbor] and cost[neighbor] > cost[current] + arc.weight:
                    cost[neighbor] = cost[current] + arc.weight
                    previous[neighbor] = current
            current = self._closest_unvisited(visited, cost)

        result: dict[T, ShortestPath[T] | None] = {}
        for index, name in enumerate(self._vertices):
            if cost[index] == math.inf:
                result[name] = None
                continue
            route = []
            step = index
            while step != -1:
                route.append(self._vertices[step])
                step = previous[step]
            route.reverse()
            result[name] = ShortestPath(route, int(cost[index]))
        return result

    def format(self) -> str:
        """One line per vertex listing its arcs as "target weight - "."""
        return "\n".join(
            f"{vertex} - " + "".join(f"{arc.target} {arc.weight} - " for arc in arcs)
            for vertex, arcs in zip(self._vertices, self._adjacency)
        )