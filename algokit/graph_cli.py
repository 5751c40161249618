"""Interactive menu editing a list graph and a matrix graph side by side."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algokit.edge import Edge
from algokit.graph import Graph
from algokit.matrix_graph import WeightedMatrixGraph

MENU = ("addVertex", "addEdge", "removeVertex", "removeEdge", "print", "exit")


def _ask_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _run(operation: str, graph: Graph[int], matrix: WeightedMatrixGraph[int]) -> None:
    match operation:
        case "addVertex":
            vertex = _ask_int("Enter vertex: ")
            graph.add_vertex(vertex)
            matrix.add_vertex(vertex)
        case "addEdge":
            source = _ask_int("Enter source: ")
            target = _ask_int("Enter target: ")
            edge = Edge(source, target, _ask_int("Enter weight: "))
            graph.add_edge(edge)
            matrix.add_edge(edge)
        case "removeVertex":
            vertex = _ask_int("Enter vertex: ")
            graph.remove_vertex(vertex)
            matrix.remove_vertex(vertex)
        case "removeEdge":
            source = _ask_int("Enter source: ")
            edge = Edge(source, _ask_int("Enter target: "))
            graph.remove_edge(edge)
            matrix.remove_edge(edge)
        case "print":
            print("List Graph:")
            print(graph.format())
            print()
            print("Matrix Weighted Graph:")
            print(matrix.format())
            print()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu until the user picks exit or input ends."""
    argparse.ArgumentParser(description="Graph demo.").parse_args(argv)
    graph: Graph[int] = Graph()
    matrix: WeightedMatrixGraph[int] = WeightedMatrixGraph()
    operation = ""
    try:
        while operation != "exit":
            print("Select an option:")
            for index, name in enumerate(MENU):
                print(f"{index}. {name}")
            try:
                operation = MENU[_ask_int("") % len(MENU)]
                _run(operation, graph, matrix)
            except ValueError as error:
                print(error)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())