# algokit

A small collection of classic data structures and algorithms written in
plain Python, with no runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.recursion` | Iterative and recursive sums, Fibonacci, growth models, powers, odd sums |
| `algokit.value_list` | `ValueList`, an append-only list with `max()` and bounds-checked `get()` |
| `algokit.timing` | `Stopwatch` (also a context manager), `format_elapsed`, `random_int_list` |
| `algokit.searching` | `linear_search`, `binary_search`, `binary_search_recursive`, `find_odd_pair_linear`, `find_odd_pair_binary` |
| `algokit.sorting` | Swap, bubble, selection, insertion, merge, quick and shell sort; the counting sorts return `SortStats` |
| `algokit.linked_list` | Singly linked `LinkedList` built from `Node` |
| `algokit.doubly_linked_list` | `DoublyLinkedList` built from `DNode`, with sort, duplicate and de-duplicate |
| `algokit.linked_queue` | Linked FIFO `Queue` |
| `algokit.linked_stack` | Linked LIFO `Stack` |
| `algokit.bst` | Binary search tree `BST` with traversals, height, ancestors and levels |
| `algokit.heap` | `MaxHeap`, `MinHeap` and an in-place `heap_sort` |
| `algokit.edge` | Frozen `Edge` between two vertices with an optional weight (default 0) |
| `algokit.matrix_graph` | `BoolMatrixGraph` and `WeightedMatrixGraph` adjacency matrices |
| `algokit.graph` | Adjacency-list `Graph` with BFS, DFS and Dijkstra |

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algokit.bst import BST
from algokit.heap import heap_sort
from algokit.graph import Graph
from algokit.edge import Edge
from algokit.searching import binary_search

tree = BST()
for value in (20, 10, 15, 5, 30, 35, 25, 18):
    tree.insert(value)
tree.inorder()        # [5, 10, 15, 18, 20, 25, 30, 35]
tree.height()         # 4

values = [3, 1, 2]
heap_sort(values, "max")   # sorts in place; values is now [3, 2, 1]

graph = Graph([0, 1, 2], [Edge(0, 1, 4), Edge(1, 2, 1), Edge(0, 2, 9)])
graph.bfs(0)          # [0, 1, 2]
graph.dijkstra(0)     # {vertex: ShortestPath(path, cost) or None if unreachable}

binary_search([1, 3, 5, 7], 5)  # 2; -1 when the value is missing
```

Operations that cannot proceed raise exceptions: reading outside a list or
popping an empty heap, queue or stack raises `IndexError`; adding a vertex
that already exists, adding an edge that `Graph` already holds, or naming a
vertex a graph does not have raises `ValueError`.

## Command-line programs

Each program is an interactive menu or a short demonstration reading from
standard input; they end at `exit` or at end of input.

```
algokit-recursion               # sums, Fibonacci, growth and powers
algokit-value-list              # ValueList walkthrough
algokit-search [search|pairs]   # search a random sorted list with timings, or the odd-pair demo
algokit-sort                    # sort a random list with a chosen algorithm, then search it
algokit-linked-list             # singly linked list menu
algokit-dll                     # doubly linked list menu
algokit-queue                   # queue menu
algokit-stack                   # stack menu
algokit-bst                     # binary search tree menu
algokit-heap                    # heap menu
algokit-graph                   # adjacency list and weighted matrix graph menu
```

`algokit-search` also takes `--size` (default 10000) and `--seed`;
`algokit-sort`, `algokit-linked-list`, `algokit-dll` and `algokit-heap` take
`--seed` for their random lists.

## What it does not do

Everything lives in memory: the menus do not save or load their data, and
the graph menu offers no BFS, DFS or Dijkstra commands — those are available
only through the `Graph` class.