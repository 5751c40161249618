"""Binary max-heap and min-heap kept in a flat list, plus heap sort."""

from __future__ import annotations

import argparse
import operator
import random
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

from algokit.timing import random_int_list

T = TypeVar("T")

EMPTY = "Heap is empty"
MENU = (
    "create_random_list",
    "heap_sort",
    "push",
    "pop",
    "top",
    "getSize",
    "print",
    "exit",
)

_Higher = Callable[[Any, Any], bool]


def _swap(heap: list[Any], a: int, b: int) -> None:
    heap[a], heap[b] = heap[b], heap[a]


def _sift_down(heap: list[Any], father: int, higher: _Higher) -> None:
    size = len(heap)
    while father * 2 + 1 < size:
        first = father * 2 + 1
        second = first + 1
        if second < size:
            best = first if higher(heap[first], heap[second]) else second
        else:
            best = first
        if not higher(heap[best], heap[father]):
            return
        _swap(heap, father, best)
        father = best


def _sift_up(heap: list[Any], higher: _Higher) -> None:
    son = len(heap) - 1
    while son > 0:
        father = (son - 1) // 2
        if not higher(heap[son], heap[father]):
            return
        _swap(heap, father, son)
        son = father


def _heapify(items: Iterable[Any], higher: _Higher) -> list[Any]:
    heap = list(items)
    for father in range(len(heap) // 2 - 1, -1, -1):
        _sift_down(heap, father, higher)
    return heap


def _pop(heap: list[Any], higher: _Higher) -> Any:
    if not heap:
        raise IndexError(EMPTY)
    first = heap[0]
    _swap(heap, 0, len(heap) - 1)
    heap.pop()
    _sift_down(heap, 0, higher)
    return first


def _top(heap: list[Any]) -> Any:
    if not heap:
        raise IndexError(EMPTY)
    return heap[0]


class MaxHeap(Generic[T]):
    """Heap whose top is the largest element."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap: list[T] = _heapify(items, operator.gt)

    def push(self, data: T) -> None:
        """Add ``data`` and restore the heap order."""
        self._heap.append(data)
        _sift_up(self._heap, operator.gt)

    def pop(self) -> T:
        """Remove and return the largest element."""
        return _pop(self._heap, operator.gt)

    def top(self) -> T:
        """Return the largest element without removing it."""
        return _top(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def to_list(self) -> list[T]:
        """Copy of the underlying array in heap order."""
        return list(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._heap)


class MinHeap(Generic[T]):
    """Heap whose top is the smallest element."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap: list[T] = _heapify(items, operator.lt)

    def push(self, data: T) -> None:
        """Add ``data`` and restore the heap order."""
        self._heap.append(data)
        _sift_up(self._heap, operator.lt)

    def pop(self) -> T:
        """Remove and return the smallest element."""
        return _pop(self._heap, operator.lt)

    def top(self) -> T:
        """Return the smallest element without removing it."""
        return _top(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def to_list(self) -> list[T]:
        """Copy of the underlying array in heap order."""
        return list(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._heap)


def heap_sort(values: MutableSequence[Any], kind: str) -> None:
    """Sort ``values`` in place: "max" gives descending, "min" ascending order."""
    heaps = {"max": MaxHeap, "min": MinHeap}
    if kind not in heaps:
        raise ValueError(f"unknown heap type: {kind!r}")
    heap = heaps[kind](values)
    values[:] = [heap.pop() for _ in range(len(values))]


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu over a max-heap of integers."""
    parser = argparse.ArgumentParser(description="Heap demo.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    values: list[int] = []
    heap: MaxHeap[int] = MaxHeap()
    operation = ""
    try:
        while operation != "exit":
            print("Select an option:")
            for index, name in enumerate(MENU):
                print(f"{index}. {name}")
            try:
                operation = MENU[int(input().strip()) % len(MENU)]
                if operation == "create_random_list":
                    quantity = int(input("Size of the list: ").strip())
                    values.extend(random_int_list(quantity, rng))
                    heap = MaxHeap(values)
                elif operation == "heap_sort":
                    kind = input("Type of heap (max/min): ").strip()
                    values = heap.to_list()
                    heap_sort(values, kind)
                    print(" ".join(str(value) for value in values))
                elif operation == "push":
                    heap.push(int(input("Data: ").strip()))
                elif operation == "pop":
                    print(heap.pop())
                elif operation == "top":
                    print(heap.top())
                elif operation == "getSize":
                    print(f"Size: {len(heap)}")
                elif operation == "print":
                    kind = input("Type of heap (max/min): ").strip()
                    if kind == "max":
                        print(heap)
                    elif kind == "min":
                        print(MinHeap(heap.to_list()))
            except (IndexError, ValueError) as error:
                print(error)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())