"""A singly linked list with positional and value-based operations."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar

from algokit.timing import random_int_list

T = TypeVar("T")

OUT_OF_RANGE = "Index out of range"
NOT_FOUND = "Data not found"

MENU = (
    "addFirst",
    "addlast",
    "insert",
    "deleteData",
    "deleteAt",
    "getData",
    "updateData",
    "updateAt",
    "findData",
    "[]getData",
    "[]updateat",
    "=operator",
)


@dataclass(eq=False)
class Node(Generic[T]):
    """A value and a link to the following node."""

    data: T
    next: Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list; indices run from 0 and are never negative."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Node[T] | None = None
        self._size = 0
        for item in items:
            self.add_last(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node[T]:
        if not 0 <= index < self._size:
            raise IndexError(OUT_OF_RANGE)
        return next(islice(self._nodes(), index, None))

    def add_first(self, data: T) -> None:
        """Put ``data`` at the front."""
        self._head = Node(data, self._head)
        self._size += 1

    def add_last(self, data: T) -> None:
        """Put ``data`` at the end."""
        node = Node(data)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def insert(self, index: int, data: T) -> None:
        """Insert ``data`` right after the element at ``index``."""
        node = self._node_at(index)
        node.next = Node(data, node.next)
        self._size += 1

    def find(self, data: T) -> int:
        """Return the index of the first ``data``, or -1."""
        for index, node in enumerate(self._nodes()):
            if node.data == data:
                return index
        return -1

    def update_data(self, data: T, new_data: T) -> None:
        """Replace the first occurrence of ``data`` with ``new_data``."""
        for node in self._nodes():
            if node.data == data:
                node.data = new_data
                return
        raise ValueError(NOT_FOUND)

    def update_at(self, index: int, data: T) -> None:
        """Replace the element at ``index``."""
        self._node_at(index).data = data

    def delete_data(self, data: T) -> None:
        """Remove the first occurrence of ``data``."""
        previous: Node[T] | None = None
        node = self._head
        while node is not None:
            if node.data == data:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous, node = node, node.next
        raise ValueError(NOT_FOUND)

    def delete_at(self, index: int) -> None:
        """Remove the element at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(OUT_OF_RANGE)
        if index == 0:
            assert self._head is not None
            self._head = self._head.next
        else:
            previous = self._node_at(index - 1)
            assert previous.next is not None
            previous.next = previous.next.next
        self._size -= 1

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._node_at(index).data

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def assign(self, other: Iterable[T]) -> None:
        """Replace the contents with a copy of ``other``."""
        items = list(other)
        self.clear()
        for item in items:
            self.add_last(item)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "->".join(str(value) for value in self)


def _ask_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _run(operation: str, values: LinkedList[int]) -> None:
    match operation:
        case "addFirst":
            values.add_first(_ask_int("data: "))
            print(values)
        case "addlast":
            values.add_last(_ask_int("data: "))
            print(values)
        case "insert":
            index = _ask_int("index: ")
            values.insert(index, _ask_int("data: "))
            print(values)
        case "deleteData":
            values.delete_data(_ask_int("data: "))
            print(values)
        case "deleteAt":
            values.delete_at(_ask_int("index: "))
            print(values)
        case "getData":
            print(values.get(_ask_int("index: ")))
        case "updateData":
            data = _ask_int("data: ")
            values.update_data(data, _ask_int("newData: "))
            print(values)
        case "updateAt" | "[]updateat":
            index = _ask_int("index: ")
            values.update_at(index, _ask_int("newData: "))
            print(values)
        case "findData":
            print(values.find(_ask_int("data: ")))
        case "[]getData":
            print(values[_ask_int("index: ")])
        case "=operator":
            copy: LinkedList[int] = LinkedList()
            copy.assign(values)
            print(values)
            print(copy)
        case _:
            print("invalid option")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu over a linked list of integers."""
    parser = argparse.ArgumentParser(description="Linked list demo.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    values: LinkedList[int] = LinkedList()
    try:
        if input("create a random list? (y/n): ").strip() == "y":
            quantity = _ask_int("quantity: ")
            values.assign(random_int_list(quantity, random.Random(args.seed)))
            print(values)
        while input("keep going? (y/n): ").strip() == "y":
            for index, name in enumerate(MENU):
                print(f"{index}. {name}")
            try:
                option = _ask_int("select an option: ")
                _run(MENU[option % len(MENU)], values)
            except (IndexError, ValueError) as error:
                print(error)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())