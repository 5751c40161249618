"""A doubly linked list that walks from whichever end is nearer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

OUT_OF_RANGE = "Index out of range"
NOT_FOUND = "Data not found"


@dataclass(eq=False)
class DNode(Generic[T]):
    """A value with links to the following and the preceding node."""

    data: T
    next: DNode[T] | None = None
    prev: DNode[T] | None = None


class DoublyLinkedList(Generic[T]):
    """A doubly linked list; indices run from 0 and are never negative."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: DNode[T] | None = None
        self._tail: DNode[T] | None = None
        self._size = 0
        for item in items:
            self.add_last(item)

    def _nodes(self) -> Iterator[DNode[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _nodes_reversed(self) -> Iterator[DNode[T]]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def _node_at(self, index: int) -> DNode[T]:
        if not 0 <= index < self._size:
            raise IndexError(OUT_OF_RANGE)
        if index <= (self._size - 1) // 2:
            walk, steps = self._nodes(), index
        else:
            walk, steps = self._nodes_reversed(), self._size - 1 - index
        for position, node in enumerate(walk):
            if position == steps:
                return node
        raise IndexError(OUT_OF_RANGE)

    def _unlink(self, node: DNode[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def add_first(self, data: T) -> None:
        """Put ``data`` at the front."""
        node = DNode(data, self._head, None)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_last(self, data: T) -> None:
        """Put ``data`` at the end."""
        node = DNode(data, None, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, index: int, data: T) -> None:
        """Insert ``data`` right after the element at ``index``."""
        anchor = self._node_at(index)
        node = DNode(data, anchor.next, anchor)
        anchor.next = node
        if node.next is None:
            self._tail = node
        else:
            node.next.prev = node
        self._size += 1

    def find(self, data: T) -> int:
        """Return the index of the first ``data``, or -1."""
        for index, node in enumerate(self._nodes()):
            if node.data == data:
                return index
        return -1

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._node_at(index).data

    def update_at(self, index: int, data: T) -> None:
        """Replace the element at ``index``."""
        self._node_at(index).data = data

    def update_data(self, data: T, new_data: T) -> None:
        """Replace the first occurrence of ``data`` with ``new_data``."""
        for node in self._nodes():
            if node.data == data:
                node.data = new_data
                return
        raise ValueError(NOT_FOUND)

    def delete_at(self, index: int) -> bool:
        """Remove the element at ``index``; False if the index is invalid."""
        try:
            node = self._node_at(index)
        except IndexError:
            return False
        self._unlink(node)
        return True

    def delete_data(self, data: T) -> bool:
        """Remove the first occurrence of ``data``; False if it is absent."""
        for node in self._nodes():
            if node.data == data:
                self._unlink(node)
                return True
        return False

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, data: T) -> None:
        self.update_at(index, data)

    def assign(self, other: Iterable[T]) -> None:
        """Replace the contents with a copy of ``other``."""
        items = list(other)
        self.clear()
        for item in items:
            self.add_last(item)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def sort(self) -> None:
        """Sort the values in ascending order, in place."""
        for node in self._nodes():
            other = node.next
            while other is not None:
                if node.data > other.data:
                    node.data, other.data = other.data, node.data
                other = other.next

    def duplicate(self) -> None:
        """Follow every element with a copy of itself."""
        node = self._head
        while node is not None:
            following = node.next
            copy = DNode(node.data, following, node)
            node.next = copy
            if following is None:
                self._tail = copy
            else:
                following.prev = copy
            node = following
        self._size *= 2

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each value."""
        for node in self._nodes():
            other = node.next
            while other is not None:
                following = other.next
                if other.data == node.data:
                    self._unlink(other)
                other = following

    def format(self, mode: str = "asc") -> str:
        """Render the values joined by arrows, front to back ("asc") or back to front ("dsc")."""
        if mode == "asc":
            values: Iterable[T] = self
        elif mode == "dsc":
            values = reversed(self)
        else:
            raise ValueError(f"unknown mode: {mode!r}")
        return "->".join(str(value) for value in values)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        return (node.data for node in self._nodes_reversed())

    def __str__(self) -> str:
        return self.format("asc")