"""A first-in, first-out queue built on linked nodes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from algokit.linked_list import Node

T = TypeVar("T")

EMPTY = "Queue is empty"
MENU = ("push", "pop", "front", "print", "exit")


class Queue(Generic[T]):
    """FIFO queue with O(1) push and pop."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, data: T) -> None:
        """Add ``data`` at the back."""
        node = Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front element."""
        if self._head is None:
            raise IndexError(EMPTY)
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def front(self) -> T:
        """Return the front element without removing it."""
        if self._head is None:
            raise IndexError(EMPTY)
        return self._head.data

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return " ".join(["Queue:", *(str(value) for value in self)])


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu over a queue of integers."""
    argparse.ArgumentParser(description="Queue demo.").parse_args(argv)
    queue: Queue[int] = Queue()
    operation = ""
    try:
        while operation != "exit":
            print("Select an option:")
            for index, name in enumerate(MENU):
                print(f"{index}. {name}")
            try:
                operation = MENU[int(input().strip()) % len(MENU)]
                if operation == "push":
                    queue.push(int(input("Enter the data: ").strip()))
                    print(queue)
                elif operation == "pop":
                    try:
                        print(f"removed front: {queue.pop()}")
                    except IndexError as error:
                        print(error)
                    print(queue)
                elif operation == "front":
                    print(f"front: {queue.front()}")
                elif operation == "print":
                    print(queue)
                else:
                    print("Exit")
            except (IndexError, ValueError) as error:
                print(error)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())