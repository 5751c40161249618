"""A last-in, first-out stack built on linked nodes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from algokit.linked_list import Node

T = TypeVar("T")

EMPTY = "Stack is empty"
MENU = ("push", "pop", "top", "print", "exit")


class Stack(Generic[T]):
    """LIFO stack; iteration runs from top to bottom."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Node[T] | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, data: T) -> None:
        """Put ``data`` on top."""
        self._head = Node(data, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top element."""
        if self._head is None:
            raise IndexError(EMPTY)
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """Return the top element without removing it."""
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
        if self.is_empty():
            return EMPTY
        return " ".join(["Stack:", *(str(value) for value in self)])


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu over a stack of integers."""
    argparse.ArgumentParser(description="Stack demo.").parse_args(argv)
    stack: Stack[int] = Stack()
    operation = ""
    try:
        while operation != "exit":
            print("Select an option:")
            for index, name in enumerate(MENU):
                print(f"{index}. {name}")
            try:
                operation = MENU[int(input().strip()) % len(MENU)]
                if operation == "push":
                    stack.push(int(input("Enter the data: ").strip()))
                    print(stack)
                elif operation == "pop":
                    print(f"Top: {stack.pop()}")
                    print(stack)
                elif operation == "top":
                    print(f"Top: {stack.top()}")
                elif operation == "print":
                    print(stack)
                else:
                    print("Exit")
            except (IndexError, ValueError) as error:
                print(error)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())