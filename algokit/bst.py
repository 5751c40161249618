"""A binary search tree that sends equal values to the right."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

EMPTY = "The BST is empty"
MENU = (
    "insert",
    "remove",
    "find",
    "print",
    "visit",
    "height",
    "ancestors",
    "whatLevelamI",
    "exit",
)


@dataclass(eq=False)
class TNode(Generic[T]):
    """A value with left and right subtrees."""

    data: T
    left: TNode[T] | None = None
    right: TNode[T] | None = None


def _preorder(node: TNode[Any] | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TNode[Any] | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: TNode[Any] | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def _height(node: TNode[Any] | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


class BST(Generic[T]):
    """Binary search tree; smaller values go left, the rest go right."""

    def __init__(self) -> None:
        self._root: TNode[T] | None = None

    def insert(self, data: T) -> None:
        """Add ``data`` as a new leaf."""
        if self._root is None:
            self._root = TNode(data)
            return
        node = self._root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = TNode(data)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TNode(data)
                    return
                node = node.right

    def find(self, data: T) -> bool:
        """Return whether ``data`` is in the tree."""
        node = self._root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right
        return False

    def remove(self, data: T) -> bool:
        """Remove one occurrence of ``data``; False if it is absent.

        A node with two children takes the largest value of its left subtree.
        """
        parent: TNode[T] | None = None
        went_left = False
        node = self._root
        while node is not None and not data == node.data:
            parent = node
            went_left = data < node.data
            node = node.left if went_left else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.data = pred.data
            if pred_parent is node:
                node.left = pred.left
            else:
                pred_parent.right = pred.left
            return True

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif went_left:
            parent.left = child
        else:
            parent.right = child
        return True

    def format(self) -> str:
        """Render the tree sideways: right subtree on top, two spaces per level."""
        if self._root is None:
            return EMPTY
        lines: list[str] = []

        def walk(node: TNode[T] | None, level: int) -> None:
            if node is not None:
                walk(node.right, level + 1)
                lines.append("  " * level + str(node.data))
                walk(node.left, level + 1)

        walk(self._root, 0)
        return "\n".join(lines)

    def visit(self, kind: int) -> list[T]:
        """Traverse: 1 preorder, 2 inorder, 3 postorder."""
        traversals = {1: self.preorder, 2: self.inorder, 3: self.postorder}
        if kind not in traversals:
            raise ValueError("Invalid option")
        return traversals[kind]()

    def preorder(self) -> list[T]:
        return list(_preorder(self._root))

    def inorder(self) -> list[T]:
        return list(_inorder(self._root))

    def postorder(self) -> list[T]:
        return list(_postorder(self._root))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return _height(self._root)

    def ancestors(self, data: T) -> list[T]:
        """Values on the search path to ``data``, farthest first.

        When ``data`` is absent the whole search path is returned.
        """
        path: list[T] = []
        node = self._root
        while node is not None and not data == node.data:
            path.append(node.data)
            node = node.left if data < node.data else node.right
        return path

    def level_of(self, data: T) -> int:
        """Tree height minus the depth of ``data``; -1 if it is absent."""
        depth = 0
        node = self._root
        while node is not None:
            if data == node.data:
                return self.height() - depth
            node = node.left if data < node.data else node.right
            depth += 1
        return -1

    def is_empty(self) -> bool:
        return self._root is None


def _arrows(values: Sequence[Any]) -> str:
    return "".join(f"{value}->" for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu over a tree of integers."""
    argparse.ArgumentParser(description="Binary search tree demo.").parse_args(argv)
    tree: BST[int] = BST()
    operation = ""
    try:
        while operation != "exit":
            print("Select an option:")
            for index, name in enumerate(MENU):
                print(f"{index}. {name}")
            try:
                operation = MENU[int(input().strip()) % len(MENU)]
                if operation == "insert":
                    tree.insert(int(input("Data to insert: ").strip()))
                elif operation == "remove":
                    tree.remove(int(input("Data to remove: ").strip()))
                elif operation == "find":
                    found = tree.find(int(input("Data to find: ").strip()))
                    print("Data found" if found else "Data not found")
                elif operation == "print":
                    print()
                    print(tree.format())
                    print()
                elif operation == "visit":
                    print("Select an option:")
                    print("1. Preorder")
                    print("2. Inorder")
                    print("3. Postorder")
                    kind = int(input().strip())
                    if kind in (1, 2, 3):
                        print(_arrows(tree.visit(kind)))
                elif operation == "height":
                    print(f"Height: {tree.height()}")
                elif operation == "ancestors":
                    path = tree.ancestors(int(input("Data to find ancestors: ").strip()))
                    print(f"Ancestors(farthest to closest): {_arrows(path)}")
                elif operation == "whatLevelamI":
                    level = tree.level_of(int(input("Data to find level: ").strip()))
                    print(f"Level: {level}")
            except ValueError as error:
                print(error)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())