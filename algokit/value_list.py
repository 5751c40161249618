"""A small growable list that reports empty and out-of-range access."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class ValueList(Generic[T]):
    """An append-only list with bounds-checked access."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def insert(self, elem: T) -> None:
        """Append ``elem`` at the end."""
        self._items.append(elem)

    def remove_last(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("Empty list")
        return self._items.pop()

    def get(self, pos: int) -> T:
        """Return the element at ``pos``; negative positions are rejected."""
        if 0 <= pos < len(self._items):
            return self._items[pos]
        raise IndexError("Index out of range")

    def max(self) -> T:
        """Return the largest element (the first one on ties)."""
        if not self._items:
            raise IndexError("Empty list")
        return max(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        rows = [f"[{index}] - {value}" for index, value in enumerate(self._items)]
        return "\n".join(["List:", *rows])


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the list, printing each step and each error."""
    argparse.ArgumentParser(description="Bounds-checked list demo.").parse_args(argv)
    values: ValueList[int] = ValueList()

    try:
        print(f"Max value: {values.max()}")
    except IndexError as error:
        print(error)

    try:
        removed = values.remove_last()
        print(f"Last element removed: {removed}")
    except IndexError as error:
        print(error)

    for number in (3, 4, 10):
        values.insert(number)
        print("value inserted successfully")
    print(f"Last element removed: {values.remove_last()}")
    values.insert(15)
    print("value inserted successfully")

    print(values)
    print(f"Size: {len(values)}")

    for label, action in (
        ("Max value: ", values.max),
        ("Value at index [1]: ", lambda: values.get(1)),
        ("Value at index [-1]: ", lambda: values.get(-1)),
    ):
        try:
            print(f"{label}{action()}")
        except IndexError as error:
            print(error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())