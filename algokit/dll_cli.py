"""Interactive menu over a doubly linked list of integers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from algokit.doubly_linked_list import DoublyLinkedList
from algokit.timing import random_int_list

MENU = (
    "addfirst",
    "addlast",
    "insert",
    "deleteData",
    "deleteAt",
    "getData",
    "updateData",
    "updateAt",
    "findData",
    "[]getData",
    "=operator",
    "clear",
    "sort",
    "duplicate",
    "removeDuplicates",
)


def _ask_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _run(operation: str, values: DoublyLinkedList[int]) -> None:
    match operation:
        case "addfirst":
            values.add_first(_ask_int("data: "))
            print(values)
        case "addlast":
            values.add_last(_ask_int("data: "))
            print(values)
        case "insert":
            data = _ask_int("data: ")
            values.insert(_ask_int("index: "), data)
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
            values.update_data(data, _ask_int("new data: "))
            print(values)
        case "updateAt":
            index = _ask_int("index: ")
            values.update_at(index, _ask_int("new data: "))
            print(values)
        case "findData":
            print(values.find(_ask_int("data: ")))
        case "[]getData":
            print(values[_ask_int("index: ")])
        case "=operator":
            copy: DoublyLinkedList[int] = DoublyLinkedList()
            copy.assign(values)
            print(values)
            print(copy)
        case "clear":
            values.clear()
            print(values)
        case "sort":
            values.sort()
            print(values)
        case "duplicate":
            values.duplicate()
            print(values)
        case "removeDuplicates":
            values.remove_duplicates()
            print(values)
        case _:
            print("invalid option")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu until the user declines to keep going."""
    parser = argparse.ArgumentParser(description="Doubly linked list demo.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    values: DoublyLinkedList[int] = DoublyLinkedList()
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