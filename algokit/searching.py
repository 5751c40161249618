"""Linear and binary search, and locating the unpaired character in a text."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from typing import Any, NamedTuple

from algokit.timing import Stopwatch, random_int_list

PAIR_SAMPLES = ("AACCZZTTVXX", "AAB", "CCAAXWWTT", "XXYYZZAAC")


class PairSearch(NamedTuple):
    """Position of the unpaired character and how many checks found it."""

    index: int
    comparisons: int


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the first index holding ``target``, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def binary_search_recursive(
    values: Sequence[Any], target: Any, left: int = 0, right: int | None = None
) -> int:
    """Recursive binary search over ``values[left..right]``; -1 if absent."""
    if right is None:
        right = len(values) - 1
    if left > right:
        return -1
    mid = left + (right - left) // 2
    if values[mid] == target:
        return mid
    if target < values[mid]:
        return binary_search_recursive(values, target, left, mid - 1)
    return binary_search_recursive(values, target, mid + 1, right)


def _char_at(text: str, index: int) -> str | None:
    return text[index] if 0 <= index < len(text) else None


def find_odd_pair_linear(text: str) -> PairSearch:
    """Scan pairs from the start for the first character without a twin."""
    for comparisons, index in enumerate(range(0, len(text), 2), start=1):
        if text[index] != _char_at(text, index + 1):
            return PairSearch(index, comparisons)
    raise ValueError("every character in the text is paired")


def find_odd_pair_binary(text: str) -> PairSearch | None:
    """Bisect for a character unlike both neighbours.

    The search steers right when the middle differs from its successor and
    left otherwise; it returns None when it narrows to nothing.
    """
    left, right = 0, len(text) - 1
    comparisons = 0
    while left <= right:
        comparisons += 1
        mid = left + (right - left) // 2
        char = text[mid]
        differs_next = char != _char_at(text, mid + 1)
        if differs_next and char != _char_at(text, mid - 1):
            return PairSearch(mid, comparisons)
        if differs_next:
            left = mid + 1
        else:
            right = mid - 1
    return None


def _run_pairs() -> None:
    for text in PAIR_SAMPLES:
        linear = find_odd_pair_linear(text)
        parts = [text[linear.index], str(linear.comparisons)]
        binary = find_odd_pair_binary(text)
        if binary is not None:
            parts += [text[binary.index], str(binary.comparisons)]
        print(" ".join(parts))


def _run_search(size: int, seed: int | None) -> None:
    values = sorted(random_int_list(size, random.Random(seed)))
    searches = (
        ("binary search (Recursive)", binary_search_recursive),
        ("binary search (While)", binary_search),
        ("linear search", linear_search),
    )
    stopwatch = Stopwatch()
    while True:
        print("Input int (between 1-1,000,000) to find position in list or 0 to terminate: ")
        try:
            raw = input()
        except EOFError:
            break
        try:
            target = int(raw)
        except ValueError:
            print("invalid input")
            continue
        for label, search in searches:
            stopwatch.start()
            print(f"Index using {label}: {search(values, target)}")
            print(stopwatch.report())
        if target == 0:
            break


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive search demo or the unpaired-character demo."""
    parser = argparse.ArgumentParser(description="Search algorithm demos.")
    parser.add_argument("mode", nargs="?", choices=("search", "pairs"), default="search")
    parser.add_argument("--size", type=int, default=10000, help="size of the random list")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.mode == "pairs":
        _run_pairs()
    else:
        _run_search(args.size, args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())