"""In-place sorting algorithms that count comparisons and swaps."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any

from algokit.searching import binary_search, linear_search
from algokit.timing import Stopwatch, random_int_list


@dataclass
class SortStats:
    """Work done by one sort run."""

    comparisons: int = 0
    swaps: int = 0

    def __str__(self) -> str:
        return f"Comparisons: {self.comparisons} Swaps: {self.swaps}"


def _swap(values: MutableSequence[Any], a: int, b: int) -> None:
    if a != b:
        values[a], values[b] = values[b], values[a]


def swap_sort(values: MutableSequence[Any]) -> SortStats:
    """Exchange sort: swap whenever a later element is smaller."""
    stats = SortStats()
    n = len(values)
    for i in range(n - 1):
        for j in range(i + 1, n):
            stats.comparisons += 1
            if values[j] < values[i]:
                _swap(values, i, j)
                stats.swaps += 1
    return stats


def bubble_sort(values: MutableSequence[Any]) -> SortStats:
    """Bubble sort that stops after a pass without swaps."""
    stats = SortStats()
    n = len(values)
    passes = 0
    swapped = True
    while swapped and passes < n - 1:
        swapped = False
        for j in range(1, n - passes):
            stats.comparisons += 1
            if values[j] < values[j - 1]:
                _swap(values, j - 1, j)
                stats.swaps += 1
                swapped = True
        passes += 1
    return stats


def selection_sort(values: MutableSequence[Any]) -> SortStats:
    """Selection sort: move the smallest remaining element forward."""
    stats = SortStats()
    n = len(values)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            stats.comparisons += 1
            if values[j] < values[smallest]:
                smallest = j
        if smallest != i:
            _swap(values, i, smallest)
            stats.swaps += 1
    return stats


def insertion_sort(values: MutableSequence[Any]) -> SortStats:
    """Insertion sort by adjacent swaps."""
    stats = SortStats()
    for i in range(1, len(values)):
        j = i - 1
        while j >= 0:
            stats.comparisons += 1
            if values[j + 1] < values[j]:
                _swap(values, j + 1, j)
                stats.swaps += 1
                j -= 1
            else:
                break
    return stats


def merge(values: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left..mid]`` and ``values[mid+1..right]``."""
    left_run = list(values[left : mid + 1])
    right_run = list(values[mid + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        if left_run[i] < right_run[j]:
            values[k] = left_run[i]
            i += 1
        else:
            values[k] = right_run[j]
            j += 1
        k += 1
    remaining = left_run[i:] + right_run[j:]
    values[k : k + len(remaining)] = remaining


def merge_sort(values: MutableSequence[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``values[left..right]`` by merge sort."""
    if right is None:
        right = len(values) - 1
    if left < right:
        mid = (left + right) // 2
        merge_sort(values, left, mid)
        merge_sort(values, mid + 1, right)
        merge(values, left, mid, right)


def partition(values: MutableSequence[Any], left: int, right: int) -> int:
    """Partition around ``values[right]`` and return the pivot's final index."""
    boundary = left - 1
    pivot = values[right]
    for i in range(left, right):
        if values[i] < pivot:
            boundary += 1
            _swap(values, i, boundary)
    boundary += 1
    _swap(values, right, boundary)
    return boundary


def quick_sort(values: MutableSequence[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``values[left..right]`` by quicksort with a last-element pivot."""
    if right is None:
        right = len(values) - 1
    pending = [(left, right)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(values, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))


def shell_sort(values: MutableSequence[Any]) -> SortStats:
    """Shell sort with gaps halving from n/2; counts shifts and placements."""
    stats = SortStats()
    n = len(values)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = values[i]
            j = i
            while j >= gap and values[j - gap] > current:
                values[j] = values[j - gap]
                j -= gap
                stats.comparisons += 1
                stats.swaps += 1
            values[j] = current
            stats.swaps += 1
        gap //= 2
    return stats


ALGORITHMS: tuple[tuple[str, Callable[[MutableSequence[Any]], SortStats | None]], ...] = (
    ("swap sort", swap_sort),
    ("bubble sort", bubble_sort),
    ("selection sort", selection_sort),
    ("insertion sort", insertion_sort),
    ("merge sort", merge_sort),
    ("quick sort", quick_sort),
    ("shell sort", shell_sort),
)


def _find_loop(values: Sequence[int]) -> None:
    stopwatch = Stopwatch()
    while True:
        print("Input int (between 1-1,000,000) to find position in list or 0 to terminate: ")
        try:
            raw = input()
        except EOFError:
            return
        try:
            target = int(raw)
        except ValueError:
            print("invalid input")
            continue
        stopwatch.start()
        print(f"Index using binary search: {binary_search(values, target)}")
        print(stopwatch.report())
        stopwatch.start()
        print(f"Index using linear search: {linear_search(values, target)}")
        print(stopwatch.report())
        if target == 0:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a random list with a chosen algorithm, then search it."""
    parser = argparse.ArgumentParser(description="Sorting algorithm demo.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        quantity = int(input("Input amount of values: "))
    except EOFError:
        return 0
    values = random_int_list(quantity, random.Random(args.seed))

    for index, (name, _) in enumerate(ALGORITHMS):
        print(f"{index} - {name}")
    print("Input index of the sorting algorithm: ")
    try:
        choice = int(input())
    except EOFError:
        return 0

    if 0 <= choice < len(ALGORITHMS):
        name, algorithm = ALGORITHMS[choice]
        print(f"{name}: ")
        stats = algorithm(values)
        print(" ".join(str(value) for value in values))
        if stats is not None:
            print(stats)

    _find_loop(values)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())