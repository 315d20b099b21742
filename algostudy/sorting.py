"""Merge sort, quick sort (Hoare partition) and counting sort."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable, Sequence

COUNT_MIN = 10
COUNT_MAX = 24

MERGE_EXAMPLE = (88, 91, 87, 59, 53, 49, 29, 16, 4, 27, 28, 89, 2, 25, 74)
QUICK_EXAMPLE = (24, 66, 20, 79, 30, 16, 19, 62, 94, 59, 0, 7, 59, 90, 84, 60, 95, 62)
COUNT_EXAMPLE = (19, 14, 22, 22, 17, 22, 13, 21, 20, 24)

_GREEN = "\033[032m"
_YELLOW = "\033[033m"
_RESET = "\033[0m"


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of *values* using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[(low + high) // 2]
    left, right = low, high
    while True:
        while items[left] < pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left >= right:
            return right
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def _quick_sort(items: list[int], low: int, high: int) -> None:
    if low < high:
        split = _partition(items, low, high)
        _quick_sort(items, low, split)
        _quick_sort(items, split + 1, high)


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of *values* using quick sort with Hoare partitioning."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def count_sort(
    values: Iterable[int], min_value: int = COUNT_MIN, max_value: int = COUNT_MAX
) -> list[int]:
    """Return a sorted copy of *values*, all of which must lie in [min_value, max_value]."""
    if min_value > max_value:
        raise ValueError(f"empty range {min_value} - {max_value}")
    counts = [0] * (max_value - min_value + 1)
    for value in values:
        if not min_value <= value <= max_value:
            raise ValueError(
                f"Значение массива {value} вне диапазона {min_value} - {max_value}!"
            )
        counts[value - min_value] += 1
    return [
        value
        for value, count in zip(range(min_value, max_value + 1), counts)
        for _ in range(count)
    ]


def format_array(values: Iterable[int]) -> str:
    """Render values the way the sorting demos print them, each in green."""
    return "".join(f"{_GREEN}{value} {_RESET}" for value in values)


_EXAMPLES = {"merge": MERGE_EXAMPLE, "quick": QUICK_EXAMPLE, "count": COUNT_EXAMPLE}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort an array with the chosen algorithm and print it before and after."""
    parser = argparse.ArgumentParser(
        prog="algostudy-sort", description="Demonstrate sorting algorithms."
    )
    parser.add_argument("algorithm", choices=sorted(_EXAMPLES), nargs="?", default="merge")
    parser.add_argument("values", nargs="*", type=int, help="values to sort")
    args = parser.parse_args(argv)

    items = list(args.values) if args.values else list(_EXAMPLES[args.algorithm])
    print("Исходный массив:        " + format_array(items))

    if args.algorithm == "merge":
        result = merge_sort(items)
    elif args.algorithm == "quick":
        result = quick_sort(items)
    else:
        try:
            result = count_sort(items)
        except ValueError as exc:
            print(f"{_YELLOW}{exc}{_RESET}")
            result = items

    print("Отсортированный массив: " + format_array(result))
    return 0