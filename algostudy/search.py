"""Binary search: count the elements of a sorted sequence above a point."""

from __future__ import annotations

import argparse
from bisect import bisect_right
from collections.abc import Sequence

DEFAULT_VALUES: tuple[int, ...] = (14, 16, 19, 32, 32, 32, 56, 69, 72)


def count_greater(values: Sequence[int], point: int) -> int:
    """Return how many items of the ascending *values* are greater than *point*."""
    return len(values) - bisect_right(values, point)


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a point and report how many sample values exceed it."""
    parser = argparse.ArgumentParser(
        prog="algostudy-search",
        description="Count values of a sorted sample that are greater than a point.",
    )
    parser.add_argument("point", nargs="?", type=int, help="reference point")
    args = parser.parse_args(argv)

    point = args.point
    if point is None:
        point = int(input("Введите точку отсчета: "))

    result = count_greater(DEFAULT_VALUES, point)
    print(f"Количество элементов в массиве больших, чем  {point}: {result}")
    return 0