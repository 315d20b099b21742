"""Fibonacci numbers, computed naively and with memoisation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def _memoised(n: int, memo: dict[int, int]) -> int:
    if n not in memo:
        memo[n] = _memoised(n - 1, memo) + _memoised(n - 2, memo)
    return memo[n]


def fibonacci_table(n: int) -> list[int]:
    """Return the Fibonacci numbers 0..n, filled by memoised recursion."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    memo = {0: 0, 1: 1}
    _memoised(n, memo)
    return [memo[i] for i in range(n + 1)]


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number using memoised recursion."""
    return fibonacci_table(n)[n]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Fibonacci numbers from 0 to n, one per line."""
    parser = argparse.ArgumentParser(
        prog="algostudy-fibonacci", description="Print Fibonacci numbers."
    )
    parser.add_argument("n", nargs="?", type=int, default=10, help="last index")
    parser.add_argument(
        "--memo", action="store_true", help="use the memoised computation"
    )
    args = parser.parse_args(argv)

    if args.memo:
        numbers = fibonacci_table(args.n)
    else:
        numbers = [fibonacci(i) for i in range(args.n + 1)]
    for number in numbers:
        print(number)
    return 0