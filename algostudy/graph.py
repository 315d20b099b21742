"""Depth-first and breadth-first traversal of graphs given as adjacency matrices."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from os import PathLike
from pathlib import Path

Matrix = list[list[int]]


def parse_matrix(text: str) -> Matrix:
    """Parse a vertex count followed by that many rows of adjacency values."""
    tokens = text.split()
    if not tokens:
        raise ValueError("empty graph description")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"graph description holds a non-integer: {exc}") from exc
    size, cells = numbers[0], numbers[1:]
    if size < 0:
        raise ValueError(f"vertex count must be non-negative, got {size}")
    if len(cells) < size * size:
        raise ValueError(
            f"expected {size * size} matrix cells, found {len(cells)}"
        )
    return [cells[row * size:(row + 1) * size] for row in range(size)]


def load_matrix(path: str | PathLike[str]) -> Matrix:
    """Read an adjacency matrix from a file."""
    return parse_matrix(Path(path).read_text(encoding="utf-8"))


def _neighbours(matrix: Matrix, vertex: int) -> Iterator[int]:
    return (other for other, cell in enumerate(matrix[vertex]) if cell == 1)


def _check_start(matrix: Matrix, start: int) -> None:
    if not 0 <= start < len(matrix):
        raise ValueError(f"start vertex {start} is outside 0..{len(matrix) - 1}")


def dfs_order(matrix: Matrix, start: int = 0) -> list[int]:
    """Return vertices (0-based) in depth-first order, neighbours taken ascending."""
    _check_start(matrix, start)
    visited = {start}
    order = [start]
    stack = [_neighbours(matrix, start)]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(_neighbours(matrix, nxt))
                break
        else:
            stack.pop()
    return order


def bfs_order(matrix: Matrix, start: int = 0) -> list[int]:
    """Return vertices (0-based) in breadth-first order, neighbours taken ascending."""
    _check_start(matrix, start)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for nxt in _neighbours(matrix, vertex):
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                queue.append(nxt)
    return order


def _format_order(order: Sequence[int]) -> str:
    return "Порядок обхода вершин: " + "".join(f"{vertex + 1} " for vertex in order)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a graph from a file and print its traversal order."""
    parser = argparse.ArgumentParser(
        prog="algostudy-graph", description="Traverse a graph from an adjacency matrix."
    )
    parser.add_argument("algorithm", choices=["bfs", "dfs"], nargs="?", default="dfs")
    parser.add_argument("--file", default="input.txt", help="adjacency matrix file")
    args = parser.parse_args(argv)

    try:
        matrix = load_matrix(args.file)
    except OSError:
        print(f"Не получилось открыть файл {args.file}!")
        return 1
    except ValueError as exc:
        print(f"Ошибка: {exc}", file=sys.stderr)
        return 1

    if args.algorithm == "dfs":
        if not matrix:
            print(_format_order([]))
            return 0
        print(_format_order(dfs_order(matrix, 0)))
        return 0

    print(f"В графе {len(matrix)} вершин.")
    answer = input("Введите номер вершины, с которой начнётся обход: ").split()
    try:
        start = int(answer[0]) - 1 if answer else -1
    except ValueError:
        start = -1
    if not 0 <= start < len(matrix):
        print("Ошибка: неверный номер вершины.", file=sys.stderr)
        return 1
    print(_format_order(bfs_order(matrix, start)))
    return 0