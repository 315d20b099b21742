"""Binary heap ("pyramid") stored in an array: printing and navigation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum

EXAMPLE = (16, 11, 9, 10, 5, 6, 8, 1, 2, 4)

_COMMANDS_HINT = "up, left, right, exit"


class Side(Enum):
    """Which child of a node."""

    LEFT = "left"
    RIGHT = "right"


class Command(Enum):
    """Navigation commands understood by the walker."""

    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    EXIT = "exit"
    UNKNOWN = "unknown"


class NavigationError(LookupError):
    """Raised when a move leads outside the pyramid."""


def calc_level(index: int) -> int:
    """Return the depth of the node at *index* (the root is level 0)."""
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return (index + 1).bit_length() - 1


def describe_node(values: Sequence[int], index: int) -> str:
    """Describe a node as 'level side(parent) value' or '0 root value'."""
    if index == 0:
        return f"0 root {values[0]}"
    parent = values[(index - 1) // 2]
    side = Side.LEFT if index % 2 == 1 else Side.RIGHT
    return f"{calc_level(index)} {side.value}({parent}) {values[index]}"


def pyramid_lines(values: Sequence[int]) -> list[str]:
    """Return one description line per node, in array order."""
    return [describe_node(values, index) for index in range(len(values))]


def child_index(index: int, size: int, side: Side) -> int | None:
    """Return the index of the requested child, or None if it does not exist."""
    child = 2 * index + (1 if side is Side.LEFT else 2)
    return child if child < size else None


def parent_index(index: int) -> int | None:
    """Return the index of the parent, or None for the root."""
    return None if index == 0 else (index - 1) // 2


def parse_command(text: str) -> Command:
    """Map a typed word to a command; anything unrecognised is UNKNOWN."""
    try:
        command = Command(text)
    except ValueError:
        return Command.UNKNOWN
    return command


class PyramidNavigator:
    """Tracks a position inside a pyramid and moves it around."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("cannot navigate an empty pyramid")
        self.values = list(values)
        self.index = 0

    def location(self) -> str:
        """Describe the current position."""
        return "Вы находитесь здесь: " + describe_node(self.values, self.index)

    def move(self, command: Command) -> int:
        """Move by *command* and return the new index."""
        if command is Command.UP:
            target = parent_index(self.index)
            error = "Ошибка! Отсутствует родитель"
        elif command is Command.LEFT:
            target = child_index(self.index, len(self.values), Side.LEFT)
            error = "Ошибка! Отсутствует левый потомок"
        elif command is Command.RIGHT:
            target = child_index(self.index, len(self.values), Side.RIGHT)
            error = "Ошибка! Отсутствует правый потомок"
        else:
            raise ValueError(
                f"Неизвестная команда. Доступные команды: {_COMMANDS_HINT}"
            )
        if target is None:
            raise NavigationError(error)
        self.index = target
        return target


def _walk(navigator: PyramidNavigator) -> None:
    prompt = f"Введите команду (доступные команды: {_COMMANDS_HINT}): "
    while True:
        print(navigator.location())
        try:
            tokens = input(prompt).split()
        except EOFError:
            return
        command = parse_command(tokens[0] if tokens else "")
        if command is Command.EXIT:
            return
        try:
            navigator.move(command)
        except (NavigationError, ValueError) as exc:
            print(exc)
        else:
            print("Ок")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a pyramid and optionally walk through it interactively."""
    parser = argparse.ArgumentParser(
        prog="algostudy-pyramid", description="Print and explore an array pyramid."
    )
    parser.add_argument("values", nargs="*", type=int, help="pyramid values")
    parser.add_argument(
        "--walk", action="store_true", help="navigate the pyramid after printing"
    )
    args = parser.parse_args(argv)
    values = list(args.values) if args.values else list(EXAMPLE)

    print("Исходный массив: " + "".join(f"{value} " for value in values))
    print("Пирамида:")
    for line in pyramid_lines(values):
        print(line)
    print()

    if args.walk and values:
        _walk(PyramidNavigator(values))
    return 0