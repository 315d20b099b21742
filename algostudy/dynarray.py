"""A dynamic array with explicit capacity that grows and shrinks."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence

_TOO_LARGE = "Ошибка! Логический размер массива не может превышать фактический!"


class DynamicArray:
    """Integers stored in a buffer of fixed capacity, resized on demand."""

    def __init__(self, capacity: int, items: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        values = list(items)
        if len(values) > capacity:
            raise ValueError(_TOO_LARGE)
        self._capacity = capacity
        self._items = values

    @property
    def capacity(self) -> int:
        """The number of slots currently allocated."""
        return self._capacity

    def append(self, value: int) -> None:
        """Add *value* at the end, doubling the capacity when it is full."""
        if len(self._items) == self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        self._items.append(value)

    def remove_head(self) -> int:
        """Remove and return the first item.

        When the remaining items fit into a third of the capacity, the
        capacity shrinks to that third (but never below one slot).
        """
        if not self._items:
            raise IndexError("remove_head from an empty array")
        head = self._items.pop(0)
        if len(self._items) <= self._capacity // 3:
            self._capacity = max(self._capacity // 3, 1)
        return head

    def render(self) -> str:
        """Show the items followed by one '_' per unused slot."""
        cells = [str(value) for value in self._items]
        cells.extend("_" * (self._capacity - len(self._items)))
        return " ".join(cells)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray(capacity={self._capacity}, items={self._items!r})"


def _ask_int(prompt: str) -> int:
    return int(input(prompt))


def _read_array() -> DynamicArray:
    capacity = _ask_int("Введите фактический размер массива: ")
    while True:
        size = _ask_int("Введите логический размер массива: ")
        if size <= capacity:
            break
        print(_TOO_LARGE)
    items = [_ask_int(f"Введите arr[{index}]: ") for index in range(size)]
    return DynamicArray(capacity, items)


def _append_loop(array: DynamicArray) -> None:
    prompt = "Введите элемент для добавления (0 для завершения): "
    while (value := _ask_int(prompt)) != 0:
        array.append(value)
        print("Динамический массив: " + array.render())


def _remove_loop(array: DynamicArray) -> None:
    while True:
        tokens = input("Удалить первый элемент? (да/нет): ").split()
        answer = tokens[0] if tokens else ""
        if answer == "да":
            if not array:
                print(
                    "Невозможно удалить первый элемент, так как массив пустой. "
                    "До свидания!"
                )
                return
            array.remove_head()
            print("Динамический массив: " + (array.render() if array else "_"))
        elif answer == "нет":
            print("Спасибо! Ваш динамический массив: " + array.render())
            return
        else:
            print("Пожалуйста, введите 'да' или 'нет'.")


def main(argv: Sequence[str] | None = None) -> int:
    """Build a dynamic array interactively, then grow and shrink it."""
    parser = argparse.ArgumentParser(
        prog="algostudy-dynarray", description="Interactive dynamic array demo."
    )
    parser.add_argument(
        "stage",
        choices=["print", "append", "remove"],
        nargs="?",
        default="remove",
        help="how far the demo goes",
    )
    args = parser.parse_args(argv)

    try:
        array = _read_array()
        print("Динамический массив: " + array.render())
        if args.stage == "print":
            return 0
        _append_loop(array)
        print("Спасибо! Ваш массив: " + array.render())
        if args.stage == "append":
            return 0
        _remove_loop(array)
    except EOFError:
        pass
    return 0