"""String hashing and a light Rabin-Karp substring search."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

_MASK64 = (1 << 64) - 1


def _signed_bytes(text: str) -> Iterator[int]:
    """Yield the UTF-8 bytes of *text* as signed 8-bit values."""
    for byte in text.encode("utf-8"):
        yield byte - 256 if byte > 127 else byte


def simple_string_hash(text: str) -> int:
    """Return the sum of the text's UTF-8 bytes read as signed characters."""
    return sum(_signed_bytes(text))


def polynomial_hash(text: str, p: int, n: int) -> int:
    """Return sum(c_i * p**i) modulo n, computed in 64-bit unsigned arithmetic."""
    if n <= 0:
        raise ValueError(f"modulus must be positive, got {n}")
    base = p & _MASK64
    total = 0
    power = 1
    for code in _signed_bytes(text):
        total = (total + (code & _MASK64) * power) & _MASK64
        power = (power * base) & _MASK64
    return total % n


def find_pattern(source: str, pattern: str) -> int:
    """Return the first index of *pattern* in *source*, or -1 when absent.

    Uses a rolling sum of character codes to skip windows that cannot match.
    """
    size = len(pattern)
    if size == 0 or len(source) < size:
        return -1
    target = sum(map(ord, pattern))
    window = sum(map(ord, source[:size]))
    for start in range(len(source) - size + 1):
        if window == target and source.startswith(pattern, start):
            return start
        if start + size < len(source):
            window += ord(source[start + size]) - ord(source[start])
    return -1


def _words(prompt: str) -> Iterator[str]:
    """Yield the first token of each non-blank input line until end of input."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        tokens = line.split()
        if tokens:
            yield tokens[0]


def _run_simple() -> None:
    for word in _words("Введите строку или 'exit'  для завершения: "):
        print(f"Наивный хэш строки {word} = {simple_string_hash(word)}")
        if word == "exit":
            break


def _run_polynomial() -> None:
    p = int(input("Введите простое число p: "))
    n = int(input("Введите модуль n: "))
    for word in _words("Введите строку или 'exit' для завершения: "):
        print(f"Хэш строки {word} = {polynomial_hash(word, p, n)}")
        if word == "exit":
            break


def _run_find() -> None:
    source = next(_words("Введите строку, в которой будет осуществляться поиск: "), None)
    if source is None:
        return
    prompt = "Введите подстроку, которую нужно найти или 'exit' для выхода: "
    for pattern in _words(prompt):
        index = find_pattern(source, pattern)
        if index != -1:
            print(f'Подстрока "{pattern}" найдена по индексу {index}')
        else:
            print(f'Подстрока "{pattern}" не найдена')
        if pattern == "exit":
            break


_MODES = {"simple": _run_simple, "poly": _run_polynomial, "find": _run_find}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the interactive hashing demos."""
    parser = argparse.ArgumentParser(
        prog="algostudy-hash", description="Interactive string hashing demos."
    )
    parser.add_argument("mode", choices=sorted(_MODES), nargs="?", default="simple")
    args = parser.parse_args(argv)
    _MODES[args.mode]()
    return 0