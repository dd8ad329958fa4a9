"""Text patterns of stars, digits and letters, each returned as a block of lines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence


def _block(lines: Iterable[str]) -> str:
    return "".join(line + "\n" for line in lines)


def _letters(first: str, count: int) -> list[str]:
    return [chr(ord(first) + k) for k in range(count)]


def square(n: int) -> str:
    """An n by n square of spaced stars."""
    return _block(" * " * n for _ in range(n))


def right_triangle(n: int) -> str:
    """Rows of 1 to n spaced stars."""
    return _block(" * " * (i + 1) for i in range(n))


def number_triangle(n: int) -> str:
    """Row i counts from 1 up to i."""
    return _block("".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1))


def repeated_number_triangle(n: int) -> str:
    """Row i repeats the number i, i times."""
    return _block(str(i) * i for i in range(1, n + 1))


def inverted_triangle(n: int) -> str:
    """Rows of n down to 1 spaced stars."""
    return _block(" * " * (n - i) for i in range(n))


def inverted_number_triangle(n: int) -> str:
    """Rows counting from 1 up to n, then n-1, down to 1."""
    return _block("".join(str(j) for j in range(1, n - i + 1)) for i in range(n))


def pyramid(n: int) -> str:
    """A centred pyramid of stars, padded with spaces on both sides."""
    return _block(
        " " * (n - i - 1) + "*" * (2 * i + 1) + " " * (n - i - 1) for i in range(n)
    )


def inverted_pyramid(n: int) -> str:
    """A centred upside-down pyramid, ending with a row of spaces only."""
    return _block(" " * i + "*" * (2 * n - (2 * i + 1)) + " " * i for i in range(n + 1))


def diamond(n: int) -> str:
    """A pyramid followed by an inverted pyramid."""
    return pyramid(n) + inverted_pyramid(n)


def half_diamond(n: int) -> str:
    """Rows of stars growing from 1 to n and shrinking back to 1."""
    return _block("*" * (i if i <= n else 2 * n - i) for i in range(1, 2 * n))


def binary_triangle(n: int) -> str:
    """Rows of alternating 1s and 0s; even rows start with 1, odd rows with 0."""
    return _block(
        "".join(str((1 - i % 2 + j) % 2) for j in range(i + 1)) for i in range(n)
    )


def number_crown(n: int) -> str:
    """Counting up and back down with a shrinking gap between the halves."""
    return _block(
        "".join(str(j) for j in range(1, i + 1))
        + " " * (2 * (n - i))
        + "".join(str(j) for j in range(i, 0, -1))
        for i in range(1, n + 1)
    )


def floyd_triangle(n: int) -> str:
    """Consecutive numbers from 1, one more per row, each followed by a space."""
    rows = []
    number = 1
    for i in range(n):
        rows.append("".join(f"{number + j} " for j in range(i + 1)))
        number += i + 1
    return _block(rows)


def letter_triangle(n: int) -> str:
    """Row i lists the letters from A onward, i+1 of them, each followed by a space."""
    return _block("".join(f"{c} " for c in _letters("A", i + 1)) for i in range(n))


def reverse_letter_triangle(n: int) -> str:
    """Like letter_triangle, from the longest row down to the shortest."""
    return _block("".join(f"{c} " for c in _letters("A", n - i)) for i in range(n))


def repeated_letter_triangle(n: int) -> str:
    """Row i repeats the i-th letter, i+1 times."""
    return _block(chr(ord("A") + i) * (i + 1) for i in range(n))


def letter_pyramid(n: int) -> str:
    """A centred pyramid of letters rising from A and falling back to A."""
    rows = []
    for i in range(n):
        rising = "".join(_letters("A", i + 1))
        pad = " " * (n - i - 1)
        rows.append(pad + rising + rising[:-1][::-1] + pad)
    return _block(rows)


def trailing_letter_triangle(n: int) -> str:
    """Row i lists the letters ending at E, i+1 of them, each followed by a space."""
    end = ord("E")
    return _block(
        "".join(f"{chr(c)} " for c in range(end - i, end + 1)) for i in range(n)
    )


def symmetric_void(n: int) -> str:
    """Two star blocks meeting in a diamond-shaped gap."""
    top = ("*" * (n - i) + " " * (2 * i) + "*" * (n - i) for i in range(n))
    bottom = ("*" * i + " " * (2 * n - 2 * i) + "*" * i for i in range(1, n + 1))
    return _block(top) + _block(bottom)


def hollow_square(n: int) -> str:
    """The border of an n by n square of stars."""
    return _block(
        "".join(
            "*" if i in (0, n - 1) or j in (0, n - 1) else " " for j in range(n)
        )
        for i in range(n)
    )


_PATTERNS: dict[str, Callable[[int], str]] = {
    f.__name__: f
    for f in (
        square,
        right_triangle,
        number_triangle,
        repeated_number_triangle,
        inverted_triangle,
        inverted_number_triangle,
        pyramid,
        inverted_pyramid,
        diamond,
        half_diamond,
        binary_triangle,
        number_crown,
        floyd_triangle,
        letter_triangle,
        reverse_letter_triangle,
        repeated_letter_triangle,
        letter_pyramid,
        trailing_letter_triangle,
        symmetric_void,
        hollow_square,
    )
}


def _sizes_from_stdin() -> list[int]:
    tokens = sys.stdin.read().split()
    if not tokens:
        raise ValueError("missing number of cases")
    try:
        numbers = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"invalid number: {exc}") from None
    count, rest = numbers[0], numbers[1:]
    if len(rest) < count:
        raise ValueError("missing size")
    return rest[:count]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a pattern for each size given, or for sizes read from standard input."""
    parser = argparse.ArgumentParser(prog="dsakit-pattern", description="Print text patterns.")
    parser.add_argument("--pattern", choices=sorted(_PATTERNS), default="hollow_square")
    parser.add_argument("sizes", nargs="*", type=int)
    args = parser.parse_args(argv)
    sizes = args.sizes
    if not sizes:
        try:
            sizes = _sizes_from_stdin()
        except ValueError as exc:
            parser.error(str(exc))
    draw = _PATTERNS[args.pattern]
    for n in sizes:
        sys.stdout.write(draw(n))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())