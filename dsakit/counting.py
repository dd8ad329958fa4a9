"""Frequency counting of numbers and characters, with a small query command."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Hashable, Iterable, Iterator, Sequence


def count_values(values: Iterable[Hashable]) -> Counter:
    """Count how often each value occurs; absent values count as zero."""
    return Counter(values)


def count_characters(text: str) -> Counter:
    """Count how often each character occurs in the text."""
    return Counter(text)


def frequency_pairs(values: Iterable[Hashable]) -> list[tuple[Hashable, int]]:
    """Return (value, count) pairs in order of each value's first appearance."""
    return list(Counter(values).items())


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError(f"missing {what}")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def _read_ints(tokens: Iterator[str], what: str) -> list[int]:
    count = _next_int(tokens, f"{what} count")
    return [_next_int(tokens, what) for _ in range(count)]


def _numbers(tokens: Iterator[str]) -> list[str]:
    counts = count_values(_read_ints(tokens, "value"))
    return [str(counts[q]) for q in _read_ints(tokens, "query")]


def _chars(tokens: Iterator[str]) -> list[str]:
    text = next(tokens, None)
    if text is None:
        raise ValueError("missing text")
    counts = count_characters(text)
    queries = _next_int(tokens, "query count")
    pending = "".join(tokens)
    if len(pending) < queries:
        raise ValueError("missing query")
    return [str(counts[c]) for c in pending[:queries]]


def _freq(tokens: Iterator[str]) -> list[str]:
    return [f"{value} -> {count}" for value, count in frequency_pairs(_read_ints(tokens, "value"))]


_MODES = {"numbers": _numbers, "chars": _chars, "freq": _freq}


def main(argv: Sequence[str] | None = None) -> int:
    """Read counts and queries from standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="dsakit-count",
        description=(
            "numbers: N values, Q queries -> occurrence of each query; "
            "chars: a word, Q characters -> occurrence of each; "
            "freq: N values -> 'value -> count' lines"
        ),
    )
    parser.add_argument("mode", nargs="?", choices=sorted(_MODES), default="numbers")
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        lines = _MODES[args.mode](tokens)
    except ValueError as exc:
        parser.error(str(exc))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())