"""Greedy selection of non-overlapping processes."""

from __future__ import annotations

from collections.abc import Iterable


def max_non_overlapping(processes: Iterable[tuple[int, int]]) -> int:
    """Count the most (start, end) processes that can run one after another.

    Processes are taken by earliest end; one may start at the moment the
    previous one ends.
    """
    count = 0
    last_end = -1
    for start, end in sorted(processes, key=lambda p: p[1]):
        if start >= last_end:
            count += 1
            last_end = end
    return count