"""Binary searches over sorted sequences and integer square roots."""

from __future__ import annotations

import bisect
from collections.abc import Sequence


def lower_bound(values: Sequence, target) -> int:
    """Index of the first value not less than ``target``, or ``len(values)``."""
    return bisect.bisect_left(values, target)


def upper_bound(values: Sequence, target) -> int:
    """Index of the first value greater than ``target``, or ``len(values)``."""
    return bisect.bisect_right(values, target)


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError(f"square root needs a positive integer, got {n}")


def isqrt_linear(n: int) -> int:
    """Floor of the square root of ``n``, found by trying each candidate in turn."""
    _require_positive(n)
    i = 1
    while i * i <= n:
        i += 1
    return i - 1


def isqrt_binary(n: int) -> int:
    """Floor of the square root of ``n``, found by binary search."""
    _require_positive(n)
    low, high, answer = 1, n, 1
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer