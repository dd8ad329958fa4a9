"""Array and matrix routines: rotations, duplicates, unions, subarrays and permutations."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain, zip_longest

_MISSING = object()


def alternate_signs(nums: Sequence[int]) -> list[int]:
    """Interleave non-negative and negative values, keeping each group's order.

    The larger group leads; when the groups are the same size the negatives lead.
    Values left over from the larger group are appended at the end.
    """
    positives = [x for x in nums if x >= 0]
    negatives = [x for x in nums if x < 0]
    if len(positives) > len(negatives):
        leading, trailing = positives, negatives
    else:
        leading, trailing = negatives, positives
    paired = chain.from_iterable(zip_longest(leading, trailing, fillvalue=_MISSING))
    return [x for x in paired if x is not _MISSING]


def check_subarray(first: Sequence[int], second: Sequence[int]) -> bool:
    """Return True when ``first`` matches ``second`` element by element from the start."""
    if len(first) > len(second):
        return False
    return all(a == b for a, b in zip(first, second))


def check_subset(first: Sequence[int], second: Sequence[int]) -> bool:
    """Return True when every value of ``first`` occurs in ``second``."""
    if len(first) > len(second):
        return False
    available = set(second)
    return all(x in available for x in first)


def left_rotate(items: Sequence) -> list:
    """Return the items rotated one place to the left."""
    return list(items[1:]) + list(items[:1])


def right_rotate(items: Sequence) -> list:
    """Return the items rotated one place to the right."""
    return list(items[-1:]) + list(items[:-1])


def left_rotate_by(items: Sequence, k: int) -> list:
    """Return the items rotated ``k`` places to the left; a negative ``k`` rotates nothing."""
    if not items or k <= 0:
        return list(items)
    d = k % len(items)
    return list(items[d:]) + list(items[:d])


def average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of the values."""
    values = list(values)
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)


def second_largest(values: Sequence[int]) -> int:
    """Return the second largest value, or -1 when no value qualifies.

    A value equal to the current largest that is seen later counts as the
    second largest.
    """
    if not values:
        raise ValueError("second_largest of an empty sequence")
    largest, second = values[0], -1
    for x in values[1:]:
        if x > largest:
            second, largest = largest, x
        elif x > second:
            second = x
    return second


def remove_sorted_duplicates(items: Iterable) -> list:
    """Collapse runs of equal neighbouring values, as for a sorted input."""
    result: list = []
    for x in items:
        if not result or result[-1] != x:
            result.append(x)
    return result


def remove_duplicates_set(items: Iterable) -> list:
    """Return the distinct values in ascending order."""
    return sorted(set(items))


def unique_in_order(items: Iterable) -> list:
    """Return the distinct values in order of first appearance."""
    return list(dict.fromkeys(items))


def union_set(first: Iterable, second: Iterable) -> list:
    """Return the sorted union of two collections."""
    return sorted(set(first) | set(second))


def union_sorted(first: Iterable, second: Iterable) -> list:
    """Merge two sorted collections into their union, skipping repeated values."""
    return remove_sorted_duplicates(heapq.merge(first, second))


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Length of the longest contiguous run summing to ``k``, checking every start."""
    best = 0
    for start in range(len(values)):
        for length, total in enumerate(accumulate(values[start:]), start=1):
            if total == k:
                best = max(best, length)
    return best


def longest_subarray_with_sum_prefix(values: Iterable[int], k: int) -> int:
    """Length of the longest contiguous run summing to ``k``, using prefix sums."""
    first_seen: dict[int, int] = {}
    best = 0
    for index, prefix in enumerate(accumulate(values)):
        if prefix == k:
            best = index + 1
        earlier = first_seen.get(prefix - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(prefix, index)
    return best


def next_permutation(nums: Sequence) -> list:
    """Return the next lexicographic permutation, wrapping to the smallest one."""
    result = list(nums)
    pivot = next(
        (i for i in reversed(range(len(result) - 1)) if result[i] < result[i + 1]),
        None,
    )
    if pivot is None:
        result.reverse()
        return result
    swap = next(i for i in reversed(range(pivot + 1, len(result))) if result[i] > result[pivot])
    result[pivot], result[swap] = result[swap], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result


def rotate_clockwise(matrix: Sequence[Sequence]) -> list[list]:
    """Return the matrix turned a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]


def rotate_anticlockwise(matrix: Sequence[Sequence]) -> list[list]:
    """Return the matrix turned a quarter turn anticlockwise."""
    return [list(row) for row in zip(*matrix)][::-1]


def format_matrix(matrix: Iterable[Iterable]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    return "".join("".join(f"{x} " for x in row) + "\n" for row in matrix)