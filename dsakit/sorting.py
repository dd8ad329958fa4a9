"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _merge(left: list, right: list) -> Iterator:
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1
    yield from left[i:]
    yield from right[j:]


def merge_sort(items: Iterable) -> list:
    """Sort by recursively splitting in halves and merging them back."""
    items = list(items)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(a: list, low: int, high: int) -> int:
    pivot = a[low]
    i, j = low, high
    while i < j:
        while a[i] <= pivot and i <= high - 1:
            i += 1
        while a[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
    a[low], a[j] = a[j], a[low]
    return j


def quick_sort(items: Iterable) -> list:
    """Sort by partitioning around the first element of each range."""
    result = list(items)
    ranges = [(0, len(result) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            p = _partition(result, low, high)
            ranges.append((low, p - 1))
            ranges.append((p + 1, high))
    return result


def selection_sort(items: Iterable) -> list:
    """Sort by repeatedly moving the smallest remaining value forward."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def bubble_sort(items: Iterable) -> list:
    """Sort by swapping neighbours, stopping early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable) -> list:
    """Sort by sinking each value left into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j - 1] > result[j]:
            result[j - 1], result[j] = result[j], result[j - 1]
            j -= 1
    return result