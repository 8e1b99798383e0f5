"""Comparison and distribution sorts, partition schemes and set operations on lists."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T", int, float)


def cycle_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy using cycle sort, which writes each element at most once."""
    result = list(items)
    n = len(result)
    for cycle_start in range(n - 1):
        item = result[cycle_start]
        pos = cycle_start + sum(1 for value in result[cycle_start + 1 :] if value < item)
        if pos == cycle_start:
            continue
        while item == result[pos]:
            pos += 1
        item, result[pos] = result[pos], item
        while pos != cycle_start:
            pos = cycle_start + sum(
                1 for value in result[cycle_start + 1 :] if value < item
            )
            while item == result[pos]:
                pos += 1
            item, result[pos] = result[pos], item
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers by counting occurrences."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort requires non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers, one decimal digit per pass."""
    result = list(items)
    if not result:
        return []
    if min(result) < 0:
        raise ValueError("radix sort requires non-negative integers")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // exp) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        exp *= 10
    return result


def bucket_sort(items: Iterable[float]) -> list[float]:
    """Return a sorted copy of numbers in the half-open range [0, 1)."""
    values = list(items)
    n = len(values)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in values:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort requires values in [0, 1), got {value!r}")
        buckets[int(value * n)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy, bubbling the largest remaining element to the end each pass."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy, placing the smallest remaining element at each position."""
    result = list(items)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy, inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a stably sorted copy using top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in ascending order."""
    a, b = sorted(first), sorted(second)
    result: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if i > 0 and a[i] == a[i - 1]:
            i += 1
            continue
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


def union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values present in either input, in ascending order."""
    return sorted({*first, *second})


def _check_range(items: Sequence[T], low: int, high: int) -> None:
    if not 0 <= low <= high < len(items):
        raise IndexError(f"partition range [{low}, {high}] out of bounds")


def lomuto_partition(items: MutableSequence[T], low: int, high: int) -> int:
    """Partition ``items[low..high]`` in place around its last element.

    Elements smaller than the pivot end up before it, the rest after it.
    Returns the pivot's final index.
    """
    _check_range(items, low, high)
    pivot = items[high]
    boundary = low - 1
    for i in range(low, high):
        if items[i] < pivot:
            boundary += 1
            items[i], items[boundary] = items[boundary], items[i]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort_lomuto(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using quicksort with the Lomuto partition."""
    result = list(items)

    def sort(low: int, high: int) -> None:
        if low < high:
            p = lomuto_partition(result, low, high)
            sort(low, p - 1)
            sort(p + 1, high)

    sort(0, len(result) - 1)
    return result


def hoare_partition(items: MutableSequence[T], low: int, high: int) -> int:
    """Partition ``items[low..high]`` in place around its first element.

    Returns ``j`` such that every element of ``items[low..j]`` is no greater
    than every element of ``items[j+1..high]``.
    """
    _check_range(items, low, high)
    pivot = items[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def quick_sort_hoare(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using quicksort with the Hoare partition."""
    result = list(items)

    def sort(low: int, high: int) -> None:
        if low < high:
            p = hoare_partition(result, low, high)
            sort(low, p)
            sort(p + 1, high)

    sort(0, len(result) - 1)
    return result


def kth_smallest(items: Iterable[T], k: int) -> T:
    """Return the element that would sit at 0-based index ``k`` after sorting."""
    values = list(items)
    if not 0 <= k < len(values):
        raise IndexError(f"k={k} out of range for {len(values)} items")
    low, high = 0, len(values) - 1
    while low < high:
        p = lomuto_partition(values, low, high)
        if p == k:
            return values[p]
        if p > k:
            high = p - 1
        else:
            low = p + 1
    return values[k]


def partition_around_first(items: MutableSequence[T]) -> int:
    """Partition the whole of ``items`` in place around its first element.

    Returns the split index as :func:`hoare_partition` does.
    """
    if not items:
        raise ValueError("cannot partition an empty sequence")
    return hoare_partition(items, 0, len(items) - 1)