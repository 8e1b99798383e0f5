"""Searching routines over sorted sequences and related problems."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import accumulate


def binary_search(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_search_recursive(
    items: Sequence[int], target: int, low: int = 0, high: int | None = None
) -> int:
    """Recursive binary search within ``items[low..high]``; returns -1 when absent."""
    if high is None:
        high = len(items) - 1
    if low > high:
        return -1
    mid = (low + high) // 2
    if items[mid] == target:
        return mid
    if items[mid] > target:
        return binary_search_recursive(items, target, low, mid - 1)
    return binary_search_recursive(items, target, mid + 1, high)


def first_occurrence(items: Sequence[int], target: int) -> int:
    """Return the lowest index of ``target`` in the ascending ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        elif mid == 0 or items[mid] != items[mid - 1]:
            return mid
        else:
            high = mid - 1
    return -1


def last_occurrence(items: Sequence[int], target: int) -> int:
    """Return the highest index of ``target`` in the ascending ``items``, or -1."""
    last = len(items) - 1
    low, high = 0, last
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        elif mid == last or items[mid] != items[mid + 1]:
            return mid
        else:
            low = mid + 1
    return -1


def count_ones(items: Sequence[int]) -> int:
    """Count the ones in a sorted sequence of zeros and ones."""
    start = first_occurrence(items, 1)
    if start == -1:
        return 0
    return last_occurrence(items, 1) - start + 1


def integer_sqrt(n: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if n < 0:
        raise ValueError("square root of a negative number")
    low, high = 0, n
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        if square > n:
            high = mid - 1
        else:
            low = mid + 1
            answer = mid
    return answer


def has_pair_with_sum(items: Sequence[int], target: int, start: int = 0) -> bool:
    """Whether two distinct positions from ``start`` on in the ascending ``items`` sum to ``target``."""
    first, last = start, len(items) - 1
    while first < last:
        pair = items[first] + items[last]
        if pair == target:
            return True
        if pair > target:
            last -= 1
        else:
            first += 1
    return False


def has_triplet_with_sum(items: Sequence[int], total: int) -> bool:
    """Whether three distinct positions in the ascending ``items`` sum to ``total``."""
    return any(
        has_pair_with_sum(items, total - items[i], i + 1)
        for i in range(len(items) - 2)
    )


def allocate_min_pages(pages: Sequence[int], students: int) -> int:
    """Minimise the largest contiguous share when splitting ``pages`` among ``students``."""
    if students < 1:
        raise ValueError("at least one student is required")
    books = list(pages)
    if not books:
        raise ValueError("there must be at least one book")
    prefix = list(accumulate(books, initial=0))

    @lru_cache(maxsize=None)
    def solve(count: int, readers: int) -> int:
        if readers == 1:
            return prefix[count]
        if count == 1:
            return books[0]
        return min(
            max(solve(split, readers - 1), prefix[count] - prefix[split])
            for split in range(1, count)
        )

    return solve(len(books), students)