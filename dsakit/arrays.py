"""Classic problems over one-dimensional integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby, pairwise


def second_largest_index(items: Sequence[int]) -> int:
    """Return the index of the largest value strictly below the maximum, or -1.

    Among equal candidates the first occurrence wins.
    """
    largest_at = 0
    result = -1
    for i, value in enumerate(items):
        if value > items[largest_at]:
            result = largest_at
            largest_at = i
        elif value != items[largest_at] and (result == -1 or value > items[result]):
            result = i
    return result


def car_pooling(trips: Iterable[Sequence[int]], capacity: int) -> bool:
    """Whether a car of ``capacity`` seats can serve every trip.

    Each trip is ``(passengers, start, end)``; passengers leave at ``end``
    before anyone boarding at the same point gets in.
    """
    events: list[tuple[int, int]] = []
    for passengers, start, end in trips:
        events.append((start, passengers))
        events.append((end, -passengers))
    on_board = 0
    for _, change in sorted(events):
        on_board += change
        if on_board > capacity:
            return False
    return True


def elements_above(items: Iterable[int], threshold: int) -> list[int]:
    """Return the distinct values occurring more than ``threshold`` times, in first-seen order."""
    return [value for value, count in Counter(items).items() if count > threshold]


def frequencies(items: Iterable[int]) -> dict[int, int]:
    """Return how often each value occurs, keyed in first-seen order."""
    return dict(Counter(items))


def largest(items: Iterable[int]) -> int:
    """Return the largest value; raises ``ValueError`` for an empty input."""
    values = list(items)
    if not values:
        raise ValueError("largest() of an empty sequence")
    return max(values)


def count_parity_switches(items: Iterable[int]) -> int:
    """Count adjacent pairs whose members differ in parity."""
    return sum(1 for a, b in pairwise(items) if a % 2 != b % 2)


def max_window_sum(items: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive elements."""
    if not 1 <= k <= len(items):
        raise ValueError(f"window size {k} invalid for {len(items)} items")
    window = sum(items[:k])
    best = window
    for i in range(k, len(items)):
        window += items[i] - items[i - k]
        best = max(best, window)
    return best


def has_subarray_with_sum(items: Sequence[int], total: int) -> bool:
    """Whether a non-empty contiguous run of non-negative ``items`` sums to ``total``."""
    if any(value < 0 for value in items):
        raise ValueError("sliding-window search requires non-negative values")
    window = 0
    start = 0
    for end, value in enumerate(items):
        window += value
        while window > total and start <= end:
            window -= items[start]
            start += 1
        if window == total and start <= end:
            return True
    return False


def trapped_water(heights: Sequence[int]) -> int:
    """Return the units of rain water held between bars of the given heights."""
    if len(heights) < 3:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max[1:-1], right_max[1:-1], heights[1:-1])
    )


def is_sorted(items: Iterable[int]) -> bool:
    """Whether the values are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(items))


def leaders(items: Sequence[int]) -> list[int]:
    """Return the elements greater than everything to their right, rightmost first."""
    result: list[int] = []
    for value in reversed(items):
        if not result or value > result[-1]:
            result.append(value)
    return result


def left_rotate(items: Sequence[int], d: int) -> list[int]:
    """Return a copy rotated left by ``d`` positions."""
    values = list(items)
    if not values:
        return values
    d %= len(values)
    return values[d:] + values[:d]


def move_zeros_to_end(items: Iterable[int]) -> list[int]:
    """Return a copy with every zero moved to the end, other values keeping their order."""
    values = list(items)
    nonzero = [value for value in values if value != 0]
    return nonzero + [0] * (len(values) - len(nonzero))


def prefix_sums(items: Iterable[int]) -> list[int]:
    """Return the running totals of the values."""
    return list(accumulate(items))


def range_sum(items: Sequence[int], left: int, right: int) -> int:
    """Return the sum of ``items[left..right]`` inclusive, via prefix sums."""
    if not 0 <= left <= right < len(items):
        raise IndexError(f"range [{left}, {right}] out of bounds")
    sums = prefix_sums(items)
    return sums[right] - (sums[left - 1] if left > 0 else 0)


def remove_duplicates_sorted(items: Iterable[int]) -> list[int]:
    """Return the sorted input with repeated values collapsed to one."""
    return [value for value, _ in groupby(items)]