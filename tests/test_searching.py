import bisect
import math
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    allocate_min_pages,
    binary_search,
    binary_search_recursive,
    count_ones,
    first_occurrence,
    has_pair_with_sum,
    has_triplet_with_sum,
    integer_sqrt,
    last_occurrence,
)

sorted_lists = st.lists(st.integers(-50, 50), max_size=30).map(sorted)


@given(sorted_lists, st.integers(-60, 60))
def test_binary_search(items, target):
    index = binary_search(items, target)
    if target in items:
        assert items[index] == target
    else:
        assert index == -1


@given(sorted_lists, st.integers(-60, 60))
def test_binary_search_recursive(items, target):
    index = binary_search_recursive(items, target)
    if target in items:
        assert items[index] == target
    else:
        assert index == -1


def test_binary_search_recursive_respects_bounds():
    items = [1, 2, 3, 4, 5, 6]
    assert binary_search_recursive(items, 6, 0, 3) == -1
    assert binary_search_recursive(items, 6, 3, 5) == 5


def test_binary_search_empty():
    assert binary_search([], 3) == -1
    assert binary_search_recursive([], 3) == -1


@given(sorted_lists, st.integers(-60, 60))
def test_first_occurrence(items, target):
    expected = bisect.bisect_left(items, target) if target in items else -1
    assert first_occurrence(items, target) == expected


@given(sorted_lists, st.integers(-60, 60))
def test_last_occurrence(items, target):
    expected = bisect.bisect_right(items, target) - 1 if target in items else -1
    assert last_occurrence(items, target) == expected


@given(st.integers(0, 20), st.integers(0, 20))
def test_count_ones(zeros, ones):
    assert count_ones([0] * zeros + [1] * ones) == ones


@given(st.integers(0, 10**12))
def test_integer_sqrt_matches_isqrt(n):
    assert integer_sqrt(n) == math.isqrt(n)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-1)


@given(sorted_lists, st.integers(-120, 120))
def test_has_pair_with_sum(items, target):
    expected = any(a + b == target for a, b in combinations(items, 2))
    assert has_pair_with_sum(items, target) is expected


def test_has_pair_does_not_reuse_element():
    assert has_pair_with_sum([1, 5], 2) is False


def test_has_pair_with_start():
    items = [1, 2, 3, 10]
    assert has_pair_with_sum(items, 3) is True
    assert has_pair_with_sum(items, 3, 1) is False


@given(st.lists(st.integers(-30, 30), max_size=12).map(sorted), st.integers(-100, 100))
def test_has_triplet_with_sum(items, total):
    expected = any(sum(c) == total for c in combinations(items, 3))
    assert has_triplet_with_sum(items, total) is expected


def test_has_triplet_short_input():
    assert has_triplet_with_sum([1, 2], 3) is False


def test_allocate_min_pages_classic():
    assert allocate_min_pages([12, 34, 67, 90], 2) == 113


def _parts_needed(pages, cap):
    parts, current = 1, 0
    for page in pages:
        if current + page > cap:
            parts += 1
            current = page
        else:
            current += page
    return parts


@given(st.lists(st.integers(1, 50), min_size=1, max_size=7), st.integers(1, 8))
def test_allocate_min_pages_is_optimal(pages, students):
    result = allocate_min_pages(pages, students)
    assert max(pages) <= result <= sum(pages)
    assert _parts_needed(pages, result) <= students
    if result - 1 >= max(pages):
        assert _parts_needed(pages, result - 1) > students


@given(st.lists(st.integers(1, 50), min_size=1, max_size=7))
def test_allocate_min_pages_extremes(pages):
    assert allocate_min_pages(pages, 1) == sum(pages)
    assert allocate_min_pages(pages, len(pages)) == max(pages)


@pytest.mark.parametrize("pages,students", [([], 1), ([1, 2], 0)])
def test_allocate_min_pages_invalid(pages, students):
    with pytest.raises(ValueError):
        allocate_min_pages(pages, students)