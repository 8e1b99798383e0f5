# dsakit

A small collection of classic algorithms on lists and matrices. Each one is a
plain function over ordinary Python sequences. It needs only the standard
library.

Most functions leave their input untouched and return a new list or a value.
The partition functions are the exception: `lomuto_partition`,
`hoare_partition` and `partition_around_first` rearrange the list they are
given in place and return an index.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.matrix`

Functions for rectangular matrices given as sequences of rows. An empty
matrix gives an empty result (or `None` from `find_in_sorted`).

- `snake_order(matrix)`: the elements row by row, alternating left-to-right
  and right-to-left.
- `boundary(matrix)`: the outer ring clockwise from the top-left corner.
- `spiral(matrix)`: all elements in clockwise spiral order.
- `transpose(matrix)`: a new matrix with rows and columns exchanged.
- `rotate_by_90(matrix)`: a new matrix rotated a quarter turn anticlockwise.
- `find_in_sorted(matrix, target)`: the `(row, column)` of `target` in a
  matrix whose rows and columns ascend, or `None`.

```python
from dsakit.matrix import spiral, boundary

grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
spiral(grid)    # [1, 2, 3, 6, 9, 8, 7, 4, 5]
boundary(grid)  # [1, 2, 3, 6, 9, 8, 7, 4]
```

### `dsakit.searching`

Searches over ascending sequences, plus a few related problems. The index
searches return `-1` when the target is absent.

- `binary_search(items, target)`
- `binary_search_recursive(items, target, low=0, high=None)`
- `first_occurrence(items, target)` and `last_occurrence(items, target)`
- `count_ones(items)`: the number of ones in a sorted run of zeros and ones.
- `integer_sqrt(n)`: the floor of the square root; `ValueError` for negative `n`.
- `has_pair_with_sum(items, target, start=0)`: two distinct positions from
  `start` on that sum to `target`.
- `has_triplet_with_sum(items, total)`
- `allocate_min_pages(pages, students)`: the smallest possible largest
  contiguous share; `ValueError` for no books or fewer than one student.

```python
from dsakit.searching import binary_search, integer_sqrt

binary_search([1, 3, 5, 7], 5)  # 2
integer_sqrt(10)                # 3
```

### `dsakit.sorting`

Every sort returns a new sorted list.

- Comparison sorts: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `merge_sort` (stable), `cycle_sort`, `quick_sort_lomuto`, `quick_sort_hoare`.
- Non-comparison sorts: `counting_sort` and `radix_sort` take non-negative
  integers and raise `ValueError` otherwise; `bucket_sort` takes numbers in
  `[0, 1)` and raises `ValueError` otherwise.
- Partitioning in place: `lomuto_partition(items, low, high)` and
  `hoare_partition(items, low, high)` raise `IndexError` for a range outside
  the list; `partition_around_first(items)` raises `ValueError` for an empty
  list.
- Selection: `kth_smallest(items, k)` with a 0-based `k`; `IndexError` when
  `k` is out of range.
- Set operations: `intersection(first, second)` and `union(first, second)`
  return distinct values in ascending order.

```python
from dsakit.sorting import merge_sort, kth_smallest

merge_sort([3, 4, 6, 9, 2, 1])       # [1, 2, 3, 4, 6, 9]
kth_smallest([3, 4, 6, 9, 2, 1], 2)  # 3
```

### `dsakit.arrays`

Everyday problems on one-dimensional sequences:

- `largest(items)` (`ValueError` when empty) and `second_largest_index(items)`
  (`-1` when there is none).
- `is_sorted(items)`
- `leaders(items)`: elements greater than everything to their right,
  rightmost first.
- `left_rotate(items, d)`
- `move_zeros_to_end(items)`
- `remove_duplicates_sorted(items)`
- `frequencies(items)` and `elements_above(items, threshold)`, both in
  first-seen order.
- `prefix_sums(items)` and `range_sum(items, left, right)` (inclusive;
  `IndexError` for a range out of bounds).
- `max_window_sum(items, k)`: `ValueError` unless `1 <= k <= len(items)`.
- `has_subarray_with_sum(items, total)`: non-negative values only,
  `ValueError` otherwise.
- `count_parity_switches(items)`: adjacent pairs of differing parity.
- `trapped_water(heights)`
- `car_pooling(trips, capacity)`: each trip is `(passengers, start, end)`.

```python
from dsakit.arrays import trapped_water, car_pooling

trapped_water([3, 0, 1, 2, 5])           # 6
car_pooling([[2, 1, 5], [3, 3, 7]], 4)   # False
```

## What it does not do

`dsakit` is a library only. It has no command-line program and prints
nothing. Call its functions from your own code and use the values they
return.