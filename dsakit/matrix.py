"""Traversals and transformations of rectangular integer matrices."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _is_empty(matrix: Matrix) -> bool:
    return not matrix or not matrix[0]


def snake_order(matrix: Matrix) -> list[int]:
    """Return the elements row by row, alternating left-to-right and right-to-left."""
    result: list[int] = []
    for index, row in enumerate(matrix):
        result.extend(row if index % 2 == 0 else reversed(row))
    return result


def boundary(matrix: Matrix) -> list[int]:
    """Return the outer ring of the matrix clockwise, starting at the top-left corner."""
    if _is_empty(matrix):
        return []
    rows, cols = len(matrix), len(matrix[0])
    if rows == 1:
        return list(matrix[0])
    if cols == 1:
        return [row[0] for row in matrix]
    result = list(matrix[0])
    result.extend(matrix[i][cols - 1] for i in range(1, rows))
    result.extend(reversed(matrix[rows - 1][: cols - 1]))
    result.extend(matrix[i][0] for i in range(rows - 2, 0, -1))
    return result


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return a new matrix with rows and columns exchanged."""
    if _is_empty(matrix):
        return []
    return [list(column) for column in zip(*matrix)]


def rotate_by_90(matrix: Matrix) -> list[list[int]]:
    """Return the matrix rotated a quarter turn anticlockwise.

    The rotation is a transpose followed by reversing the order of the rows.
    """
    return transpose(matrix)[::-1]


def spiral(matrix: Matrix) -> list[int]:
    """Return the elements in clockwise spiral order from the top-left corner."""
    result: list[int] = []
    if _is_empty(matrix):
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
        bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def find_in_sorted(matrix: Matrix, target: int) -> tuple[int, int] | None:
    """Locate ``target`` in a matrix whose rows and columns are ascending.

    The search starts at the top-right corner and moves down or left.
    Returns the ``(row, column)`` position, or ``None`` when absent.
    """
    if _is_empty(matrix):
        return None
    rows = len(matrix)
    row, col = 0, len(matrix[0]) - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return row, col
        if target > value:
            row += 1
        else:
            col -= 1
    return None