"""Matrix traversals and in-place transformations."""

from typing import List, Sequence


def rotate_image(matrix: List[List[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("rotate_image() needs a square matrix")
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]


def spiral_order(matrix: Sequence[Sequence[int]]) -> List[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    result: List[int] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def set_zeroes(matrix: List[List[int]]) -> None:
    """Zero out, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            row[:] = [0 if j in zero_cols else value for j, value in enumerate(row)]