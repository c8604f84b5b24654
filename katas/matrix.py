"""Element-wise and product arithmetic on integer matrices."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

Matrix = list[list[int]]

MATRIX_A = ((1, 2, 3), (4, 5, 6), (7, 8, 9))
MATRIX_B = ((9, 8, 7), (6, 5, 4), (3, 2, 1))


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _elementwise(
    a: Sequence[Sequence[int]],
    b: Sequence[Sequence[int]],
    op: Callable[[int, int], int],
) -> Matrix:
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[op(x, y) for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def add_matrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of equal shape."""
    return _elementwise(a, b, lambda x, y: x + y)


def sub_matrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise difference a - b of two matrices of equal shape."""
    return _elementwise(a, b, lambda x, y: x - y)


def multiply_matrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product a x b."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if cols_a != rows_b:
        raise ValueError("columns of the first matrix must match rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with each value followed by a tab and each row by a newline."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Print two sample matrices and their sum, difference and product."""
    out = sys.stdout
    out.write("Matrix A: \n")
    out.write(format_matrix(MATRIX_A))
    out.write("Matrix B: \n")
    out.write(format_matrix(MATRIX_B))
    out.write("\nMatrix A + Matrix B = \n")
    out.write(format_matrix(add_matrix(MATRIX_A, MATRIX_B)))
    out.write("\nMatrix A - Matrix B = \n")
    out.write(format_matrix(sub_matrix(MATRIX_A, MATRIX_B)))
    out.write("\nMatrix A x Matrix B = \n")
    out.write(format_matrix(multiply_matrix(MATRIX_A, MATRIX_B)))
    return 0