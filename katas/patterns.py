"""Number triangles printed row by row."""

from __future__ import annotations


def descending_counts(n: int) -> list[str]:
    """Rows counting 0..n, then 0..n-1, down to a single 0."""
    return ["".join(str(j) for j in range(n - i + 1)) for i in range(n + 1)]


def zero_padded_countdown(n: int) -> list[str]:
    """Rows from n down to 1, row i being i-1 zeros followed by i."""
    return ["0" * (i - 1) + str(i) for i in range(n, 0, -1)]