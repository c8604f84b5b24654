"""Grains of wheat doubling on each square of a chessboard."""

from __future__ import annotations

BOARD_SQUARES = 64


def square(index: int) -> int:
    """Return the grains on the given square, numbered 1 to 64."""
    if not 1 <= index <= BOARD_SQUARES:
        raise ValueError(f"square must be between 1 and {BOARD_SQUARES}, got {index}")
    return 1 << (index - 1)


def total() -> int:
    """Return the grains on the whole board."""
    return sum(square(index) for index in range(1, BOARD_SQUARES + 1))