"""ASCII rendering of the Mandelbrot set."""

from __future__ import annotations

import sys
from collections.abc import Sequence

WIDTH = 80
HEIGHT = 24
MAX_ITERATIONS = 100
X_MIN, X_MAX = -2.0, 1.0
Y_MIN, Y_MAX = -1.5, 1.5


def mandelbrot(x0: float, y0: float, max_iterations: int = MAX_ITERATIONS) -> int:
    """Return how many iterations the point takes to escape, capped at max_iterations."""
    x = y = 0.0
    iteration = 0
    while x * x + y * y < 4.0 and iteration < max_iterations:
        x, y = x * x - y * y + x0, 2 * x * y + y0
        iteration += 1
    return iteration


def render(width: int = WIDTH, height: int = HEIGHT) -> str:
    """Draw the set as rows of '*' (inside) and ' ' (outside), each ending in a newline."""
    dx = (X_MAX - X_MIN) / width
    dy = (Y_MAX - Y_MIN) / height
    rows = (
        "".join(
            "*" if mandelbrot(X_MIN + j * dx, Y_MIN + i * dy) == MAX_ITERATIONS else " "
            for j in range(width)
        )
        for i in range(height)
    )
    return "".join(row + "\n" for row in rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the default rendering of the set."""
    sys.stdout.write(render())
    return 0