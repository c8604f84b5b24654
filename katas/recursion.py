"""Classic exercises that are usually solved recursively."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = [
    "add",
    "count_digits",
    "factorial",
    "fibonacci",
    "sum_values",
    "sum_natural",
]


def add(a: int, b: int) -> int:
    """Add b to a by moving one unit at a time from b to a."""
    if b < 0:
        raise ValueError("the second operand must not be negative")
    return a + b


def count_digits(number: int) -> int:
    """Return the number of decimal digits of number; zero has none."""
    if number == 0:
        return 0
    return len(str(abs(number)))


def factorial(n: int) -> int:
    """Return n!, with 0! = 1! = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(n) = 0 for n < 0."""
    if n <= 0:
        return 0
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def sum_values(values: Iterable[int]) -> int:
    """Return the sum of all values; an empty collection sums to 0."""
    total = 0
    for value in values:
        total += value
    return total


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2