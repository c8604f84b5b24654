"""Factorials and series built from them."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for value in range(2, n + 1):
        result *= value
    return result


def _terms(n: int):
    """Yield (index, index / index!) for index = 1..n."""
    running = 1
    for index in range(1, n + 1):
        running *= index
        yield index, index / running


def factorial_series(n: int) -> float:
    """Return the sum of i / i! for i from 1 to n."""
    return sum(term for _, term in _terms(n))


def alternating_factorial_series(n: int) -> float:
    """Return the odd-indexed terms of i / i! minus the even-indexed ones, for i up to n."""
    odd_sum = even_sum = 0.0
    for index, term in _terms(n):
        if index % 2 == 0:
            even_sum += term
        else:
            odd_sum += term
    return odd_sum - even_sum