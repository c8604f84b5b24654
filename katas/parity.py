"""Odd and even classification of integers."""

from __future__ import annotations

from collections.abc import Iterable


def describe_parity(number: int) -> str:
    """Return a sentence stating whether the number is even or odd."""
    kind = "even" if number % 2 == 0 else "odd"
    return f"{number} is {kind} number"


def parity_report(limit: int = 10) -> list[str]:
    """Describe the parity of every number from 0 up to and including limit."""
    return [describe_parity(number) for number in range(limit + 1)]


def odd(number: int) -> int:
    """Return the number itself when it is odd, otherwise 0."""
    return number if number % 2 != 0 else 0


def sum_by_parity(numbers: Iterable[int]) -> tuple[int, int]:
    """Return (sum of odd numbers, sum of even numbers)."""
    odd_sum = even_sum = 0
    for number in numbers:
        if odd(number):
            odd_sum += number
        else:
            even_sum += number
    return odd_sum, even_sum