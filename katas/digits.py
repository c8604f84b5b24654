"""Digit reversal and square-sum identities."""

from __future__ import annotations

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def reverse_digits(number: int) -> int:
    """Reverse the decimal digits, keeping the sign; 0 if the result leaves 32-bit range."""
    sign = -1 if number < 0 else 1
    reversed_value = sign * int(str(abs(number))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def _check(number: int) -> None:
    if number < 0:
        raise ValueError("number must not be negative")


def sum_of_squares(number: int) -> int:
    """Return 1^2 + 2^2 + ... + number^2."""
    _check(number)
    return number * (number + 1) * (2 * number + 1) // 6


def square_of_sum(number: int) -> int:
    """Return (1 + 2 + ... + number)^2."""
    _check(number)
    triangle = number * (number + 1) // 2
    return triangle * triangle


def square_difference(number: int) -> int:
    """Return the square of the sum minus the sum of the squares."""
    return square_of_sum(number) - sum_of_squares(number)