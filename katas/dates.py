"""Calendar arithmetic on the proleptic Gregorian calendar."""

from __future__ import annotations

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

Date = tuple[int, int, int]


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_before_year(year: int) -> int:
    if year <= 1:
        return 0
    previous = year - 1
    return 365 * previous + previous // 4 - previous // 100 + previous // 400


def first_weekday(year: int) -> str:
    """Return the name of the weekday on which 1 January of the year falls."""
    return WEEKDAYS[(1 + _days_before_year(year)) % 7]


def day_number(year: int, month: int, day: int) -> int:
    """Return the count of days from the start of year 1 up to the given date."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    total = _days_before_year(year) + sum(DAYS_IN_MONTH[: month - 1])
    if is_leap_year(year) and month > 2:
        total += 1
    return total + day


def days_between(start: Date, end: Date) -> int:
    """Return the days from start to end; negative when end comes first."""
    return day_number(*end) - day_number(*start)