"""Sorting and searching over small integer collections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding the values in ascending order, by selection sort."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding the values in ascending order, by bubble sort."""
    items = list(values)
    for done in range(len(items)):
        for i in range(len(items) - done - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def least_value(values: Iterable[int]) -> int:
    """Return the smallest of the values."""
    ordered = bubble_sort(values)
    if not ordered:
        raise ValueError("least_value() needs at least one value")
    return ordered[0]


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of key in the ascending sequence, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Iterable[int], key: int) -> bool:
    """Return True when key is among the values."""
    return any(value == key for value in values)


def reverse_pairs(pairs: Sequence[tuple[str, str]]) -> str:
    """Concatenate the character pairs, last pair first."""
    return "".join(first + second for first, second in reversed(pairs))