"""Resistor colour bands and their digit values."""

from __future__ import annotations

from enum import IntEnum


class ResistorBand(IntEnum):
    """Colour bands in order of the digit they stand for."""

    BLACK = 0
    BROWN = 1
    RED = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    BLUE = 6
    VIOLET = 7
    GREY = 8
    WHITE = 9


def color_to_string(color: int) -> str:
    """Return the capitalised colour name, or 'Unknown' for a value with no band."""
    try:
        band = ResistorBand(color)
    except ValueError:
        return "Unknown"
    return band.name.capitalize()


def color_value(color: int) -> int:
    """Return the digit a band stands for."""
    try:
        return int(ResistorBand(color))
    except ValueError:
        raise ValueError(f"no resistor band has value {color!r}") from None


def list_colors() -> list[tuple[str, int]]:
    """Return (name, value) for every band, in value order."""
    return [(color_to_string(band), color_value(band)) for band in ResistorBand]