"""Small everyday conversions and measurements."""

from __future__ import annotations

from dataclasses import dataclass

ITEMS_SOLD = 15
METERS_PER_KM = 1000
FEET_PER_KM = 3280.84
INCHES_PER_KM = 39370.1
CENTIMETERS_PER_KM = 100000
PI = 3.14
TOWN_POPULATION = 80000


@dataclass(frozen=True)
class DistanceConversion:
    """A distance given in kilometres and its equivalents."""

    kilometers: float
    meters: float
    feet: float
    inches: float
    centimeters: float


@dataclass(frozen=True)
class Shape:
    """Area and perimeter (circumference for a circle) of a plane shape."""

    area: float
    perimeter: float


@dataclass(frozen=True)
class TownCensus:
    """Population breakdown of a town by sex and literacy."""

    population: int
    men: float
    literate_men: float
    literate_women: float
    illiterate_men: float
    illiterate_women: float


def cost_per_item(total_selling_price: float, total_profit: float) -> float:
    """Return the cost of one of the fifteen items sold."""
    return (total_selling_price - total_profit) / ITEMS_SOLD


def convert_distance(kilometers: float) -> DistanceConversion:
    """Express a distance in kilometres as metres, feet, inches and centimetres."""
    return DistanceConversion(
        kilometers=kilometers,
        meters=kilometers * METERS_PER_KM,
        feet=kilometers * FEET_PER_KM,
        inches=kilometers * INCHES_PER_KM,
        centimeters=kilometers * CENTIMETERS_PER_KM,
    )


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a temperature from Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def rectangle(length: float, breadth: float) -> Shape:
    """Return the area and perimeter of a rectangle."""
    return Shape(area=length * breadth, perimeter=2 * (length + breadth))


def circle(radius: float) -> Shape:
    """Return the area and circumference of a circle."""
    return Shape(area=radius * radius * PI, perimeter=2 * PI * radius)


def town_census(population: int = TOWN_POPULATION) -> TownCensus:
    """Break a town's population down by sex and literacy."""
    men = population * 0.52
    literate_men = men * 0.35
    illiterate_men = men - literate_men
    literate_women = 0.48 * population - 0.35 * men
    illiterate_women = population * 0.52 - illiterate_men
    return TownCensus(
        population=population,
        men=men,
        literate_men=literate_men,
        literate_women=literate_women,
        illiterate_men=illiterate_men,
        illiterate_women=illiterate_women,
    )


def swap(c, d):
    """Return the two values in exchanged order."""
    return d, c