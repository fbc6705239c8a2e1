"""
Unit Conversion Service

Normalizes body measurements to the metric basis used by the calculators.
Weight is handled in kilograms, height in meters, circumferences in centimeters.

Unit and gender arrive as free-form query tokens. Matching is case-insensitive:
only "imperial" selects imperial units and only "female" selects the female
tables; anything else falls back to metric / male.
"""
from enum import Enum
from typing import Optional


LB_TO_KG = 0.453592
INCH_TO_M = 0.0254
INCH_TO_CM = 2.54
CM_PER_M = 100


class Unit(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


DEFAULT_UNIT = Unit.METRIC
DEFAULT_GENDER = Gender.FEMALE


def parse_unit(token: Optional[str]) -> Unit:
    """
    Resolve a unit token.

    Examples:
        >>> parse_unit("IMPERIAL")
        <Unit.IMPERIAL: 'imperial'>
        >>> parse_unit("furlongs")
        <Unit.METRIC: 'metric'>
    """
    if not token:
        return DEFAULT_UNIT
    if token.lower() == Unit.IMPERIAL.value:
        return Unit.IMPERIAL
    return Unit.METRIC


def parse_gender(token: Optional[str]) -> Gender:
    """
    Resolve a gender token. Missing tokens default to female,
    any other value uses the male tables.
    """
    if not token:
        return DEFAULT_GENDER
    if token.lower() == Gender.FEMALE.value:
        return Gender.FEMALE
    return Gender.MALE


def weight_to_kg(weight: float, unit: Unit) -> float:
    """Pounds to kilograms for imperial input; metric weight is already kg."""
    if unit == Unit.IMPERIAL:
        return weight * LB_TO_KG
    return weight


def height_to_m(height: float, unit: Unit) -> float:
    """Inches (imperial) or centimeters (metric) to meters."""
    if unit == Unit.IMPERIAL:
        return height * INCH_TO_M
    return height / CM_PER_M


def length_to_cm(length: float, unit: Unit) -> float:
    # Metric circumferences are taken as centimeters
    if unit == Unit.IMPERIAL:
        return length * INCH_TO_CM
    return length
