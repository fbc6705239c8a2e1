"""
Health Calculator Service

Body composition indices computed from a single set of measurements:

- BMI  = weight_kg / height_m²
- BAI  = hip_cm / height_m^1.5 - 18
- WHR  = waist / hip

Every calculation validates its inputs, normalizes units to metric, evaluates
the formula and classifies the unrounded value against ordered threshold tables.
Results are rounded to 2 decimal places only for output.

BMI classification note:
The threshold chain leaves [24.9, 25.0) outside both "Healthy weight" and
"Overweight", so those values fall through to "Obese". Published results
use these labels; do not change the boundaries.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging
import math

from services.unit_conversion import (
    Gender,
    Unit,
    height_to_m,
    length_to_cm,
    parse_gender,
    parse_unit,
    weight_to_kg,
)

logger = logging.getLogger(__name__)


class MetricKind(str, Enum):
    BMI = "bmi"
    BAI = "bai"
    WAIST_TO_HIP = "waisttohip"


class MeasurementError(ValueError):
    """A measurement failed validation (non-positive value)."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.message = message
        self.field = field


@dataclass(frozen=True)
class CalculationResult:
    metric: MetricKind
    value: float
    category: str
    recommendation: Optional[str] = None


# BMI categories
UNDERWEIGHT = "Underweight"
HEALTHY_WEIGHT = "Healthy weight"
OVERWEIGHT = "Overweight"
OBESE = "Obese"

# BAI categories
UNDERFAT = "Underfat"
NORMAL = "Normal"
OVERFAT = "Overfat"

# WHR categories
LOW_RISK = "Low Risk"
MODERATE_RISK = "Moderate Risk"
HIGH_RISK = "High Risk"


# (female, other)
BMI_RECOMMENDATIONS = {
    UNDERWEIGHT: (
        "Consider consulting a healthcare provider for nutritional guidance.",
        "Consult a healthcare provider for advice on weight management.",
    ),
    HEALTHY_WEIGHT: (
        "Maintaining a healthy weight is essential for overall health.",
        "Maintaining a healthy weight is essential for overall health.",
    ),
    OVERWEIGHT: (
        "Consider a balanced diet and regular exercise to reach a healthy weight.",
        "Regular physical activity is recommended to reduce health risks.",
    ),
    OBESE: (
        "Obesity can increase the risk of chronic diseases. "
        "A healthcare professional can provide personalized recommendations.",
        "Obesity can increase the risk of chronic diseases. "
        "A healthcare professional can provide personalized recommendations.",
    ),
}

# (low, high) cut points: value < low, low <= value < high, value >= high
BAI_THRESHOLDS = {
    Gender.FEMALE: (18.0, 25.0),
    Gender.MALE: (8.0, 21.0),
}

WHR_THRESHOLDS = {
    Gender.FEMALE: (0.80, 0.85),
    Gender.MALE: (0.90, 0.95),
}

BMI_ERROR = "Weight and height must be greater than zero."
BAI_ERROR = "Hip circumference and height must be greater than zero."
WHR_ERROR = "Waist and hip measurements must be greater than zero."


# Floats at or above this have no fractional digits left to round
_ROUNDING_LIMIT = 1e16


def _round(value: float) -> float:
    """
    Round to 2 decimals by scaling to hundredths and rounding half to even.

    Midpoints are judged on the scaled value, so 10.025 gives 10.02.
    """
    if abs(value) >= _ROUNDING_LIMIT:
        return value
    return round(value * 100) / 100


def _divide(numerator: float, denominator: float, message: str, field: str) -> float:
    """
    Divide measurements, rejecting inputs too small or too large for a float result.

    Raises:
        MeasurementError: the denominator underflowed to zero or the quotient is not finite
    """
    if denominator == 0:
        raise MeasurementError(message, field=field)
    quotient = numerator / denominator
    if not math.isfinite(quotient):
        raise MeasurementError(message, field=field)
    return quotient


def _classify(value: float, thresholds: Tuple[float, float], labels: Tuple[str, str, str]) -> str:
    low, high = thresholds
    if value < low:
        return labels[0]
    elif value < high:
        return labels[1]
    return labels[2]


def get_bmi_category(bmi: float) -> str:
    """
    Classify a BMI value.

    Checks run in order with strict upper bounds, so 24.9 <= bmi < 25
    is reported as Obese.
    """
    if bmi < 18.5:
        return UNDERWEIGHT
    elif 18.5 <= bmi < 24.9:
        return HEALTHY_WEIGHT
    elif 25 <= bmi < 29.9:
        return OVERWEIGHT
    else:
        return OBESE


def get_bmi_recommendation(category: str, gender: Gender) -> str:
    female_text, other_text = BMI_RECOMMENDATIONS[category]
    return female_text if gender == Gender.FEMALE else other_text


def get_bai_category(bai: float, gender: Gender) -> str:
    return _classify(bai, BAI_THRESHOLDS[gender], (UNDERFAT, NORMAL, OVERFAT))


def get_whr_category(ratio: float, gender: Gender) -> str:
    return _classify(ratio, WHR_THRESHOLDS[gender], (LOW_RISK, MODERATE_RISK, HIGH_RISK))


def calculate_bmi(
    weight: float,
    height: float,
    unit: Optional[str] = None,
    gender: Optional[str] = None,
) -> CalculationResult:
    """
    Calculate Body Mass Index.

    Args:
        weight: Weight in kilograms (metric) or pounds (imperial)
        height: Height in centimeters (metric) or inches (imperial)
        unit: "metric" (default) or "imperial", case-insensitive
        gender: "female" (default) or anything else for the male texts

    Returns:
        CalculationResult with BMI, category and recommendation

    Raises:
        MeasurementError: weight or height is not positive

    Examples:
        >>> calculate_bmi(70, 175).value
        22.86
    """
    if weight <= 0 or height <= 0:
        raise MeasurementError(BMI_ERROR, field="weight" if weight <= 0 else "height")

    unit = parse_unit(unit)
    gender = parse_gender(gender)

    weight_kg = weight_to_kg(weight, unit)
    height_m = height_to_m(height, unit)

    bmi = _divide(weight_kg, height_m * height_m, BMI_ERROR, "height")
    category = get_bmi_category(bmi)

    logger.debug(f"BMI {bmi:.4f} ({unit.value}, {gender.value}) -> {category}")

    return CalculationResult(
        metric=MetricKind.BMI,
        value=_round(bmi),
        category=category,
        recommendation=get_bmi_recommendation(category, gender),
    )


def calculate_bai(
    hip_circumference: float,
    height: float,
    unit: Optional[str] = None,
    gender: Optional[str] = None,
) -> CalculationResult:
    """
    Calculate Body Adiposity Index.

    Only height is converted for imperial input; the hip circumference
    is used as supplied.
    """
    if hip_circumference <= 0 or height <= 0:
        raise MeasurementError(
            BAI_ERROR,
            field="hip_circumference" if hip_circumference <= 0 else "height",
        )

    unit = parse_unit(unit)
    gender = parse_gender(gender)

    height_m = height_to_m(height, unit)
    bai = _divide(hip_circumference, height_m ** 1.5, BAI_ERROR, "height") - 18
    category = get_bai_category(bai, gender)

    logger.debug(f"BAI {bai:.4f} ({unit.value}, {gender.value}) -> {category}")

    return CalculationResult(metric=MetricKind.BAI, value=_round(bai), category=category)


def calculate_waist_to_hip(
    waist: float,
    hip: float,
    unit: Optional[str] = None,
    gender: Optional[str] = None,
) -> CalculationResult:
    """Calculate Waist-to-Hip Ratio. Imperial inches are converted to cm first."""
    if waist <= 0 or hip <= 0:
        raise MeasurementError(WHR_ERROR, field="waist" if waist <= 0 else "hip")

    unit = parse_unit(unit)
    gender = parse_gender(gender)

    waist_cm = length_to_cm(waist, unit)
    hip_cm = length_to_cm(hip, unit)

    ratio = _divide(waist_cm, hip_cm, WHR_ERROR, "hip")
    category = get_whr_category(ratio, gender)

    logger.debug(f"WHR {ratio:.4f} ({unit.value}, {gender.value}) -> {category}")

    return CalculationResult(metric=MetricKind.WAIST_TO_HIP, value=_round(ratio), category=category)


_CALCULATORS = {
    MetricKind.BMI: calculate_bmi,
    MetricKind.BAI: calculate_bai,
    MetricKind.WAIST_TO_HIP: calculate_waist_to_hip,
}


def calculate_metric(
    kind: MetricKind,
    first: float,
    second: float,
    unit: Optional[str] = None,
    gender: Optional[str] = None,
) -> CalculationResult:
    """
    Dispatch to a calculator by metric kind.

    Measurements are positional in the order each calculator takes them:
    (weight, height), (hip_circumference, height), (waist, hip).
    """
    return _CALCULATORS[MetricKind(kind)](first, second, unit, gender)
