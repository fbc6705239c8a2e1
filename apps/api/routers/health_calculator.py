"""
Health Calculator API Endpoints

Free body composition calculators - no authentication required.

- GET {prefix}/bmi         Body Mass Index with category and recommendation
- GET {prefix}/bai         Body Adiposity Index with category
- GET {prefix}/waisttohip  Waist-to-Hip Ratio with risk category

All endpoints accept metric (kg, cm) or imperial (lb, in) measurements.
"""
import logging

from fastapi import APIRouter, Query

from core.config import settings
from core.exceptions import ValidationError
from schemas import BAIResponse, BMIResponse, WaistToHipResponse
from services.health_calculator import (
    CalculationResult,
    MeasurementError,
    MetricKind,
    calculate_metric,
)
from services.unit_conversion import DEFAULT_GENDER, DEFAULT_UNIT

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.HEALTH_CALCULATOR_PREFIX, tags=["Health Calculator"])

# Query parameter names as declared below; matched case-insensitively
QUERY_KEYS = ("weight", "height", "unit", "gender", "hipCircumference", "waist", "hip")


def _run(kind: MetricKind, first: float, second: float, unit: str, gender: str) -> CalculationResult:
    try:
        return calculate_metric(kind, first, second, unit, gender)
    except MeasurementError as e:
        logger.info(
            f"Rejected {kind.value} measurement: {e.message}",
            extra={"extra_fields": {"metric": kind.value, "field": e.field}}
        )
        raise ValidationError(e.message, field=e.field)


@router.get("/bmi", response_model=BMIResponse)
def calculate_bmi(
    weight: float = Query(..., allow_inf_nan=False, description="kg (metric) or lb (imperial)"),
    height: float = Query(..., allow_inf_nan=False, description="cm (metric) or in (imperial)"),
    unit: str = Query(DEFAULT_UNIT.value, description="metric or imperial"),
    gender: str = Query(DEFAULT_GENDER.value, description="female, or anything else for male"),
):
    """
    Calculate Body Mass Index.

    Returns BMI rounded to 2 decimals, its category and a
    gender-specific recommendation.
    """
    result = _run(MetricKind.BMI, weight, height, unit, gender)
    return BMIResponse.from_result(result)


@router.get("/bai", response_model=BAIResponse)
def calculate_bai(
    hip_circumference: float = Query(..., alias="hipCircumference", allow_inf_nan=False),
    height: float = Query(..., allow_inf_nan=False, description="cm (metric) or in (imperial)"),
    unit: str = Query(DEFAULT_UNIT.value, description="metric or imperial"),
    gender: str = Query(DEFAULT_GENDER.value, description="female, or anything else for male"),
):
    """
    Calculate Body Adiposity Index.

    Height is converted for imperial input; hip circumference is
    used as supplied.
    """
    result = _run(MetricKind.BAI, hip_circumference, height, unit, gender)
    return BAIResponse.from_result(result)


@router.get("/waisttohip", response_model=WaistToHipResponse)
def calculate_waist_to_hip(
    waist: float = Query(..., allow_inf_nan=False, description="cm (metric) or in (imperial)"),
    hip: float = Query(..., allow_inf_nan=False, description="cm (metric) or in (imperial)"),
    unit: str = Query(DEFAULT_UNIT.value, description="metric or imperial"),
    gender: str = Query(DEFAULT_GENDER.value, description="female, or anything else for male"),
):
    """Calculate Waist-to-Hip Ratio and its risk category."""
    result = _run(MetricKind.WAIST_TO_HIP, waist, hip, unit, gender)
    return WaistToHipResponse.from_result(result)
