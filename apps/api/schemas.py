from pydantic import BaseModel, ConfigDict, Field

from services.health_calculator import CalculationResult


class BMIResponse(BaseModel):
    """Schema for BMI calculation response"""
    bmi: float = Field(alias="BMI")
    category: str = Field(alias="Category")
    recommendation: str = Field(alias="Recommendation")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: CalculationResult) -> "BMIResponse":
        return cls(bmi=result.value, category=result.category, recommendation=result.recommendation)


class BAIResponse(BaseModel):
    """Schema for Body Adiposity Index response"""
    bai: float = Field(alias="BAI")
    category: str = Field(alias="Category")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: CalculationResult) -> "BAIResponse":
        return cls(bai=result.value, category=result.category)


class WaistToHipResponse(BaseModel):
    """Schema for waist-to-hip ratio response"""
    waist_to_hip_ratio: float = Field(alias="WaistToHipRatio")
    category: str = Field(alias="Category")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: CalculationResult) -> "WaistToHipResponse":
        return cls(waist_to_hip_ratio=result.value, category=result.category)
