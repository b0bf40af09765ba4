"""
FitFlow - Body Metrics.

BMI helper for profile forms. Missing or non-positive measurements
yield no result instead of an error so the display can stay blank.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: str


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[BMIResult]:
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100
    bmi = weight_kg / (height_m * height_m)
    return BMIResult(bmi=round(bmi, 1), category=bmi_category(bmi))
