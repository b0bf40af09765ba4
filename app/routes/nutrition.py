# app/routes/nutrition.py
"""FitFlow API - Nutrition Routes."""

from fastapi import APIRouter, Depends

from app.dependencies import get_plan_engine
from app.schemas.nutrition import (
    BMIRequest,
    BMIResponse,
    NutritionRequest,
    NutritionTargetsResponse,
)
from app.services.body_metrics import calculate_bmi
from app.services.plan_engine import PlanEngine

router = APIRouter()


@router.post("/targets", response_model=NutritionTargetsResponse)
async def nutrition_targets(
    request: NutritionRequest,
    engine: PlanEngine = Depends(get_plan_engine)
):
    """Daily calorie and macro targets."""
    result = engine.calculate_nutrition_targets(request.to_profile())
    if not result.success:
        raise result.error
    return NutritionTargetsResponse.from_targets(result.data)


@router.post("/bmi", response_model=BMIResponse)
async def bmi(request: BMIRequest):
    """BMI helper; empty when weight or height is missing."""
    result = calculate_bmi(request.weight_kg, request.height_cm)
    if result is None:
        return BMIResponse()
    return BMIResponse(bmi=result.bmi, category=result.category)
