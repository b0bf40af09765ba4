# app/routes/meal_plan.py
"""FitFlow API - Meal Plan Routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from settings import settings
from app.dependencies import get_plan_engine
from app.schemas.meal_plan import (
    MealDaySchema,
    MealPlanRequest,
    MealPlanResponse,
    SampleMealDayResponse,
)
from app.schemas.shopping import GroceryItem
from app.services.plan_engine import PlanEngine

router = APIRouter()


@router.post("/generate", response_model=MealPlanResponse)
async def generate_meal_plan(
    request: MealPlanRequest,
    engine: PlanEngine = Depends(get_plan_engine)
):
    """Generate a 7-day meal plan with its grocery list."""
    profile = request.to_profile(default_meals=settings.DEFAULT_MEALS_PER_DAY)
    result = engine.generate_meal_plan(profile)
    if not result.success:
        raise result.error

    plan = result.data
    grocery = GroceryItem.from_grocery(engine.aggregate_grocery_list(plan))
    return MealPlanResponse.from_plan(plan, grocery, datetime.now(timezone.utc))


@router.get("/sample", response_model=SampleMealDayResponse)
async def sample_meal_day(engine: PlanEngine = Depends(get_plan_engine)):
    """Preview day built from three fixed catalog meals."""
    return SampleMealDayResponse(day=MealDaySchema.from_day(engine.sample_meal_day()))
