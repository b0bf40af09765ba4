# app/routes/workout.py
"""FitFlow API - Workout Routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from settings import settings
from app.dependencies import get_plan_engine
from app.schemas.workout import WorkoutRequest, WorkoutPlanResponse
from app.services.plan_engine import PlanEngine

router = APIRouter()


@router.post("/generate", response_model=WorkoutPlanResponse)
async def generate_workout(
    request: WorkoutRequest,
    engine: PlanEngine = Depends(get_plan_engine)
):
    """Generate a personalized workout plan."""
    profile = request.to_profile(default_days=settings.DEFAULT_WORKOUT_DAYS)
    result = engine.generate_workout_plan(profile)
    if not result.success:
        raise result.error

    return WorkoutPlanResponse.from_plan(result.data, datetime.now(timezone.utc))


@router.get("/sample", response_model=WorkoutPlanResponse)
async def sample_workout(engine: PlanEngine = Depends(get_plan_engine)):
    """Preview plan: 4-day beginner hypertrophy with dumbbells and bodyweight."""
    plan = engine.sample_workout_plan()
    return WorkoutPlanResponse.from_plan(plan, datetime.now(timezone.utc))
