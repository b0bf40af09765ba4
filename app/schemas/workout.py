"""
FitFlow API - Workout Schemas.

Pydantic schemas for workout plan generation.
"""

from datetime import datetime
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import BaseModel, Field, ConfigDict

from app.models.plans import Profile, WorkoutDay, WorkoutPlan

DEMO_SEARCH_URL = "https://www.youtube.com/results?search_query="


class WorkoutRequest(BaseModel):
    """
    Schema for workout generation request.

    Attributes:
        goal: Training goal.
        experience: Training experience.
        days: Training days per week, clamped to 1-6.
        equipment: Owned equipment tags.
        age: Age in years.
        body_fat_pct: Body fat percentage (0 when unknown).
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "goal": "hypertrophy",
                "experience": "beginner",
                "days": 4,
                "equipment": ["dumbbells", "bodyweight"],
                "age": 34,
                "body_fat_pct": 22
            }
        }
    )

    goal: str = Field(
        default="hypertrophy",
        description="Goal (strength/hypertrophy/fatloss/conditioning)"
    )
    experience: str = Field(
        default="beginner",
        description="Experience (beginner/intermediate/advanced)"
    )
    days: Optional[int] = Field(
        None,
        description="Training days per week (clamped to 1-6)"
    )
    equipment: List[str] = Field(
        default_factory=list,
        description="Owned equipment (bodyweight/dumbbells/barbell/machines/bands/cables/kettlebell)"
    )
    age: Optional[int] = Field(None, ge=0, description="Age in years")
    body_fat_pct: Optional[float] = Field(0, ge=0, lt=100, description="Body fat percentage")

    def to_profile(self, default_days: int) -> Profile:
        return Profile(
            goal=self.goal,
            experience=self.experience,
            age=self.age or None,
            body_fat_pct=self.body_fat_pct or 0,
            equipment=frozenset(e.strip().lower() for e in self.equipment if e.strip()),
            days=self.days if self.days is not None else default_days,
        )


class PrescribedExerciseSchema(BaseModel):
    name: str
    group: str
    sets: int
    reps: str
    demo_url: str = Field(..., description="Video search link for the exercise")


class WorkoutDaySchema(BaseModel):
    day: int = Field(..., description="Day number")
    focus: str = Field(..., description="Day focus (Full Body/Upper/Lower/Push/...)")
    label: str
    exercises: List[PrescribedExerciseSchema]
    note: Optional[str] = Field(None, description="Set when no exercise fits the equipment")

    @classmethod
    def from_day(cls, day: WorkoutDay) -> "WorkoutDaySchema":
        return cls(
            day=day.number,
            focus=day.focus,
            label=day.label,
            exercises=[
                PrescribedExerciseSchema(
                    name=ex.name,
                    group=ex.group.value,
                    sets=ex.sets,
                    reps=ex.reps,
                    demo_url=DEMO_SEARCH_URL + quote_plus(f"{ex.name} exercise"),
                )
                for ex in day.exercises
            ],
            note=None if day.has_exercises else "No eligible exercises for the available equipment",
        )


class WorkoutPlanResponse(BaseModel):
    """
    Schema for generated workout response.

    Attributes:
        days: Ordered training days.
        sets: Sets applied to every exercise.
        reps: Rep range applied to every exercise.
        created_at: Generation timestamp.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "days": [
                    {
                        "day": 1,
                        "focus": "Upper",
                        "label": "Day 1 - Upper",
                        "exercises": [
                            {
                                "name": "Push-Up",
                                "group": "push",
                                "sets": 3,
                                "reps": "8-12",
                                "demo_url": "https://www.youtube.com/results?search_query=Push-Up+exercise"
                            }
                        ],
                        "note": None
                    }
                ],
                "sets": 3,
                "reps": "8-12",
                "day_count": 1,
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    )

    days: List[WorkoutDaySchema]
    sets: int
    reps: str
    day_count: int
    created_at: datetime

    @classmethod
    def from_plan(cls, plan: WorkoutPlan, created_at: datetime) -> "WorkoutPlanResponse":
        return cls(
            days=[WorkoutDaySchema.from_day(day) for day in plan.days],
            sets=plan.prescription.sets,
            reps=plan.prescription.rep_range,
            day_count=len(plan.days),
            created_at=created_at,
        )
