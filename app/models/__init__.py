"""
FitFlow - Models Package.

Catalog records and the plan structures produced by the engine.
"""

from app.models.catalog import Catalog, Exercise, Meal, MuscleGroup
from app.models.plans import (
    GroceryList,
    MealDay,
    MealPlan,
    NutritionTargets,
    PrescribedExercise,
    Profile,
    SetsReps,
    WorkoutDay,
    WorkoutPlan,
)

__all__ = [
    "Catalog",
    "Exercise",
    "Meal",
    "MuscleGroup",
    "GroceryList",
    "MealDay",
    "MealPlan",
    "NutritionTargets",
    "PrescribedExercise",
    "Profile",
    "SetsReps",
    "WorkoutDay",
    "WorkoutPlan",
]
