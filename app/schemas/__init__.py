"""FitFlow API - Pydantic Schemas Package."""

from app.schemas.workout import (
    WorkoutRequest,
    WorkoutPlanResponse,
    WorkoutDaySchema,
    PrescribedExerciseSchema,
)
from app.schemas.nutrition import (
    NutritionRequest,
    NutritionTargetsResponse,
    BMIRequest,
    BMIResponse,
)
from app.schemas.shopping import (
    GroceryItem,
    GroceryListRequest,
    GroceryListResponse,
)
from app.schemas.meal_plan import (
    MealPlanRequest,
    MealPlanResponse,
    MealDaySchema,
    MealSchema,
    SampleMealDayResponse,
)
from app.schemas.saved_plan import (
    SavePlanRequest,
    SavedPlanResponse,
    SavedPlanListResponse,
    ThemeRequest,
    ThemeResponse,
)

__all__ = [
    "WorkoutRequest",
    "WorkoutPlanResponse",
    "WorkoutDaySchema",
    "PrescribedExerciseSchema",
    "NutritionRequest",
    "NutritionTargetsResponse",
    "BMIRequest",
    "BMIResponse",
    "GroceryItem",
    "GroceryListRequest",
    "GroceryListResponse",
    "MealPlanRequest",
    "MealPlanResponse",
    "MealDaySchema",
    "MealSchema",
    "SampleMealDayResponse",
    "SavePlanRequest",
    "SavedPlanResponse",
    "SavedPlanListResponse",
    "ThemeRequest",
    "ThemeResponse",
]
