"""FitFlow API - Routes Package."""

from app.routes import (
    workout,
    nutrition,
    meal_plan,
    shopping,
    plans,
)

__all__ = [
    "workout",
    "nutrition",
    "meal_plan",
    "shopping",
    "plans",
]
