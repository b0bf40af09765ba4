"""FitFlow - Utilities Package."""

from app.utils.numbers import round_half_up, clamp
from app.utils.errors import (
    FitFlowException,
    ValidationError,
    NotFoundError,
    NoMatchingMealsError,
    StoreUnavailableError,
)

__all__ = [
    "round_half_up",
    "clamp",
    "FitFlowException",
    "ValidationError",
    "NotFoundError",
    "NoMatchingMealsError",
    "StoreUnavailableError",
]
