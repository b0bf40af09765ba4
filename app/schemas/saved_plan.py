"""
FitFlow API - Saved Plan Schemas.

Pydantic schemas for saved plans and the theme preference.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, ConfigDict


class SavePlanRequest(BaseModel):
    """
    Schema for saving a plan.

    Attributes:
        type: Plan kind (workout/meal).
        title: Optional title; defaults to "Workout Plan" / "Meal Plan".
        data: The plan payload as returned by the generate endpoints.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "meal",
                "title": "Cut - week 1",
                "data": {"days": [{"label": "Mon", "meals": []}]}
            }
        }
    )

    type: Literal["workout", "meal"] = Field(..., description="Plan type")
    title: Optional[str] = Field(None, description="Display title")
    data: Any = Field(..., description="Plan payload")


class SavedPlanResponse(BaseModel):
    index: int = Field(..., description="Position in insertion order")
    type: str
    title: str
    data: Any
    created: int = Field(..., description="Creation time, epoch milliseconds")


class SavedPlanListResponse(BaseModel):
    plans: List[SavedPlanResponse]


class ThemeRequest(BaseModel):
    theme: Literal["light", "dark"]


class ThemeResponse(BaseModel):
    theme: str
