"""
FitFlow API - Shopping Schemas.

Pydantic schemas for grocery list aggregation.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, ConfigDict

from app.models.catalog import Meal
from app.models.plans import GroceryList, MealDay, MealPlan
from app.services.grocery_aggregator import sorted_items


class GroceryItem(BaseModel):
    name: str = Field(..., description="Lower-cased ingredient name")
    count: int = Field(..., ge=1, description="Occurrences across the plan")

    @classmethod
    def from_grocery(cls, grocery: GroceryList) -> List["GroceryItem"]:
        return [cls(name=name, count=count) for name, count in sorted_items(grocery)]


class GroceryListResponse(BaseModel):
    """
    Schema for generated grocery list response.

    Attributes:
        items: Ingredients with occurrence counts, sorted by name.
        distinct_items: Number of distinct ingredients.
        created_at: Generation timestamp.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {"name": "broccoli", "count": 2},
                    {"name": "rice", "count": 3}
                ],
                "distinct_items": 2,
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    )

    items: List[GroceryItem]
    distinct_items: int
    created_at: datetime


class GroceryMealInput(BaseModel):
    name: str
    ingredients: List[str] = Field(default_factory=list)


class GroceryDayInput(BaseModel):
    label: str = ""
    meals: List[GroceryMealInput] = Field(default_factory=list)


class GroceryListRequest(BaseModel):
    """
    Schema for grocery list request.

    Accepts the `days` of a generated meal plan as-is; fields other than
    meal names and ingredients are ignored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "days": [
                    {
                        "label": "Mon",
                        "meals": [
                            {"name": "Salmon & Rice", "ingredients": ["salmon", "rice", "asparagus"]},
                            {"name": "Quinoa Salad", "ingredients": ["quinoa", "beans", "vegetables"]}
                        ]
                    }
                ]
            }
        }
    )

    days: List[GroceryDayInput] = Field(..., description="Meal plan days")

    def to_meal_plan(self) -> MealPlan:
        return MealPlan(days=[
            MealDay(
                label=day.label,
                meals=[
                    Meal(
                        name=meal.name,
                        tags=frozenset(),
                        calories=0,
                        protein=0,
                        carbs=0,
                        fat=0,
                        ingredients=tuple(meal.ingredients),
                    )
                    for meal in day.meals
                ],
            )
            for day in self.days
        ])
