"""
FitFlow API - MealPlan Schemas.

Pydantic schemas for meal plan generation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.models.catalog import Meal
from app.models.plans import MealDay, MealPlan, Profile
from app.schemas.nutrition import NutritionRequest, NutritionTargetsResponse
from app.schemas.shopping import GroceryItem
from app.services.meal_planner import parse_avoid


class MealPlanRequest(NutritionRequest):
    """
    Schema for meal plan generation request.

    Attributes:
        diet: Diet tag (omnivore/vegetarian/vegan/pescatarian).
        avoid: Ingredient substrings to exclude (list or comma-separated).
        meals_per_day: Meals per day, clamped to 1-6.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "goal": "fatloss",
                "age": 28,
                "sex": "female",
                "weight_kg": 64,
                "height_cm": 168,
                "body_fat_pct": 0,
                "diet": "vegetarian",
                "avoid": "mushroom, nuts",
                "meals_per_day": 3
            }
        }
    )

    diet: str = Field(default="omnivore", description="Diet tag")
    avoid: List[str] = Field(default_factory=list, description="Ingredients to avoid")
    meals_per_day: Optional[int] = Field(None, description="Meals per day (clamped to 1-6)")

    @field_validator("avoid", mode="before")
    @classmethod
    def split_avoid(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return parse_avoid(value)
        return [str(v).strip().lower() for v in value if str(v).strip()]

    def to_profile(self, default_meals: int = 3) -> Profile:
        return Profile(
            goal=self.goal,
            age=self.age,
            sex=self.sex,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            body_fat_pct=self.body_fat_pct,
            diet=self.diet,
            avoid=tuple(self.avoid),
            meals_per_day=self.meals_per_day if self.meals_per_day is not None else default_meals,
        )


class MealSchema(BaseModel):
    name: str
    tags: List[str] = Field(default_factory=list)
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    ingredients: List[str] = Field(default_factory=list)
    recipe: List[str] = Field(default_factory=list)

    @classmethod
    def from_meal(cls, meal: Meal) -> "MealSchema":
        return cls(
            name=meal.name,
            tags=sorted(meal.tags),
            calories=meal.calories,
            protein=meal.protein,
            carbs=meal.carbs,
            fat=meal.fat,
            ingredients=list(meal.ingredients),
            recipe=list(meal.recipe),
        )

    def to_meal(self) -> Meal:
        return Meal(
            name=self.name,
            tags=frozenset(self.tags),
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            ingredients=tuple(self.ingredients),
            recipe=tuple(self.recipe),
        )


class MealDaySchema(BaseModel):
    """A planned day with totals and its balance against the calorie target."""

    label: str
    meals: List[MealSchema]
    total_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    calorie_delta: Optional[int] = Field(None, description="Day total minus daily target")
    balance: Optional[str] = Field(None, description="surplus/deficit/on target")

    @classmethod
    def from_day(cls, day: MealDay, target_calories: Optional[int] = None) -> "MealDaySchema":
        delta = None
        balance = None
        if target_calories is not None:
            delta = day.calorie_delta(target_calories)
            balance = "on target" if delta == 0 else ("surplus" if delta > 0 else "deficit")
        return cls(
            label=day.label,
            meals=[MealSchema.from_meal(m) for m in day.meals],
            total_calories=day.total_calories,
            protein_g=day.total_protein,
            carbs_g=day.total_carbs,
            fat_g=day.total_fat,
            calorie_delta=delta,
            balance=balance,
        )

    def to_day(self) -> MealDay:
        return MealDay(label=self.label, meals=[m.to_meal() for m in self.meals])


class MealPlanResponse(BaseModel):
    """
    Schema for generated meal plan response.

    Attributes:
        targets: Daily nutrition targets the plan was built around.
        per_meal_target: Calorie target per meal slot.
        days: Mon-Sun planned days.
        grocery_list: Ingredient counts, sorted by name.
        created_at: Generation timestamp.
    """

    targets: NutritionTargetsResponse
    per_meal_target: int
    days: List[MealDaySchema]
    grocery_list: List[GroceryItem]
    created_at: datetime

    @classmethod
    def from_plan(
        cls,
        plan: MealPlan,
        grocery: List[GroceryItem],
        created_at: datetime
    ) -> "MealPlanResponse":
        return cls(
            targets=NutritionTargetsResponse.from_targets(plan.targets),
            per_meal_target=plan.per_meal_target,
            days=[MealDaySchema.from_day(day, plan.targets.calories) for day in plan.days],
            grocery_list=grocery,
            created_at=created_at,
        )


class SampleMealDayResponse(BaseModel):
    day: MealDaySchema
