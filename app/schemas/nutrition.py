"""
FitFlow API - Nutrition Schemas.

Pydantic schemas for nutrition targets and BMI.
"""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from app.models.plans import NutritionTargets, Profile


class NutritionRequest(BaseModel):
    """
    Schema for nutrition target request.

    Attributes:
        goal: Nutrition goal (muscle/fatloss/maintain).
        age: Age in years.
        sex: Sex used for the BMR estimate.
        weight_kg: Body weight in kilograms.
        height_cm: Height in centimetres.
        body_fat_pct: Body fat percentage (0 when unknown).
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "goal": "maintain",
                "age": 30,
                "sex": "male",
                "weight_kg": 70,
                "height_cm": 175,
                "body_fat_pct": 0
            }
        }
    )

    goal: str = Field(default="maintain", description="Goal (muscle/fatloss/maintain)")
    age: Optional[int] = Field(default=30, description="Age in years")
    sex: str = Field(default="male", description="Sex (male/female)")
    weight_kg: float = Field(default=70, description="Body weight in kg")
    height_cm: float = Field(default=175, description="Height in cm")
    body_fat_pct: float = Field(default=0, description="Body fat percentage, 0 if unknown")

    def to_profile(self) -> Profile:
        return Profile(
            goal=self.goal,
            age=self.age,
            sex=self.sex,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            body_fat_pct=self.body_fat_pct,
        )


class NutritionTargetsResponse(BaseModel):
    """Daily calorie and macro targets."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"calories": 1979, "protein_g": 126, "carbs_g": 229, "fat_g": 62}
        }
    )

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int

    @classmethod
    def from_targets(cls, targets: NutritionTargets) -> "NutritionTargetsResponse":
        return cls(
            calories=targets.calories,
            protein_g=targets.protein_g,
            carbs_g=targets.carbs_g,
            fat_g=targets.fat_g,
        )


class BMIRequest(BaseModel):
    weight_kg: Optional[float] = Field(None, description="Body weight in kg")
    height_cm: Optional[float] = Field(None, description="Height in cm")


class BMIResponse(BaseModel):
    """BMI and category; both null when weight or height is missing."""

    bmi: Optional[float] = None
    category: Optional[str] = None
