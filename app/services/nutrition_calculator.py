"""
FitFlow - Nutrition Target Calculator.

Daily calorie and macro targets from body measurements and a goal.
Uses the lean-mass (Katch-McArdle) BMR when body fat is known and
Mifflin-St Jeor otherwise.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from app.models.plans import NutritionTargets
from app.utils.errors import ValidationError
from app.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

MIN_CALORIES = 1200
MUSCLE_SURPLUS = 300
FATLOSS_DEFICIT = 500


@dataclass(frozen=True)
class GoalFactors:
    activity: float
    protein_per_kg: float
    fat_share: float


GOAL_FACTORS: Dict[str, GoalFactors] = {
    "muscle": GoalFactors(activity=1.35, protein_per_kg=2.0, fat_share=0.25),
    "fatloss": GoalFactors(activity=1.15, protein_per_kg=2.2, fat_share=0.22),
}
MAINTAIN_FACTORS = GoalFactors(activity=1.2, protein_per_kg=1.8, fat_share=0.28)


def factors_for(goal: str) -> GoalFactors:
    return GOAL_FACTORS.get(goal, MAINTAIN_FACTORS)


def basal_metabolic_rate(
    weight_kg: float,
    height_cm: float,
    age: Optional[int],
    sex: str,
    body_fat_pct: float = 0
) -> int:
    """
    Estimate BMR in kcal/day.

    Raises:
        ValidationError: Non-positive weight or height, body fat outside
            [0, 100), or missing age when the age/sex formula is needed.
    """
    if weight_kg is None or weight_kg <= 0:
        raise ValidationError("Weight must be positive", detail=f"weight_kg={weight_kg}")
    if height_cm is None or height_cm <= 0:
        raise ValidationError("Height must be positive", detail=f"height_cm={height_cm}")
    body_fat_pct = body_fat_pct or 0
    if body_fat_pct < 0 or body_fat_pct >= 100:
        raise ValidationError(
            "Body fat percentage must be between 0 and 100",
            detail=f"body_fat_pct={body_fat_pct}"
        )

    if body_fat_pct > 0:
        lean_mass = weight_kg * (1 - body_fat_pct / 100)
        return round_half_up(370 + 21.6 * lean_mass)

    if age is None or age <= 0:
        raise ValidationError("Age must be positive", detail=f"age={age}")
    sex_offset = 5 if sex == "male" else -161
    return round_half_up(10 * weight_kg + 6.25 * height_cm - 5 * age + sex_offset)


def calculate_nutrition_targets(
    weight_kg: float,
    height_cm: float,
    age: Optional[int],
    sex: str,
    body_fat_pct: float,
    goal: str
) -> NutritionTargets:
    """
    Compute daily targets. Pure: identical inputs give identical outputs.

    Args:
        weight_kg: Body weight in kilograms.
        height_cm: Height in centimetres.
        age: Age in years (required unless body fat is given).
        sex: "male" or anything else.
        body_fat_pct: Body fat percentage, 0 when unknown.
        goal: "muscle", "fatloss" or anything else for maintenance.

    Returns:
        NutritionTargets with calories and protein/carb/fat grams.

    Example:
        >>> calculate_nutrition_targets(70, 175, 30, "male", 0, "maintain")
        NutritionTargets(calories=1979, protein_g=126, carbs_g=229, fat_g=62)
    """
    bmr = basal_metabolic_rate(weight_kg, height_cm, age, sex, body_fat_pct)
    factors = factors_for(goal)
    maintenance = round_half_up(bmr * factors.activity)

    if goal == "muscle":
        calories = maintenance + MUSCLE_SURPLUS
    elif goal == "fatloss":
        calories = max(MIN_CALORIES, maintenance - FATLOSS_DEFICIT)
    else:
        calories = maintenance

    protein_g = round_half_up(max(0, factors.protein_per_kg * weight_kg))
    fat_g = round_half_up(calories * factors.fat_share / 9)
    carbs_g = round_half_up(max(0, (calories - protein_g * 4 - fat_g * 9) / 4))

    logger.debug(f"BMR {bmr}, maintenance {maintenance}, target {calories} ({goal})")
    return NutritionTargets(
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
    )
