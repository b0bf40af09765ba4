"""
FitFlow - Plan Generation Engine.

Entry points the API layer calls. Every fallible operation returns a
PlanResult; FitFlowException never escapes this module.
"""

import logging
from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

from app.models.catalog import Catalog
from app.models.plans import (
    GroceryList,
    MealDay,
    MealPlan,
    NutritionTargets,
    Profile,
    WorkoutPlan,
)
from app.services.exercise_selector import ExerciseSelector, Shuffler
from app.services.grocery_aggregator import aggregate_grocery_list
from app.services.meal_planner import MealPlanAssembler
from app.services.nutrition_calculator import calculate_nutrition_targets
from app.services.workout_composer import WorkoutComposer
from app.utils.errors import FitFlowException

logger = logging.getLogger(__name__)

T = TypeVar("T")

SAMPLE_WORKOUT_PROFILE = Profile(
    goal="hypertrophy",
    experience="beginner",
    days=4,
    equipment=frozenset({"dumbbells", "bodyweight"}),
)
SAMPLE_MEAL_INDEXES = (0, 2, 5)


@dataclass
class PlanResult(Generic[T]):
    """Outcome of an engine call: data on success, the error otherwise."""
    success: bool
    data: Optional[T] = None
    error: Optional[FitFlowException] = None

    @classmethod
    def ok(cls, data: T) -> "PlanResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: FitFlowException) -> "PlanResult[T]":
        return cls(success=False, error=error)

    @property
    def reason(self) -> Optional[str]:
        return self.error.message if self.error else None


class PlanEngine:
    """
    Workout and nutrition plan generation over an injected catalog.

    The random source only affects exercise selection; everything else
    is deterministic.
    """

    def __init__(self, catalog: Optional[Catalog] = None, rng: Optional[Shuffler] = None):
        self.catalog = catalog or Catalog.default()
        self.selector = ExerciseSelector(self.catalog, rng)
        self.composer = WorkoutComposer(self.selector)
        self.assembler = MealPlanAssembler(self.catalog)

    def generate_workout_plan(self, profile: Profile) -> PlanResult[WorkoutPlan]:
        try:
            return PlanResult.ok(self.composer.compose(profile))
        except FitFlowException as e:
            logger.warning(f"Workout plan generation failed: {e.message}")
            return PlanResult.fail(e)

    def calculate_nutrition_targets(self, profile: Profile) -> PlanResult[NutritionTargets]:
        try:
            return PlanResult.ok(self._targets_for(profile))
        except FitFlowException as e:
            logger.warning(f"Nutrition target calculation failed: {e.message}")
            return PlanResult.fail(e)

    def generate_meal_plan(self, profile: Profile) -> PlanResult[MealPlan]:
        """Compute targets from the profile and assemble a 7-day plan around them."""
        try:
            targets = self._targets_for(profile)
            plan = self.assembler.assemble(
                diet=profile.diet,
                avoid=profile.avoid,
                meals_per_day=profile.meals_per_day,
                targets=targets,
            )
            return PlanResult.ok(plan)
        except FitFlowException as e:
            logger.warning(f"Meal plan generation failed: {e.message}")
            return PlanResult.fail(e)

    def aggregate_grocery_list(self, meal_plan: MealPlan) -> GroceryList:
        return aggregate_grocery_list(meal_plan)

    def sample_workout_plan(self) -> WorkoutPlan:
        return self.composer.compose(SAMPLE_WORKOUT_PROFILE)

    def sample_meal_day(self) -> MealDay:
        meals = [
            replace(self.catalog.meals[i])
            for i in SAMPLE_MEAL_INDEXES
            if i < len(self.catalog.meals)
        ]
        return MealDay(label="Sample Day", meals=meals)

    @staticmethod
    def _targets_for(profile: Profile) -> NutritionTargets:
        return calculate_nutrition_targets(
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            sex=profile.sex,
            body_fat_pct=profile.body_fat_pct,
            goal=profile.goal,
        )
