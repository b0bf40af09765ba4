"""
FitFlow - Meal Plan Assembler.

Fills a Mon-Sun plan from the meal catalog, choosing for each slot the
unused candidate whose calories are closest to the per-meal target.
Selection is deterministic.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Sequence, Set

from app.models.catalog import Catalog, Meal
from app.models.plans import WEEKDAY_LABELS, MealDay, MealPlan, NutritionTargets
from app.utils.errors import NoMatchingMealsError
from app.utils.numbers import clamp, round_half_up

logger = logging.getLogger(__name__)

MIN_MEALS_PER_DAY = 1
MAX_MEALS_PER_DAY = 6
MIN_MEAL_CALORIES = 200
UNIVERSAL_TAG = "omnivore"


def parse_avoid(raw: str) -> List[str]:
    """Split a comma-separated avoid string into lower-cased, trimmed terms."""
    return [term.strip() for term in (raw or "").lower().split(",") if term.strip()]


def candidate_pool(meals: Sequence[Meal], diet: str, avoid: Iterable[str]) -> List[Meal]:
    """
    Meals tagged with `diet` (or omnivore) whose ingredients contain none
    of the avoid substrings. Catalog order is preserved.
    """
    avoid = [term.lower() for term in avoid if term]
    return [
        meal for meal in meals
        if (diet in meal.tags or UNIVERSAL_TAG in meal.tags)
        and not any(term in meal.ingredient_text for term in avoid)
    ]


def per_meal_target(daily_calories: int, meals_per_day: int) -> int:
    return max(MIN_MEAL_CALORIES, round_half_up(daily_calories / meals_per_day))


def closest_meal(pool: Sequence[Meal], target: int) -> Meal:
    """First meal in pool order with the smallest calorie distance to target."""
    best = pool[0]
    best_diff = abs(best.calories - target)
    for meal in pool[1:]:
        diff = abs(meal.calories - target)
        if diff < best_diff:
            best, best_diff = meal, diff
    return best


class MealPlanAssembler:
    """Builds 7-day meal plans against a catalog."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def assemble(
        self,
        diet: str,
        avoid: Iterable[str],
        meals_per_day: int,
        targets: NutritionTargets
    ) -> MealPlan:
        """
        Assemble a meal plan.

        Uniqueness spans the whole plan: a meal is reused only after every
        candidate has been served, at which point the used-set is cleared.

        Raises:
            NoMatchingMealsError: Diet and avoid filters leave no candidates.
        """
        avoid = list(avoid)
        candidates = candidate_pool(self.catalog.meals, diet, avoid)
        if not candidates:
            logger.warning(f"No meals match diet={diet!r} avoid={avoid}")
            raise NoMatchingMealsError(detail=f"diet={diet}, avoid={', '.join(avoid) or 'none'}")

        slots = clamp(int(meals_per_day), MIN_MEALS_PER_DAY, MAX_MEALS_PER_DAY)
        slot_target = per_meal_target(targets.calories, slots)
        used: Set[str] = set()

        plan = MealPlan(targets=targets, per_meal_target=slot_target)
        for label in WEEKDAY_LABELS:
            day = MealDay(label=label)
            for _ in range(slots):
                available = [meal for meal in candidates if meal.name not in used]
                if not available:
                    used.clear()
                    available = candidates
                chosen = closest_meal(available, slot_target)
                day.meals.append(replace(chosen))
                used.add(chosen.name)
            plan.days.append(day)

        logger.info(
            f"Assembled meal plan: {len(candidates)} candidates, "
            f"{slots} meals/day at ~{slot_target} kcal"
        )
        return plan
