"""
FitFlow - Grocery Aggregator.

Counts ingredient occurrences across a meal plan. Keys are only
case-folded, so "egg" and "eggs" stay separate entries.
"""

from collections import Counter
from typing import List, Tuple

from app.models.plans import GroceryList, MealPlan


def aggregate_grocery_list(meal_plan: MealPlan) -> GroceryList:
    counts: Counter = Counter()
    for day in meal_plan.days:
        for meal in day.meals:
            counts.update(ingredient.lower() for ingredient in meal.ingredients)
    return dict(counts)


def sorted_items(grocery: GroceryList) -> List[Tuple[str, int]]:
    """Grocery entries ordered by ingredient name."""
    return sorted(grocery.items())
