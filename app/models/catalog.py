"""
FitFlow - Catalog Models.

Immutable exercise and meal records plus the catalog container the
plan engine reads from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class MuscleGroup(str, Enum):
    """Muscle groups used to compose training days."""
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    CORE = "core"
    CONDITIONING = "conditioning"


@dataclass(frozen=True)
class Exercise:
    """A single catalog exercise."""
    name: str
    group: MuscleGroup
    equipment: FrozenSet[str]

    def uses_any(self, available: FrozenSet[str]) -> bool:
        return not self.equipment.isdisjoint(available)


@dataclass(frozen=True)
class Meal:
    """A single catalog meal with macros, ingredients and recipe steps."""
    name: str
    tags: FrozenSet[str]
    calories: int
    protein: int
    carbs: int
    fat: int
    ingredients: Tuple[str, ...]
    recipe: Tuple[str, ...] = ()

    @property
    def ingredient_text(self) -> str:
        """Ingredients joined into one lower-cased string for exclusion matching."""
        return " ".join(self.ingredients).lower()


@dataclass(frozen=True)
class Catalog:
    """
    Read-only exercise and meal collections.

    Passed explicitly into the engine so tests can substitute their own
    catalogs.
    """
    exercises: Tuple[Exercise, ...] = field(default_factory=tuple)
    meals: Tuple[Meal, ...] = field(default_factory=tuple)

    @classmethod
    def default(cls) -> "Catalog":
        """Return the built-in catalog."""
        from app.services.catalog_data import EXERCISES, MEALS
        return cls(exercises=EXERCISES, meals=MEALS)

    def find_exercise(self, name: str) -> Optional[Exercise]:
        for exercise in self.exercises:
            if exercise.name == name:
                return exercise
        return None

    def find_meal(self, name: str) -> Optional[Meal]:
        for meal in self.meals:
            if meal.name == name:
                return meal
        return None
