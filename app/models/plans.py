"""
FitFlow - Plan Models.

Profile input and the structured plans produced by the plan engine.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from app.models.catalog import Meal, MuscleGroup


WEEKDAY_LABELS: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Lower-cased ingredient name -> occurrences across a meal plan
GroceryList = Dict[str, int]


@dataclass(frozen=True)
class Profile:
    """
    Per-request user profile.

    `goal` is interpreted by whichever plan is generated: strength,
    hypertrophy, fatloss or conditioning for workouts; muscle, fatloss or
    maintain for nutrition.
    """
    goal: str = "maintain"
    experience: str = "beginner"
    age: Optional[int] = None
    sex: str = "male"
    weight_kg: float = 70.0
    height_cm: float = 175.0
    body_fat_pct: float = 0.0
    equipment: FrozenSet[str] = frozenset({"bodyweight"})
    diet: str = "omnivore"
    avoid: Tuple[str, ...] = ()
    days: int = 3
    meals_per_day: int = 3

    @property
    def is_beginner(self) -> bool:
        return self.experience == "beginner"


@dataclass(frozen=True)
class SetsReps:
    """Uniform sets/rep-range prescription for a plan."""
    sets: int
    rep_range: str


@dataclass
class PrescribedExercise:
    name: str
    group: MuscleGroup
    sets: int
    reps: str


@dataclass
class WorkoutDay:
    """A training day; `exercises` may be empty when nothing fits the equipment."""
    number: int
    focus: str
    exercises: List[PrescribedExercise] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"Day {self.number} - {self.focus}"

    @property
    def has_exercises(self) -> bool:
        return bool(self.exercises)


@dataclass
class WorkoutPlan:
    days: List[WorkoutDay] = field(default_factory=list)
    prescription: Optional[SetsReps] = None

    @property
    def exercise_names(self) -> List[str]:
        return [ex.name for day in self.days for ex in day.exercises]


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macro targets."""
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass
class MealDay:
    label: str
    meals: List[Meal] = field(default_factory=list)

    @property
    def total_calories(self) -> int:
        return sum(meal.calories for meal in self.meals)

    @property
    def total_protein(self) -> int:
        return sum(meal.protein for meal in self.meals)

    @property
    def total_carbs(self) -> int:
        return sum(meal.carbs for meal in self.meals)

    @property
    def total_fat(self) -> int:
        return sum(meal.fat for meal in self.meals)

    def calorie_delta(self, target_calories: int) -> int:
        """Positive for a surplus over the target, negative for a deficit."""
        return self.total_calories - target_calories


@dataclass
class MealPlan:
    days: List[MealDay] = field(default_factory=list)
    targets: Optional[NutritionTargets] = None
    per_meal_target: Optional[int] = None

    @property
    def meal_names(self) -> List[str]:
        return [meal.name for day in self.days for meal in day.meals]
