"""
FitFlow - Exercise Selector.

Filters the exercise catalog by muscle group and equipment, applies
age and experience personalization, then samples without replacement.
"""

import logging
import random
import re
from typing import Iterable, List, Optional, Protocol

from app.models.catalog import Catalog, Exercise, MuscleGroup
from app.models.plans import Profile

logger = logging.getLogger(__name__)


class Shuffler(Protocol):
    """Anything with an in-place `shuffle(list)`, e.g. `random.Random`."""

    def shuffle(self, x: list) -> None:
        ...


class ExerciseSelector:
    """
    Personalized exercise picker.

    Pool filters, applied in order:
    - Age 60+: drop high-load lifts by name and barbell-only movements.
    - Beginners: drop high-skill lifts.
    """

    SENIOR_AGE = 60
    HIGH_LOAD_NAMES = (
        "bench press",
        "deadlift",
        "romanian deadlift",
        "back squat",
        "squat",
        "overhead press",
    )
    HIGH_SKILL_PATTERN = re.compile(r"(snatch|clean|jerk|pistol)", re.IGNORECASE)

    def __init__(self, catalog: Catalog, rng: Optional[Shuffler] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    def eligible_pool(
        self,
        groups: Iterable[MuscleGroup],
        equipment: Iterable[str],
        profile: Optional[Profile] = None
    ) -> List[Exercise]:
        """
        Exercises in `groups` that share equipment with `equipment` and
        pass the profile's personalization filters, in catalog order.
        """
        wanted = frozenset(MuscleGroup(g) for g in groups)
        available = frozenset(equipment)
        pool = [
            ex for ex in self.catalog.exercises
            if ex.group in wanted and ex.uses_any(available)
        ]

        if profile is None:
            return pool

        if profile.age is not None and profile.age >= self.SENIOR_AGE:
            pool = [ex for ex in pool if self._suits_senior(ex)]

        if profile.is_beginner:
            pool = [ex for ex in pool if not self.HIGH_SKILL_PATTERN.search(ex.name)]

        return pool

    def _suits_senior(self, exercise: Exercise) -> bool:
        name = exercise.name.lower()
        if any(blocked in name for blocked in self.HIGH_LOAD_NAMES):
            return False
        equipment = exercise.equipment
        if "barbell" in equipment and not ({"dumbbells", "machines"} & equipment):
            return False
        return True

    def select(
        self,
        groups: Iterable[MuscleGroup],
        equipment: Iterable[str],
        count: int,
        profile: Optional[Profile] = None
    ) -> List[Exercise]:
        """
        Pick up to `count` distinct exercises (at least one is requested).

        Returns an empty list when nothing is eligible; callers treat a
        short or empty roster as a valid result.
        """
        groups = list(groups)
        pool = self.eligible_pool(groups, equipment, profile)
        if not pool:
            logger.warning(
                f"No eligible exercises for groups={[MuscleGroup(g).value for g in groups]}"
            )
            return []

        shuffled = list(pool)
        self.rng.shuffle(shuffled)
        picked = shuffled[:max(1, count)]
        logger.debug(f"Selected {len(picked)} of {len(pool)} eligible exercises")
        return picked
