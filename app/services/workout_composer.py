"""
FitFlow - Workout Composer.

Decides the weekly split for a requested day count, fills each day via
the exercise selector and stamps one sets/reps prescription on the plan.
"""

import logging
from typing import List, NamedTuple, Tuple

from app.models.catalog import MuscleGroup
from app.models.plans import Profile, PrescribedExercise, WorkoutDay, WorkoutPlan
from app.services.exercise_selector import ExerciseSelector
from app.services import sets_reps
from app.utils.numbers import clamp

logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 6
DEFAULT_EQUIPMENT = frozenset({"bodyweight"})


class DaySlot(NamedTuple):
    focus: str
    groups: Tuple[MuscleGroup, ...]
    count: int


FULL_BODY = DaySlot("Full Body", (MuscleGroup.PUSH, MuscleGroup.PULL, MuscleGroup.LEGS), 5)
UPPER = DaySlot("Upper", (MuscleGroup.PUSH, MuscleGroup.PULL, MuscleGroup.CORE), 5)
LOWER = DaySlot("Lower", (MuscleGroup.LEGS, MuscleGroup.CORE), 4)
CONDITIONING = DaySlot("Conditioning", (MuscleGroup.CONDITIONING,), 4)

FIVE_DAY_TEMPLATE: Tuple[DaySlot, ...] = (
    DaySlot("Push", (MuscleGroup.PUSH,), 5),
    DaySlot("Pull", (MuscleGroup.PULL,), 5),
    DaySlot("Legs", (MuscleGroup.LEGS,), 5),
    FULL_BODY,
    CONDITIONING,
)


def split_for(days: int) -> List[DaySlot]:
    """
    Day slots for a (clamped) day count.

    Up to 3 days: full body. 4 days: upper/lower. 5+: cycle the five-slot
    push/pull/legs/full body/conditioning template.
    """
    if days <= 3:
        return [FULL_BODY] * days
    if days == 4:
        return [UPPER, LOWER, UPPER, LOWER]
    return [FIVE_DAY_TEMPLATE[i % len(FIVE_DAY_TEMPLATE)] for i in range(days)]


class WorkoutComposer:
    """Builds a WorkoutPlan from a profile."""

    def __init__(self, selector: ExerciseSelector):
        self.selector = selector

    def compose(self, profile: Profile) -> WorkoutPlan:
        days = clamp(int(profile.days), MIN_DAYS, MAX_DAYS)
        if days != profile.days:
            logger.debug(f"Clamped day count {profile.days} -> {days}")
        equipment = frozenset(profile.equipment) or DEFAULT_EQUIPMENT

        slots = split_for(days)
        if sets_reps.needs_conditioning_day(profile, days):
            slots.append(CONDITIONING)

        prescription = sets_reps.prescribe(profile)
        plan = WorkoutPlan(prescription=prescription)
        for number, slot in enumerate(slots, start=1):
            picked = self.selector.select(slot.groups, equipment, slot.count, profile)
            plan.days.append(WorkoutDay(
                number=number,
                focus=slot.focus,
                exercises=[
                    PrescribedExercise(
                        name=ex.name,
                        group=ex.group,
                        sets=prescription.sets,
                        reps=prescription.rep_range,
                    )
                    for ex in picked
                ],
            ))

        empty = [day.number for day in plan.days if not day.has_exercises]
        if empty:
            logger.warning(f"Days without eligible exercises: {empty}")
        logger.info(
            f"Composed {len(plan.days)}-day plan ({profile.goal}/{profile.experience}) "
            f"at {prescription.sets}x{prescription.rep_range}"
        )
        return plan
