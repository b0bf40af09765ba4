"""
FitFlow - Sets/Reps Policy.

Maps goal and experience to one sets/rep-range prescription that is
stamped onto every exercise in a workout plan.
"""

from typing import Dict, Tuple

from app.models.plans import Profile, SetsReps


# goal -> (beginner, non-beginner)
BASE_TABLE: Dict[str, Tuple[SetsReps, SetsReps]] = {
    "strength": (SetsReps(3, "4-6"), SetsReps(4, "3-5")),
    "hypertrophy": (SetsReps(3, "8-12"), SetsReps(4, "8-12")),
}
# fatloss, conditioning and anything unrecognised
DEFAULT_ENTRY: Tuple[SetsReps, SetsReps] = (SetsReps(3, "10-15"), SetsReps(4, "12-20"))

OLDER_LIFTER_AGE = 55
MIN_SETS = 2

CONDITIONING_BODY_FAT_PCT = 28
CONDITIONING_MAX_DAYS = 5


def base_prescription(goal: str, experience: str) -> SetsReps:
    beginner, other = BASE_TABLE.get(goal, DEFAULT_ENTRY)
    return beginner if experience == "beginner" else other


def prescribe(profile: Profile) -> SetsReps:
    """
    Final prescription for a plan.

    Lifters older than 55 lose one set (never below two); the rep range
    is unchanged.
    """
    prescription = base_prescription(profile.goal, profile.experience)
    if profile.age is not None and profile.age > OLDER_LIFTER_AGE:
        prescription = SetsReps(
            sets=max(MIN_SETS, prescription.sets - 1),
            rep_range=prescription.rep_range,
        )
    return prescription


def needs_conditioning_day(profile: Profile, days: int) -> bool:
    """True when body fat is above 28% and the week has fewer than 5 days."""
    return (
        profile.body_fat_pct is not None
        and profile.body_fat_pct > CONDITIONING_BODY_FAT_PCT
        and days < CONDITIONING_MAX_DAYS
    )
