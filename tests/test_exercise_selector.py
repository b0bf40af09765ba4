"""Tests for exercise pool filtering and selection."""

import random

from app.models.catalog import MuscleGroup
from app.models.plans import Profile
from app.services.exercise_selector import ExerciseSelector

ALL_GROUPS = list(MuscleGroup)


def test_selection_respects_groups_and_equipment(catalog):
    selector = ExerciseSelector(catalog, random.Random(1))
    picked = selector.select([MuscleGroup.PUSH, MuscleGroup.PULL], {"machines"}, 5)

    assert len(picked) == 5
    for ex in picked:
        assert ex.group in (MuscleGroup.PUSH, MuscleGroup.PULL)
        assert "machines" in ex.equipment


def test_selection_is_distinct_and_capped_by_pool(catalog):
    selector = ExerciseSelector(catalog, random.Random(3))
    pool = selector.eligible_pool([MuscleGroup.PUSH], {"bodyweight"})
    picked = selector.select([MuscleGroup.PUSH], {"bodyweight"}, 10)

    assert {ex.name for ex in pool} == {"Push-Up", "Tricep Dip", "Incline Push-Up", "TRX Chest Press"}
    assert len(picked) == len(pool)
    assert len({ex.name for ex in picked}) == len(picked)
    assert set(picked) == set(pool)


def test_zero_count_still_requests_one(catalog, identity_rng):
    selector = ExerciseSelector(catalog, identity_rng)
    picked = selector.select([MuscleGroup.CORE], {"bodyweight"}, 0)

    assert [ex.name for ex in picked] == ["Plank"]


def test_identity_shuffler_keeps_catalog_order(catalog, identity_rng):
    selector = ExerciseSelector(catalog, identity_rng)
    picked = selector.select([MuscleGroup.LEGS], {"machines"}, 3)

    assert [ex.name for ex in picked] == ["Leg Press", "Hip Thrust", "Calf Raise"]


def test_empty_pool_returns_empty_list(catalog):
    selector = ExerciseSelector(catalog, random.Random(0))

    assert selector.select([MuscleGroup.CONDITIONING], {"cables"}, 4) == []


def test_seniors_skip_high_load_lifts(catalog, full_equipment):
    selector = ExerciseSelector(catalog, random.Random(0))
    pool = selector.eligible_pool(ALL_GROUPS, full_equipment, Profile(age=65, experience="advanced"))
    blocked = ExerciseSelector.HIGH_LOAD_NAMES

    assert pool
    for ex in pool:
        assert not any(term in ex.name.lower() for term in blocked)
    assert "Bulgarian Split Squat" not in {ex.name for ex in pool}


def test_seniors_skip_barbell_only_movements(tricky_catalog, full_equipment):
    selector = ExerciseSelector(tricky_catalog, random.Random(0))

    senior = selector.eligible_pool([MuscleGroup.PULL], full_equipment, Profile(age=60, experience="advanced"))
    younger = selector.eligible_pool([MuscleGroup.PULL], full_equipment, Profile(age=40, experience="advanced"))

    assert "Barbell Shrug" not in {ex.name for ex in senior}
    assert "Barbell Shrug" in {ex.name for ex in younger}
    assert "Power Clean" in {ex.name for ex in senior}


def test_age_below_sixty_keeps_heavy_lifts(catalog, full_equipment):
    selector = ExerciseSelector(catalog, random.Random(0))
    pool = selector.eligible_pool([MuscleGroup.LEGS], full_equipment, Profile(age=59, experience="advanced"))

    assert "Squat" in {ex.name for ex in pool}


def test_beginners_skip_high_skill_lifts(tricky_catalog, full_equipment):
    selector = ExerciseSelector(tricky_catalog, random.Random(0))

    beginner = {ex.name for ex in selector.eligible_pool(ALL_GROUPS, full_equipment, Profile(experience="beginner"))}
    advanced = {ex.name for ex in selector.eligible_pool(ALL_GROUPS, full_equipment, Profile(experience="advanced"))}

    assert "Power Clean" not in beginner
    assert "Pistol Squat" not in beginner
    assert {"Power Clean", "Pistol Squat"} <= advanced
    assert "Glute Bridge" in beginner
