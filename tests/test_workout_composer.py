"""Tests for weekly split composition and the sets/reps policy."""

import random

import pytest

from app.models.catalog import MuscleGroup
from app.models.plans import Profile, SetsReps
from app.services import sets_reps
from app.services.exercise_selector import ExerciseSelector
from app.services.workout_composer import WorkoutComposer, split_for


@pytest.fixture
def composer(catalog):
    return WorkoutComposer(ExerciseSelector(catalog, random.Random(11)))


@pytest.mark.parametrize("days", [1, 2, 3, 4, 5, 6])
def test_day_count_matches_request(composer, profile_factory, days):
    plan = composer.compose(profile_factory(days=days))

    assert len(plan.days) == days
    assert [d.number for d in plan.days] == list(range(1, days + 1))


@pytest.mark.parametrize("requested,expected", [(0, 1), (-3, 1), (7, 6), (12, 6)])
def test_day_count_is_clamped(composer, profile_factory, requested, expected):
    plan = composer.compose(profile_factory(days=requested))

    assert len(plan.days) == expected


def test_short_weeks_are_full_body(composer, profile_factory):
    plan = composer.compose(profile_factory(days=3))

    for day in plan.days:
        assert day.focus == "Full Body"
        assert len(day.exercises) == 5
        assert {ex.group for ex in day.exercises} <= {MuscleGroup.PUSH, MuscleGroup.PULL, MuscleGroup.LEGS}


def test_four_days_alternate_upper_lower(composer, profile_factory):
    plan = composer.compose(profile_factory(days=4))

    assert [d.focus for d in plan.days] == ["Upper", "Lower", "Upper", "Lower"]
    upper, lower = plan.days[0], plan.days[1]
    assert len(upper.exercises) == 5
    assert len(lower.exercises) == 4
    assert {ex.group for ex in upper.exercises} <= {MuscleGroup.PUSH, MuscleGroup.PULL, MuscleGroup.CORE}
    assert {ex.group for ex in lower.exercises} <= {MuscleGroup.LEGS, MuscleGroup.CORE}


def test_five_plus_days_cycle_template():
    assert [s.focus for s in split_for(5)] == ["Push", "Pull", "Legs", "Full Body", "Conditioning"]
    assert [s.focus for s in split_for(6)] == ["Push", "Pull", "Legs", "Full Body", "Conditioning", "Push"]
    assert split_for(5)[4].count == 4
    assert all(s.count == 5 for s in split_for(5)[:4])


def test_high_body_fat_adds_conditioning_day(composer, profile_factory):
    plan = composer.compose(profile_factory(days=3, body_fat_pct=30))

    assert len(plan.days) == 4
    extra = plan.days[-1]
    assert extra.focus == "Conditioning"
    assert extra.number == 4
    assert extra.label == "Day 4 - Conditioning"
    assert {ex.group for ex in extra.exercises} == {MuscleGroup.CONDITIONING}


def test_high_body_fat_long_week_unchanged(composer, profile_factory):
    plan = composer.compose(profile_factory(days=5, body_fat_pct=35))

    assert len(plan.days) == 5


def test_body_fat_at_threshold_adds_nothing(composer, profile_factory):
    plan = composer.compose(profile_factory(days=2, body_fat_pct=28))

    assert len(plan.days) == 2


def test_prescription_is_uniform(composer, profile_factory):
    plan = composer.compose(profile_factory(days=5, goal="strength", experience="advanced"))

    assert plan.prescription == SetsReps(4, "3-5")
    for day in plan.days:
        for ex in day.exercises:
            assert (ex.sets, ex.reps) == (4, "3-5")


def test_exercises_only_use_owned_equipment(composer, catalog):
    owned = frozenset({"machines"})
    plan = composer.compose(Profile(days=5, equipment=owned, experience="advanced"))

    for day in plan.days:
        for ex in day.exercises:
            assert catalog.find_exercise(ex.name).equipment & owned


def test_empty_equipment_defaults_to_bodyweight(composer, catalog):
    plan = composer.compose(Profile(days=2, equipment=frozenset()))

    assert plan.exercise_names
    for name in plan.exercise_names:
        assert "bodyweight" in catalog.find_exercise(name).equipment


def test_days_without_eligible_exercises_are_kept(composer):
    plan = composer.compose(Profile(days=5, equipment=frozenset({"cables"})))

    assert len(plan.days) == 5
    conditioning = plan.days[4]
    assert conditioning.focus == "Conditioning"
    assert not conditioning.has_exercises
    assert [ex.name for ex in plan.days[1].exercises] == ["Face Pull"]


@pytest.mark.parametrize("goal,experience,expected", [
    ("strength", "beginner", SetsReps(3, "4-6")),
    ("strength", "advanced", SetsReps(4, "3-5")),
    ("hypertrophy", "beginner", SetsReps(3, "8-12")),
    ("hypertrophy", "intermediate", SetsReps(4, "8-12")),
    ("fatloss", "beginner", SetsReps(3, "10-15")),
    ("conditioning", "advanced", SetsReps(4, "12-20")),
])
def test_base_table(goal, experience, expected):
    assert sets_reps.base_prescription(goal, experience) == expected


def test_older_lifters_drop_a_set():
    assert sets_reps.prescribe(Profile(goal="hypertrophy", experience="advanced", age=56)) == SetsReps(3, "8-12")
    assert sets_reps.prescribe(Profile(goal="strength", experience="beginner", age=70)) == SetsReps(2, "4-6")
    assert sets_reps.prescribe(Profile(goal="strength", experience="beginner", age=55)) == SetsReps(3, "4-6")


def test_senior_plan_avoids_high_load_names(composer, profile_factory):
    plan = composer.compose(profile_factory(days=6, age=68))

    for name in plan.exercise_names:
        assert not any(term in name.lower() for term in ("bench press", "deadlift", "squat", "overhead press"))
