"""Tests for grocery list aggregation."""

from app.models.plans import MealDay, MealPlan
from app.services.grocery_aggregator import aggregate_grocery_list, sorted_items


def _plan(meal_factory):
    return MealPlan(days=[
        MealDay("Mon", [
            meal_factory("Bowl", 400, ["Rice", "black beans", "corn"]),
            meal_factory("Stir-Fry", 450, ["rice", "Tofu"]),
        ]),
        MealDay("Tue", [
            meal_factory("Omelette", 330, ["eggs", "egg"]),
        ]),
    ])


def test_counts_are_case_folded(meal_factory):
    grocery = aggregate_grocery_list(_plan(meal_factory))

    assert grocery == {
        "rice": 2,
        "black beans": 1,
        "corn": 1,
        "tofu": 1,
        "eggs": 1,
        "egg": 1,
    }


def test_order_independent(meal_factory):
    plan = _plan(meal_factory)
    shuffled = MealPlan(days=[
        MealDay(day.label, list(reversed(day.meals))) for day in reversed(plan.days)
    ])

    assert aggregate_grocery_list(plan) == aggregate_grocery_list(shuffled)


def test_empty_plan():
    assert aggregate_grocery_list(MealPlan()) == {}


def test_sorted_items(meal_factory):
    items = sorted_items(aggregate_grocery_list(_plan(meal_factory)))

    assert [name for name, _ in items] == sorted(name for name, _ in items)
    assert ("rice", 2) in items
