"""Shared fixtures for the FitFlow test suite."""

import random

import fakeredis
import fakeredis.aioredis
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_plan_engine, get_plan_store
from app.models.catalog import Catalog, Exercise, Meal, MuscleGroup
from app.models.plans import Profile
from app.services.plan_engine import PlanEngine
from app.services.plan_store import PlanStore


class IdentityShuffler:
    """Leaves the pool in catalog order so selections are predictable."""

    def shuffle(self, x):
        pass


def _make_meal(name, calories, ingredients=("rice",), tags=("omnivore",)):
    return Meal(
        name=name,
        tags=frozenset(tags),
        calories=calories,
        protein=10,
        carbs=20,
        fat=5,
        ingredients=tuple(ingredients),
    )


@pytest.fixture
def meal_factory():
    return _make_meal


@pytest.fixture
def catalog():
    return Catalog.default()


@pytest.fixture
def identity_rng():
    return IdentityShuffler()


@pytest.fixture
def engine(catalog):
    return PlanEngine(catalog=catalog, rng=random.Random(7))


@pytest.fixture
def full_equipment():
    return frozenset({"bodyweight", "dumbbells", "barbell", "machines", "bands", "cables", "kettlebell"})


@pytest.fixture
def profile_factory(full_equipment):
    def _make(**overrides):
        fields = {"equipment": full_equipment, "experience": "intermediate"}
        fields.update(overrides)
        return Profile(**fields)
    return _make


@pytest.fixture
def tricky_catalog():
    """Catalog with lifts the personalization filters should remove."""
    return Catalog(
        exercises=(
            Exercise("Barbell Shrug", MuscleGroup.PULL, frozenset({"barbell"})),
            Exercise("Power Clean", MuscleGroup.PULL, frozenset({"barbell", "dumbbells"})),
            Exercise("Pistol Squat", MuscleGroup.LEGS, frozenset({"bodyweight"})),
            Exercise("Overhead Press", MuscleGroup.PUSH, frozenset({"dumbbells"})),
            Exercise("Face Pull", MuscleGroup.PULL, frozenset({"cables"})),
            Exercise("Glute Bridge", MuscleGroup.LEGS, frozenset({"bodyweight"})),
        ),
        meals=(),
    )


@pytest.fixture
def plan_store():
    return PlanStore(
        redis_url="redis://localhost:6379/0",
        client=fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True),
    )


@pytest.fixture
def offline_store():
    """Store whose Redis server refuses every command."""
    server = fakeredis.FakeServer()
    server.connected = False
    return PlanStore(
        redis_url="redis://localhost:6379/0",
        client=fakeredis.aioredis.FakeRedis(server=server, decode_responses=True),
    )


def _client_for(engine, store):
    from main import app

    app.dependency_overrides[get_plan_engine] = lambda: engine
    app.dependency_overrides[get_plan_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client(engine, plan_store):
    yield from _client_for(engine, plan_store)


@pytest.fixture
def offline_client(engine, offline_store):
    yield from _client_for(engine, offline_store)
