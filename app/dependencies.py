"""
FitFlow API - FastAPI Dependencies.

Dependency injection helpers for routes. Tests override these through
`app.dependency_overrides`.
"""

import random
from functools import lru_cache

from settings import settings
from app.models.catalog import Catalog
from app.services.plan_engine import PlanEngine
from app.services.plan_store import PlanStore


@lru_cache
def get_plan_engine() -> PlanEngine:
    """
    Shared plan engine over the built-in catalog.

    Returns:
        PlanEngine: Seeded from EXERCISE_SHUFFLE_SEED when configured.
    """
    rng = random.Random(settings.EXERCISE_SHUFFLE_SEED)
    return PlanEngine(catalog=Catalog.default(), rng=rng)


@lru_cache
def get_plan_store() -> PlanStore:
    """
    Shared Redis-backed plan store (connects lazily).

    Returns:
        PlanStore: Store configured from settings.
    """
    return PlanStore(
        redis_url=settings.redis_url_with_auth,
        plans_key=settings.SAVED_PLANS_KEY,
        theme_key=settings.THEME_KEY,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
    )
