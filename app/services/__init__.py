"""FitFlow - Services Package."""

from .plan_engine import PlanEngine, PlanResult
from .plan_store import PlanStore
from .nutrition_calculator import calculate_nutrition_targets
from .grocery_aggregator import aggregate_grocery_list
from .body_metrics import calculate_bmi

__all__ = [
    "PlanEngine",
    "PlanResult",
    "PlanStore",
    "calculate_nutrition_targets",
    "aggregate_grocery_list",
    "calculate_bmi",
]
