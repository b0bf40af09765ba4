# app/routes/shopping.py
"""FitFlow API - Shopping Routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.dependencies import get_plan_engine
from app.schemas.shopping import GroceryItem, GroceryListRequest, GroceryListResponse
from app.services.plan_engine import PlanEngine

router = APIRouter()


@router.post("/grocery-list", response_model=GroceryListResponse)
async def grocery_list(
    request: GroceryListRequest,
    engine: PlanEngine = Depends(get_plan_engine)
):
    """Count ingredients across the posted meal plan days."""
    grocery = engine.aggregate_grocery_list(request.to_meal_plan())
    return GroceryListResponse(
        items=GroceryItem.from_grocery(grocery),
        distinct_items=len(grocery),
        created_at=datetime.now(timezone.utc),
    )
