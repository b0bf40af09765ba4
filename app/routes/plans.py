# app/routes/plans.py
"""FitFlow API - Saved Plans and Theme Routes (Redis)."""

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.dependencies import get_plan_store
from app.schemas.saved_plan import (
    SavePlanRequest,
    SavedPlanListResponse,
    SavedPlanResponse,
    ThemeRequest,
    ThemeResponse,
)
from app.services.plan_store import PlanStore

router = APIRouter()

_UNSAFE_FILENAME = re.compile(r'[^A-Za-z0-9 ._()-]')


def content_disposition(title: str) -> str:
    """Attachment header with an ASCII fallback name and an RFC 5987 UTF-8 name."""
    filename = f"{title or 'plan'}.json"
    fallback = _UNSAFE_FILENAME.sub("_", filename)
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename, safe="")}'


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(store: PlanStore = Depends(get_plan_store)):
    return ThemeResponse(theme=await store.get_theme())


@router.put("/theme", response_model=ThemeResponse)
async def set_theme(request: ThemeRequest, store: PlanStore = Depends(get_plan_store)):
    return ThemeResponse(theme=await store.set_theme(request.theme))


@router.post("/theme/toggle", response_model=ThemeResponse)
async def toggle_theme(store: PlanStore = Depends(get_plan_store)):
    return ThemeResponse(theme=await store.toggle_theme())


@router.get("", response_model=SavedPlanListResponse)
async def list_plans(store: PlanStore = Depends(get_plan_store)):
    """Saved plans in insertion order."""
    plans = await store.list_plans()
    return SavedPlanListResponse(
        plans=[SavedPlanResponse(index=i, **record) for i, record in enumerate(plans)]
    )


@router.post("", response_model=SavedPlanResponse, status_code=201)
async def save_plan(request: SavePlanRequest, store: PlanStore = Depends(get_plan_store)):
    index, record = await store.save_plan(request.type, request.data, request.title)
    return SavedPlanResponse(index=index, **record)


@router.get("/{index}", response_model=SavedPlanResponse)
async def get_plan(index: int, store: PlanStore = Depends(get_plan_store)):
    record = await store.get_plan(index)
    return SavedPlanResponse(index=index, **record)


@router.get("/{index}/export")
async def export_plan(index: int, store: PlanStore = Depends(get_plan_store)):
    """Download a saved plan as a JSON file."""
    record = await store.get_plan(index)
    body = await store.export_plan(index)
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": content_disposition(record["title"])},
    )


@router.delete("/{index}", response_model=SavedPlanResponse)
async def delete_plan(index: int, store: PlanStore = Depends(get_plan_store)):
    record = await store.delete_plan(index)
    return SavedPlanResponse(index=index, **record)
