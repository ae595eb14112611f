"""Category lookup endpoints."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from natural_events.api.deps import get_category_registry
from natural_events.api.schemas.category import (
    CategoryListResponse,
    CategoryOption,
    CategoryOptionsResponse,
    CategoryPayload,
    CategoryResolution,
)
from natural_events.observability.metrics import log_metric
from natural_events.services.category_emoji import CATEGORY_OPTIONS, DEFAULT_CATEGORY, emoji_for
from natural_events.services.category_registry import CategoryRegistry
from natural_events.services.category_resolver import resolve_category

router = APIRouter()


@router.get("/categories", response_model=CategoryListResponse, tags=["categories"])
def list_categories(
    request: Request,
    registry: CategoryRegistry = Depends(get_category_registry),
) -> CategoryListResponse:
    request_id = getattr(request.state, "request_id", None)
    payload = [CategoryPayload(**record.to_dict()) for record in registry]
    log_metric("categories.list.count", len(payload), metadata={"loaded": registry.loaded})
    return CategoryListResponse(categories=payload, loaded=registry.loaded, request_id=request_id or "")


@router.get("/categories/options", response_model=CategoryOptionsResponse, tags=["categories"])
def list_category_options(request: Request) -> CategoryOptionsResponse:
    request_id = getattr(request.state, "request_id", None)
    options = [
        CategoryOption(value=value, label=label, emoji=emoji_for(value))
        for value, label in CATEGORY_OPTIONS
    ]
    return CategoryOptionsResponse(options=options, default=DEFAULT_CATEGORY, request_id=request_id or "")


@router.get("/categories/resolve", response_model=CategoryResolution, tags=["categories"])
def resolve(
    request: Request,
    category: Optional[str] = Query(default=None, description="Raw category value"),
    registry: CategoryRegistry = Depends(get_category_registry),
) -> CategoryResolution:
    request_id = getattr(request.state, "request_id", None)
    display = resolve_category(category, registry.records)
    return CategoryResolution(
        category=category,
        emoji=display.emoji,
        title=display.title,
        request_id=request_id or "",
    )
