"""Event endpoints backing the live map, the archive and the event manager."""
from __future__ import annotations

from datetime import date
from time import perf_counter
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from natural_events.api.deps import get_app_settings, get_category_registry, get_events_client
from natural_events.api.schemas.event import (
    ArchiveCardPayload,
    ArchiveResponse,
    EventCardPayload,
    EventFormRequest,
    EventListResponse,
    EventResponse,
    LiveEventsResponse,
    MapMarkerPayload,
)
from natural_events.core.config import Settings
from natural_events.observability.metrics import log_metric
from natural_events.observability.tracing import trace
from natural_events.services.category_emoji import DEFAULT_CATEGORY
from natural_events.services.category_registry import CategoryRegistry
from natural_events.services.event_views import build_archive_cards, build_event_cards, build_map_markers
from natural_events.services.events_client import EventsApiClient

router = APIRouter()

UPSTREAM_UNAVAILABLE = "Events service unavailable"


@router.get("/events/live", response_model=LiveEventsResponse, tags=["events"])
def get_live_events(
    request: Request,
    category: str = Query(default=DEFAULT_CATEGORY, min_length=1),
    client: EventsApiClient = Depends(get_events_client),
    settings: Settings = Depends(get_app_settings),
) -> LiveEventsResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("events.live", metadata={"category": category}, request_id=request_id):
        events = client.get_open_events_by_category(category)
        markers = build_map_markers(events)

    log_metric("events.live.markers", len(markers), metadata={"category": category})
    return LiveEventsResponse(
        category=category,
        center=[settings.map_center_lat, settings.map_center_lon],
        zoom=settings.map_zoom,
        markers=[MapMarkerPayload(**marker.to_dict()) for marker in markers],
        request_id=request_id or "",
    )


@router.get("/events/archive", response_model=ArchiveResponse, tags=["events"])
def get_archive(
    request: Request,
    category: str = Query(default=DEFAULT_CATEGORY),
    start: Optional[date] = Query(default=None),
    end: Optional[date] = Query(default=None),
    client: EventsApiClient = Depends(get_events_client),
    registry: CategoryRegistry = Depends(get_category_registry),
) -> ArchiveResponse:
    request_id = getattr(request.state, "request_id", None)
    if start and end and start > end:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="start must not be after end")

    metadata = {"category": category, "start": str(start or ""), "end": str(end or "")}
    with trace("events.archive", metadata=metadata, request_id=request_id):
        events = client.get_closed_events_by_category(
            category,
            start.isoformat() if start else None,
            end.isoformat() if end else None,
        )
        cards = build_archive_cards(events, registry.records)

    log_metric("events.archive.count", len(cards), metadata=metadata)
    return ArchiveResponse(
        category=category,
        start=start,
        end=end,
        events=[ArchiveCardPayload(**card.to_dict()) for card in cards],
        request_id=request_id or "",
    )


@router.get("/events/random", response_model=EventListResponse, tags=["events"])
def get_random_events(
    request: Request,
    amount: Optional[int] = Query(default=None, ge=1, le=100),
    category: Optional[str] = Query(default=None),
    client: EventsApiClient = Depends(get_events_client),
    registry: CategoryRegistry = Depends(get_category_registry),
    settings: Settings = Depends(get_app_settings),
) -> EventListResponse:
    request_id = getattr(request.state, "request_id", None)
    size = amount or settings.default_event_amount
    with trace("events.random", metadata={"amount": size, "category": category}, request_id=request_id):
        events = client.get_random_events(size, category)
        cards = build_event_cards(events, registry.records)

    log_metric("events.random.count", len(cards), metadata={"category": category or "all"})
    return _event_list(cards, request_id)


@router.get("/events", response_model=EventListResponse, tags=["events"])
def list_events(
    request: Request,
    client: EventsApiClient = Depends(get_events_client),
    registry: CategoryRegistry = Depends(get_category_registry),
) -> EventListResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("events.list", request_id=request_id):
        cards = build_event_cards(client.get_all_events(), registry.records)

    log_metric("events.list.count", len(cards))
    return _event_list(cards, request_id)


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED, tags=["events"])
def create_event(
    payload: EventFormRequest,
    request: Request,
    client: EventsApiClient = Depends(get_events_client),
    registry: CategoryRegistry = Depends(get_category_registry),
) -> EventResponse:
    request_id = getattr(request.state, "request_id", None)
    start = perf_counter()
    with trace("events.create", metadata={"category": payload.category}, request_id=request_id):
        created = client.create_event(payload.to_upstream())
    if not created:
        log_metric("events.create.failure", 1)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=UPSTREAM_UNAVAILABLE)

    log_metric("events.create.latency_ms", (perf_counter() - start) * 1000)
    return _event_response(created, registry, request_id)


@router.put("/events/{event_id}", response_model=EventResponse, tags=["events"])
def update_event(
    event_id: int,
    payload: EventFormRequest,
    request: Request,
    client: EventsApiClient = Depends(get_events_client),
    registry: CategoryRegistry = Depends(get_category_registry),
) -> EventResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("events.update", metadata={"event_id": event_id}, request_id=request_id):
        updated = client.update_event(event_id, payload.to_upstream(event_id))
    if not updated:
        log_metric("events.update.failure", 1, metadata={"event_id": event_id})
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=UPSTREAM_UNAVAILABLE)
    return _event_response(updated, registry, request_id)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["events"])
def delete_event(
    event_id: int,
    request: Request,
    client: EventsApiClient = Depends(get_events_client),
) -> Response:
    request_id = getattr(request.state, "request_id", None)
    with trace("events.delete", metadata={"event_id": event_id}, request_id=request_id):
        deleted = client.delete_event(event_id)
    if deleted is None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=UPSTREAM_UNAVAILABLE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _event_list(cards, request_id: str | None) -> EventListResponse:
    return EventListResponse(
        count=len(cards),
        events=[EventCardPayload(**card.to_dict()) for card in cards],
        request_id=request_id or "",
    )


def _event_response(event: dict, registry: CategoryRegistry, request_id: str | None) -> EventResponse:
    card = build_event_cards([event], registry.records)[0]
    return EventResponse(event=EventCardPayload(**card.to_dict()), request_id=request_id or "")
