"""Schemas for event views and the event form."""
from __future__ import annotations

import datetime as dt
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

EventCategoryId = Literal[
    "wildfires",
    "severeStorms",
    "volcanoes",
    "seaLakeIce",
    "earthquakes",
    "floods",
    "landslides",
    "snow",
    "drought",
    "dustHaze",
    "manmade",
    "waterColor",
]
EventStatus = Literal["open", "closed"]


class EventFormRequest(BaseModel):
    title: str = Field(..., min_length=5, max_length=255)
    date: dt.date
    category: EventCategoryId = "wildfires"
    longitude: float = Field(..., ge=-180.0, le=180.0)
    latitude: float = Field(..., ge=-90.0, le=90.0)
    status: EventStatus = "open"

    @field_validator("title")
    @classmethod
    def trim_and_validate_title(cls, value: str) -> str:
        cleaned = value.strip()
        if len(cleaned) < 5 or len(cleaned) > 255:
            raise ValueError("title must be between 5 and 255 characters after trimming")
        return cleaned

    @field_validator("date")
    @classmethod
    def reject_future_date(cls, value: dt.date) -> dt.date:
        if value > dt.date.today():
            raise ValueError("date must not be in the future")
        return value

    def to_upstream(self, event_id: int | None = None) -> dict[str, Any]:
        payload = self.model_dump(mode="json")
        if event_id is not None:
            payload["id"] = event_id
        return payload


class MapMarkerPayload(BaseModel):
    id: Optional[Any] = None
    title: str
    date: Optional[str] = None
    category: str
    emoji: str
    latitude: float
    longitude: float


class LiveEventsResponse(BaseModel):
    category: str
    center: List[float]
    zoom: int
    markers: List[MapMarkerPayload]
    request_id: str


class ArchiveCardPayload(BaseModel):
    id: Optional[Any] = None
    title: str
    date: Optional[str] = None
    emoji: str
    category_title: str


class ArchiveResponse(BaseModel):
    category: str
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None
    events: List[ArchiveCardPayload]
    request_id: str


class EventCardPayload(BaseModel):
    id: Optional[Any] = None
    title: str
    date: Optional[str] = None
    category: Optional[str] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    status: Optional[str] = None
    emoji: str
    category_title: str


class EventListResponse(BaseModel):
    count: int
    events: List[EventCardPayload]
    request_id: str


class EventResponse(BaseModel):
    event: EventCardPayload
    request_id: str
