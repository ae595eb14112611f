"""View models for the live map, the archive and the event manager."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from natural_events.services.category_emoji import emoji_for
from natural_events.services.category_registry import CategoryRecord
from natural_events.services.category_resolver import title_for, title_for_id


@dataclass
class MapMarker:
    id: Any
    title: str
    date: Optional[str]
    category: str
    emoji: str
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass
class ArchiveCard:
    id: Any
    title: str
    date: Optional[str]
    emoji: str
    category_title: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass
class EventCard:
    id: Any
    title: str
    date: Optional[str]
    category: Optional[str]
    longitude: Optional[float]
    latitude: Optional[float]
    status: Optional[str]
    emoji: str
    category_title: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def build_map_markers(events: Iterable[Dict[str, Any]]) -> List[MapMarker]:
    """Place every event that has coordinates and a category on the map."""
    markers: List[MapMarker] = []
    for event in events:
        latitude = _as_float(event.get("latitude"))
        longitude = _as_float(event.get("longitude"))
        category = event.get("category")
        if latitude is None or longitude is None or not category:
            continue
        markers.append(
            MapMarker(
                id=event.get("id"),
                title=event.get("title") or "",
                date=_as_text(event.get("date")),
                category=str(category),
                emoji=emoji_for(str(category)),
                latitude=latitude,
                longitude=longitude,
            )
        )
    return markers


def build_archive_cards(events: Iterable[Dict[str, Any]], registry: Iterable[CategoryRecord]) -> List[ArchiveCard]:
    records = tuple(registry)
    cards: List[ArchiveCard] = []
    for event in events:
        category = _as_text(event.get("category"))
        cards.append(
            ArchiveCard(
                id=event.get("id"),
                title=event.get("title") or "",
                date=_as_text(event.get("date")),
                emoji=emoji_for(category),
                category_title=title_for(category, records),
            )
        )
    return cards


def build_event_cards(events: Iterable[Dict[str, Any]], registry: Iterable[CategoryRecord]) -> List[EventCard]:
    records = tuple(registry)
    cards: List[EventCard] = []
    for event in events:
        category = _as_text(event.get("category"))
        cards.append(
            EventCard(
                id=event.get("id"),
                title=event.get("title") or "",
                date=_as_text(event.get("date")),
                category=category,
                longitude=_as_float(event.get("longitude")),
                latitude=_as_float(event.get("latitude")),
                status=_as_text(event.get("status")),
                emoji=emoji_for(category),
                category_title=title_for_id(category, records),
            )
        )
    return cards


def _as_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
