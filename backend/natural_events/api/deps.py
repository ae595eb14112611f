"""FastAPI dependencies handing out process-wide collaborators."""
from __future__ import annotations

from fastapi import Request

from natural_events.core.config import Settings
from natural_events.services.category_registry import CategoryRegistry
from natural_events.services.events_client import EventsApiClient


def get_category_registry(request: Request) -> CategoryRegistry:
    return request.app.state.category_registry


def get_events_client(request: Request) -> EventsApiClient:
    return request.app.state.events_client


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
