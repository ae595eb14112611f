"""HTTP client for the upstream natural-events REST service.

Every call degrades to an empty result when the upstream is unreachable or
answers with an error status; the failure is logged and callers decide
whether an empty result is worth surfacing.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

EventPayload = Dict[str, Any]

DEFAULT_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def build_http_client(timeout: float, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Create the shared ``httpx.Client`` used for every upstream call."""
    return httpx.Client(timeout=timeout, headers=DEFAULT_HEADERS, transport=transport)


class EventsApiClient:
    def __init__(self, base_url: str, client: httpx.Client) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client

    def get_random_events(self, amount: int = 5, category: str | None = None) -> List[EventPayload]:
        logger.debug("Loading %s random events for category=%s", amount, category)
        if category:
            params: Dict[str, Any] = {"category": category, "limit": amount}
        else:
            params = {"amount": amount}
        events = self._get_list("/random", params=params, action="load random events")
        logger.info("Loaded %d random events", len(events))
        return events

    def get_all_events(self) -> List[EventPayload]:
        return self._get_list("/all", action="load all events")

    def create_event(self, data: EventPayload) -> Optional[EventPayload]:
        try:
            response = self._client.post(self._url("/create"), json=data)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to create event: %s", exc)
            return None
        return self._event_body(body, action="create event")

    def update_event(self, event_id: int, data: EventPayload) -> Optional[EventPayload]:
        try:
            response = self._client.put(self._url(f"/{event_id}/update"), json=data)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to update event %s: %s", event_id, exc)
            return None
        return self._event_body(body, action=f"update event {event_id}")

    def delete_event(self, event_id: int) -> Optional[int]:
        try:
            response = self._client.delete(self._url(f"/{event_id}"))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to delete event %s: %s", event_id, exc)
            return None
        logger.info("Deleted event %s", event_id)
        return event_id

    def get_open_events_by_category(self, category: str) -> List[EventPayload]:
        params = {"status": "open", "category": category}
        return self._get_list("/filter", params=params, action="load open events")

    def get_closed_events_by_category(
        self,
        category: str | None,
        start: str | None = None,
        end: str | None = None,
    ) -> List[EventPayload]:
        params: Dict[str, Any] = {}
        if category:
            params["category"] = category
        params["status"] = "closed"
        if start:
            params["start"] = start
        if end:
            params["end"] = end
        return self._get_list("/filter", params=params, action="load closed events")

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _event_body(body: Any, *, action: str) -> Optional[EventPayload]:
        if not isinstance(body, dict):
            logger.error("Unexpected payload while trying to %s: %r", action, type(body).__name__)
            return None
        return body

    def _get_list(self, path: str, *, action: str, params: Dict[str, Any] | None = None) -> List[EventPayload]:
        try:
            response = self._client.get(self._url(path), params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to %s: %s", action, exc)
            return []

        # /all may wrap the list in {"results": [...]}
        if isinstance(data, dict):
            data = data.get("results") or []
        if not isinstance(data, list):
            logger.error("Unexpected payload while trying to %s: %r", action, type(data).__name__)
            return []
        if not data:
            logger.warning("No events found (%s %s)", path, params or {})
        return data
