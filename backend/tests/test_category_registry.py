from __future__ import annotations

import httpx
import pytest

from natural_events.services.category_registry import CategoryRecord, CategoryRegistry, parse_categories

CATEGORIES_URL = "https://eonet.example/api/v3/categories"

PAYLOAD = {
    "title": "EONET Event Categories",
    "categories": [
        {"id": "drought", "title": "Drought", "description": "Long lasting absence of precipitation", "link": "x"},
        {"id": "seaLakeIce", "title": "Sea and Lake Ice"},
        {"id": "wildfires", "title": "Wildfires"},
    ],
}


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_load_keeps_remote_order():
    registry = CategoryRegistry()
    with _client(lambda request: httpx.Response(200, json=PAYLOAD)) as client:
        records = registry.load(client, CATEGORIES_URL)

    assert [record.id for record in records] == ["drought", "seaLakeIce", "wildfires"]
    assert records[0].description == "Long lasting absence of precipitation"
    assert registry.loaded is True
    assert registry.failed is False
    assert len(registry) == 3


def test_load_fetches_only_once():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(200, json=PAYLOAD)

    registry = CategoryRegistry()
    with _client(handler) as client:
        registry.load(client, CATEGORIES_URL)
        registry.load(client, CATEGORIES_URL)

    assert calls == [CATEGORIES_URL]


def test_failed_load_stays_empty_and_logs(caplog):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, text="maintenance")

    caplog.set_level("ERROR")
    registry = CategoryRegistry()
    with _client(handler) as client:
        assert registry.load(client, CATEGORIES_URL) == ()
        assert registry.load(client, CATEGORIES_URL) == ()

    assert len(calls) == 1
    assert registry.records == ()
    assert registry.loaded is False
    assert registry.failed is True
    assert "Failed to load categories" in caplog.text


def test_connection_error_is_absorbed():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    registry = CategoryRegistry()
    with _client(handler) as client:
        registry.load(client, CATEGORIES_URL)
    assert registry.records == ()
    assert registry.failed is True


def test_malformed_body_is_treated_as_failure():
    registry = CategoryRegistry()
    with _client(lambda request: httpx.Response(200, json={"items": []})) as client:
        registry.load(client, CATEGORIES_URL)
    assert registry.failed is True
    assert list(registry) == []


def test_parse_skips_entries_without_id():
    records = parse_categories({"categories": [{"title": "No id"}, {"id": "snow", "title": "Snow"}, "junk"]})
    assert records == (CategoryRecord(id="snow", title="Snow"),)


def test_parse_rejects_payload_without_list():
    with pytest.raises(ValueError):
        parse_categories([])


def test_prepopulated_registry_skips_fetch():
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover
        raise AssertionError("should not fetch")

    registry = CategoryRegistry([CategoryRecord(id="floods", title="Floods")])
    with _client(handler) as client:
        registry.load(client, CATEGORIES_URL)
    assert registry.loaded is True
    assert registry.find_by_id("floods").title == "Floods"
    assert registry.find_by_id("Floods") is None
    assert registry.find_by_id(None) is None
