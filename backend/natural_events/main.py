"""FastAPI application entrypoint."""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from uuid import uuid4

import httpx
import uvicorn
from fastapi import FastAPI, Request

from natural_events.api.routes import categories, events
from natural_events.core.config import Settings, get_settings
from natural_events.core.logging import configure_logging
from natural_events.observability.client import init_opik, shutdown_opik
from natural_events.services.category_registry import CategoryRegistry
from natural_events.services.events_client import EventsApiClient, build_http_client

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.BaseTransport | None = None,
    registry: CategoryRegistry | None = None,
) -> FastAPI:
    """Build the application.

    ``transport`` replaces the network layer of the shared HTTP client and
    ``registry`` replaces the category registry, both for tests.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(log_level=settings.log_level)
        http_client = build_http_client(settings.http_timeout_seconds, transport=transport)
        app.state.http_client = http_client
        app.state.events_client = EventsApiClient(settings.events_api_base_url, http_client)
        category_registry = registry if registry is not None else CategoryRegistry()
        app.state.category_registry = category_registry
        load_task: asyncio.Task | None = None
        if settings.categories_fetch_on_startup:
            # Requests are served with an empty registry until the fetch lands.
            load_task = asyncio.create_task(
                asyncio.to_thread(category_registry.load, http_client, settings.categories_url)
            )
        else:
            logger.info("Category fetch on startup disabled; registry stays empty")
        app.state.category_load_task = load_task
        init_opik(settings)
        logger.info("%s started (events_api=%s)", settings.app_name, settings.events_api_base_url)
        try:
            yield
        finally:
            if load_task is not None and not load_task.done():
                logger.info("Category fetch still pending at shutdown; discarding it")
                load_task.cancel()
                with suppress(asyncio.CancelledError):
                    await load_task
            shutdown_opik()
            http_client.close()
            logger.info("%s stopped", settings.app_name)

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def assign_request_id(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(categories.router)
    app.include_router(events.router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    configure_logging(log_level=settings.log_level)
    uvicorn.run("natural_events.main:app", host="0.0.0.0", port=8000, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
