"""Opik client lifecycle."""
from __future__ import annotations

import logging
from typing import Optional

import opik

from natural_events.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

_client: Optional[opik.Opik] = None


def init_opik(settings: Settings | None = None) -> Optional[opik.Opik]:
    """Create the process-wide Opik client when tracing is enabled."""
    global _client
    settings = settings or get_settings()
    if not settings.opik_enabled:
        logger.debug("Opik disabled; spans are logged only")
        _client = None
        return None
    if _client is not None:
        return _client
    try:
        _client = opik.Opik(project_name=settings.opik_project, api_key=settings.opik_api_key)
    except Exception:
        logger.exception("Failed to initialise Opik client; spans are logged only")
        _client = None
        return None
    logger.info("Opik tracing enabled (project=%s)", settings.opik_project)
    return _client


def get_opik_client() -> Optional[opik.Opik]:
    return _client


def shutdown_opik() -> None:
    global _client
    if _client is None:
        return
    try:
        _client.flush()
    except Exception:
        logger.exception("Failed to flush Opik traces")
    _client = None
