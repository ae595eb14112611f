"""Span helpers backed by Opik, falling back to log lines when it is disabled."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator, Optional

from natural_events.observability.client import get_opik_client

logger = logging.getLogger(__name__)


@contextmanager
def trace(
    name: str,
    metadata: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Iterator[Dict[str, Any]]:
    """Wrap a block in a named span.

    The yielded dict can be extended by the caller; its contents are sent
    as span metadata (or logged) together with the latency when the block
    exits.
    """
    span: Dict[str, Any] = dict(metadata or {})
    client = get_opik_client()
    opik_trace = None
    if client is not None:
        tags = [f"request_id:{request_id}"] if request_id else None
        opik_trace = client.trace(name=name, input=dict(span), metadata={"request_id": request_id}, tags=tags)

    start = perf_counter()
    logger.debug("span %s started (request_id=%s)", name, request_id)
    try:
        yield span
    except Exception as exc:
        latency_ms = (perf_counter() - start) * 1000
        logger.warning("span %s failed after %.1fms (request_id=%s) %s", name, latency_ms, request_id, span)
        if opik_trace is not None:
            opik_trace.end(metadata={**span, "latency_ms": latency_ms, "error": repr(exc)})
        raise

    latency_ms = (perf_counter() - start) * 1000
    logger.debug("span %s finished in %.1fms (request_id=%s) %s", name, latency_ms, request_id, span)
    if opik_trace is not None:
        opik_trace.end(metadata={**span, "latency_ms": latency_ms})
