"""Lightweight metric emission through the standard logger."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def log_metric(name: str, value: float, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Record a single metric sample."""
    logger.info("metric %s=%s %s", name, value, metadata or {})
