"""Registry of known event categories, fetched once per process."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRecord:
    id: str
    title: str
    description: str = ""
    link: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "link": self.link,
        }


class CategoryRegistry:
    """Ordered, read-only list of ``CategoryRecord`` values.

    The registry starts empty and is populated by a single call to
    :meth:`load`. Record order follows the remote response and is
    significant for title matching. A failed load leaves the registry
    empty for the rest of the process; there is no retry.
    """

    def __init__(self, records: Iterable[CategoryRecord] = ()) -> None:
        self._records: Tuple[CategoryRecord, ...] = tuple(records)
        self._loaded = bool(self._records)
        self._attempted = self._loaded
        self._failed = False
        self._lock = threading.Lock()

    @property
    def records(self) -> Tuple[CategoryRecord, ...]:
        return self._records

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def settled(self) -> bool:
        """True once the single fetch has either succeeded or failed."""
        return self._loaded or self._failed

    def __iter__(self) -> Iterator[CategoryRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def find_by_id(self, category_id: str | None) -> Optional[CategoryRecord]:
        if not category_id:
            return None
        for record in self._records:
            if record.id == category_id:
                return record
        return None

    def load(self, client: httpx.Client, url: str) -> Tuple[CategoryRecord, ...]:
        """Fetch the category list once; later calls return the current records."""
        with self._lock:
            if self._attempted:
                return self._records
            self._attempted = True
            try:
                response = client.get(url)
                response.raise_for_status()
                records = parse_categories(response.json())
            except (httpx.HTTPError, ValueError) as exc:
                self._failed = True
                logger.error("Failed to load categories from %s: %s", url, exc)
                return self._records

            self._records = records
            self._loaded = True
            logger.info("Loaded %d categories from %s", len(records), url)
            return self._records


def parse_categories(payload: Any) -> Tuple[CategoryRecord, ...]:
    """Turn a ``{"categories": [...]}`` body into records, keeping order."""
    if not isinstance(payload, dict) or not isinstance(payload.get("categories"), list):
        raise ValueError("Category payload must contain a 'categories' list")

    records = []
    for entry in payload["categories"]:
        if not isinstance(entry, dict) or not entry.get("id"):
            logger.warning("Skipping malformed category entry: %r", entry)
            continue
        records.append(
            CategoryRecord(
                id=str(entry["id"]),
                title=str(entry.get("title") or ""),
                description=str(entry.get("description") or ""),
                link=str(entry.get("link") or ""),
            )
        )
    return tuple(records)
