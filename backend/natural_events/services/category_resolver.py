"""Resolve raw category values into display-ready emoji and titles."""
from __future__ import annotations

from typing import Iterable, NamedTuple

from natural_events.services.category_emoji import emoji_for
from natural_events.services.category_registry import CategoryRecord

UNKNOWN_TITLE = "Unknown"


class CategoryDisplay(NamedTuple):
    emoji: str
    title: str


def title_for(category: str | None, registry: Iterable[CategoryRecord]) -> str:
    """Return the title of the first record whose id occurs in ``category``.

    Matching is a case-insensitive substring test in registry order; the
    first hit wins even when a later id would match more precisely. Falls
    back to the raw value, then to ``"Unknown"``.
    """
    if category:
        lowered = category.lower()
        for record in registry:
            if record.id.lower() in lowered:
                if record.title:
                    return record.title
                break
    return category or UNKNOWN_TITLE


def title_for_id(category_id: str | None, registry: Iterable[CategoryRecord]) -> str:
    """Exact id lookup used where the category comes from a fixed select box."""
    if not category_id:
        return UNKNOWN_TITLE
    for record in registry:
        if record.id == category_id:
            return record.title or category_id
    return category_id


def resolve_category(category: str | None, registry: Iterable[CategoryRecord]) -> CategoryDisplay:
    return CategoryDisplay(emoji=emoji_for(category), title=title_for(category, registry))
