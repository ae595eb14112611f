"""Lookup table mapping natural-event category spellings to emoji glyphs."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Tuple

FALLBACK_EMOJI = "❓"
DEFAULT_CATEGORY = "wildfires"

_WHITESPACE = re.compile(r"\s")

# Several spellings per category family absorb inconsistent upstream labels.
# Keys are kept exactly as listed, including the "glyph + space + label" forms.
CATEGORY_EMOJI: Mapping[str, str] = MappingProxyType(
    {
        "wildfires": "🔥",
        "wildfire": "🔥",
        "🔥 wildfire": "🔥",
        "severestorms": "🌪️",
        "severe storms": "🌪️",
        "🌪️ severe storm": "🌪️",
        "volcanoes": "🌋",
        "volcano": "🌋",
        "🌋 volcanoe": "🌋",
        "sealakeice": "🧊",
        "seaandlakeice": "🧊",
        "sea lake ice": "🧊",
        "🧊 sea lake ice": "🧊",
        "earthquakes": "🌍",
        "earthquake": "🌍",
        "🌍 earthquake": "🌍",
        "floods": "🌊",
        "flood": "🌊",
        "🌊 flood": "🌊",
        "landslides": "⛰️",
        "landslide": "⛰️",
        "⛰️ landslide": "⛰️",
        "snow": "❄️",
        "❄️ snow": "❄️",
        "drought": "☀️",
        "☀️ drought": "☀️",
        "dusthaze": "🌫️",
        "dust haze": "🌫️",
        "dustandhaze": "🌫️",
        "🌫️ dust haze": "🌫️",
        "manmade": "🏗️",
        "🏗️ manmade": "🏗️",
        "watercolor": "💧",
        "water color": "💧",
        "💧 water color": "💧",
    }
)

# (category id, option label) in the order the filter forms list them.
CATEGORY_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("wildfires", "🔥 Wildfire"),
    ("severeStorms", "🌪️ Severe Storm"),
    ("volcanoes", "🌋 Volcano"),
    ("seaLakeIce", "🧊 Sea and Lake Ice"),
    ("earthquakes", "🌍 Earthquake"),
    ("floods", "🌊 Flood"),
    ("landslides", "⛰️ Landslide"),
    ("snow", "❄️ Snow"),
    ("drought", "☀️ Drought"),
    ("dustHaze", "🌫️ Dust Haze"),
    ("manmade", "🏗️ Manmade"),
    ("waterColor", "💧 Water Color"),
)

EVENT_CATEGORIES: Tuple[str, ...] = tuple(category_id for category_id, _ in CATEGORY_OPTIONS)
EVENT_STATUSES: Tuple[str, ...] = ("open", "closed")


def normalize_category(raw: str | None) -> str:
    """Lowercase the raw value and strip every whitespace character.

    Absent or empty input yields an empty key, which is never present in
    ``CATEGORY_EMOJI``.
    """
    if not raw:
        return ""
    return _WHITESPACE.sub("", raw.lower())


def emoji_for(category: str | None) -> str:
    """Return the glyph for a raw category value, or ``FALLBACK_EMOJI``."""
    key = normalize_category(category)
    if not key:
        return FALLBACK_EMOJI
    return CATEGORY_EMOJI.get(key, FALLBACK_EMOJI)
