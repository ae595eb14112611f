from natural_events.services.category_registry import CategoryRecord
from natural_events.services.category_resolver import (
    UNKNOWN_TITLE,
    CategoryDisplay,
    resolve_category,
    title_for,
    title_for_id,
)

REGISTRY = [
    CategoryRecord(id="seaLakeIce", title="Sea and Lake Ice"),
    CategoryRecord(id="ice", title="Generic Ice"),
]


def test_title_for_first_match_in_registry_order_wins():
    assert title_for("seaLakeIce", REGISTRY) == "Sea and Lake Ice"


def test_title_for_does_not_pick_the_longest_match():
    reordered = list(reversed(REGISTRY))
    assert title_for("seaLakeIce", reordered) == "Generic Ice"


def test_title_for_matches_case_insensitive_substrings():
    registry = [CategoryRecord(id="wildfires", title="Wildfires")]
    assert title_for("WILDFIRES in the north", registry) == "Wildfires"


def test_title_for_empty_registry_falls_back_to_raw_value():
    assert title_for("floods", []) == "floods"


def test_title_for_absent_value_is_unknown():
    assert title_for(None, []) == UNKNOWN_TITLE
    assert title_for("", REGISTRY) == "Unknown"


def test_title_for_no_match_returns_raw_value():
    assert title_for("volcanoes", REGISTRY) == "volcanoes"


def test_title_for_blank_title_falls_back_to_raw_value():
    registry = [CategoryRecord(id="snow", title=""), CategoryRecord(id="snow", title="Snow")]
    assert title_for("snow", registry) == "snow"


def test_title_for_id_requires_exact_match():
    assert title_for_id("seaLakeIce", REGISTRY) == "Sea and Lake Ice"
    assert title_for_id("ice", REGISTRY) == "Generic Ice"
    assert title_for_id("sealakeice", REGISTRY) == "sealakeice"
    assert title_for_id(None, REGISTRY) == UNKNOWN_TITLE


def test_resolve_category_always_returns_both_halves():
    assert resolve_category("seaLakeIce", REGISTRY) == CategoryDisplay(emoji="🧊", title="Sea and Lake Ice")
    assert resolve_category(None, []) == CategoryDisplay(emoji="❓", title="Unknown")
    emoji, title = resolve_category("not-a-real-category", REGISTRY)
    assert (emoji, title) == ("❓", "not-a-real-category")
