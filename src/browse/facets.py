"""Option counts shown next to each filter checkbox."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

from .constants import FILTER_CATEGORIES, FILTER_OPTIONS
from .normalize import BrowseItem
from .state import FilterState

CATEGORY_ATTRIBUTES = {
    "materials": "material",
    "types": "type",
    "occasions": "occasion",
    "collections": "collection",
}


def facet_count(items: Iterable[BrowseItem], category: str, value: str) -> int:
    """Number of items (unfiltered) carrying `value` in `category`."""
    attribute = CATEGORY_ATTRIBUTES[category]
    return sum(1 for i in items if getattr(i, attribute) == value)


def facet_counts(items: Sequence[BrowseItem], category: str) -> Dict[str, int]:
    return {value: facet_count(items, category, value) for value in FILTER_OPTIONS[category]}


def active_filter_count(filters: FilterState) -> int:
    return sum(len(getattr(filters, c)) for c in FILTER_CATEGORIES)
