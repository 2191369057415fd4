"""Catalog filter engine: a pure (items, filters) -> visible items pipeline.

Stages run in a fixed order and each one only narrows the list; an empty
selection skips its stage. Sorting is stable, so ties keep source order and
identical inputs always give identical output.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from .normalize import BrowseItem
from .state import FilterState

Stage = Callable[[List[BrowseItem], FilterState], List[BrowseItem]]


def search_stage(items: List[BrowseItem], filters: FilterState) -> List[BrowseItem]:
    needle = filters.search.strip().lower()
    if not needle:
        return items
    return [
        i
        for i in items
        if needle in i.name.lower()
        or needle in i.material.lower()
        or needle in i.type.lower()
        or needle in i.collection.lower()
    ]


def _membership_stage(category: str, attribute: str) -> Stage:
    def stage(items: List[BrowseItem], filters: FilterState) -> List[BrowseItem]:
        selected = getattr(filters, category)
        if not selected:
            return items
        return [i for i in items if getattr(i, attribute) in selected]

    stage.__name__ = f"{category}_stage"
    return stage


material_stage = _membership_stage("materials", "material")
type_stage = _membership_stage("types", "type")
occasion_stage = _membership_stage("occasions", "occasion")
collection_stage = _membership_stage("collections", "collection")


def price_stage(items: List[BrowseItem], filters: FilterState) -> List[BrowseItem]:
    low, high = filters.price_range
    return [i for i in items if i.price_min >= low and i.price_max <= high]


SORT_KEY_FUNCS = {
    "newest": lambda i: not i.is_new,
    "popular": lambda i: not i.popular,
    "most-loved": lambda i: not i.popular,
    "price-low": lambda i: i.price_min,
    "price-high": lambda i: -i.price_max,
    "featured": lambda i: not i.featured,
}


def sort_stage(items: List[BrowseItem], filters: FilterState) -> List[BrowseItem]:
    key = SORT_KEY_FUNCS.get(filters.sort_by, SORT_KEY_FUNCS["featured"])
    return sorted(items, key=key)


PIPELINE: tuple[Stage, ...] = (
    search_stage,
    material_stage,
    type_stage,
    occasion_stage,
    collection_stage,
    price_stage,
    sort_stage,
)


def apply_filters(items: Sequence[BrowseItem], filters: FilterState) -> List[BrowseItem]:
    """Return a new filtered, sorted list; `items` is left untouched."""
    result = list(items)
    for stage in PIPELINE:
        result = stage(result, filters)
    return result
