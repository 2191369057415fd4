"""Filter state owned by the browsing view."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Tuple

from .constants import (
    DEFAULT_PRICE_RANGE,
    DEFAULT_SORT,
    DEFAULT_VIEW_MODE,
    FILTER_CATEGORIES,
    SORT_KEYS,
    VIEW_MODES,
)


@dataclass(frozen=True)
class FilterState:
    search: str = ""
    materials: Tuple[str, ...] = ()
    types: Tuple[str, ...] = ()
    occasions: Tuple[str, ...] = ()
    collections: Tuple[str, ...] = ()
    price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE
    sort_by: str = DEFAULT_SORT
    view_mode: str = DEFAULT_VIEW_MODE

    def __post_init__(self):
        # selections arrive as lists from callers; keep them hashable
        for name in FILTER_CATEGORIES:
            object.__setattr__(self, name, tuple(getattr(self, name)))
        low, high = self.price_range
        if low > high:
            raise ValueError(f"price range min {low} is greater than max {high}")
        object.__setattr__(self, "price_range", (low, high))
        if self.sort_by not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {self.sort_by}")
        if self.view_mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {self.view_mode}")

    def updated(self, key: str, value: Any) -> "FilterState":
        """Copy with one field replaced (validated like a fresh state)."""
        if key not in {f.name for f in dataclasses.fields(self)}:
            raise KeyError(key)
        return dataclasses.replace(self, **{key: value})

    def toggled(self, category: str, value: str, checked: bool) -> "FilterState":
        """Add or remove one option in a multi-select category."""
        if category not in FILTER_CATEGORIES:
            raise KeyError(category)
        current = getattr(self, category)
        if checked:
            values = current if value in current else current + (value,)
        else:
            values = tuple(v for v in current if v != value)
        return self.updated(category, values)


DEFAULT_FILTERS = FilterState()
