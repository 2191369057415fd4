"""Catalog browsing: filter state, filter/sort pipeline and the observable view."""

from .engine import apply_filters  # noqa: F401
from .facets import active_filter_count, facet_count, facet_counts  # noqa: F401
from .normalize import BrowseItem, product_to_browse_item  # noqa: F401
from .state import DEFAULT_FILTERS, FilterState  # noqa: F401
from .view import CatalogView  # noqa: F401

__all__ = [
    "apply_filters",
    "active_filter_count",
    "facet_count",
    "facet_counts",
    "BrowseItem",
    "product_to_browse_item",
    "DEFAULT_FILTERS",
    "FilterState",
    "CatalogView",
]
