"""Observable catalog view: recomputes the visible items after every change."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Sequence

from storefront.persistence import repositories as repo
from .engine import apply_filters
from .normalize import BrowseItem, product_to_browse_item
from .state import DEFAULT_FILTERS, FilterState

logger = logging.getLogger(__name__)

Listener = Callable[["CatalogView"], None]


class CatalogView:
    """Holds the source items and filter state; `filtered_items` is always current.

    Listeners are called after each recompute with the view itself.
    """

    def __init__(self, items: Sequence[BrowseItem] = (), filters: FilterState = DEFAULT_FILTERS):
        self._items: List[BrowseItem] = list(items)
        self._filters = filters
        self._listeners: List[Listener] = []
        self.filtered_items: List[BrowseItem] = []
        self._recompute()

    @classmethod
    def from_store(cls, store, filters: FilterState = DEFAULT_FILTERS) -> "CatalogView":
        names = repo.collection_names(store)
        items = [product_to_browse_item(p, names) for p in repo.list_products(store)]
        return cls(items, filters)

    @property
    def items(self) -> List[BrowseItem]:
        return list(self._items)

    @property
    def filters(self) -> FilterState:
        return self._filters

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _recompute(self):
        self.filtered_items = apply_filters(self._items, self._filters)
        logger.debug(f"{len(self.filtered_items)}/{len(self._items)} items visible")
        for listener in list(self._listeners):
            listener(self)

    def set_items(self, items: Sequence[BrowseItem]):
        self._items = list(items)
        self._recompute()

    def update_filter(self, key: str, value: Any):
        self._filters = self._filters.updated(key, value)
        self._recompute()

    def toggle_option(self, category: str, value: str, checked: bool):
        self._filters = self._filters.toggled(category, value, checked)
        self._recompute()

    def reset_filters(self):
        self._filters = DEFAULT_FILTERS
        self._recompute()
