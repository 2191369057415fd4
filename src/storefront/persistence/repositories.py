"""Repository layer abstractions (thin wrappers over CatalogStore).

This allows higher layers to depend on intention-revealing functions instead of
raw store methods. Both the SQLite store and the REST client satisfy the
calls made here.
"""

from __future__ import annotations
from typing import List, Dict, Any, Optional, Iterable, Set

# Product read model helpers


def list_products(store, include_deleted: bool = False):
    return store.get_products(include_deleted=include_deleted)


def existing_slugs(store, slugs: Iterable[str]) -> Set[str]:
    return store.existing_slugs(slugs)


# Product writes


def create_product(store, payload: Dict[str, Any], acting_user: Optional[str] = None):
    return store.create_product(payload, acting_user=acting_user)


def update_stock(store, product_id: str, new_stock: int, acting_user: Optional[str] = None):
    return store.update_stock(product_id, new_stock, acting_user=acting_user)


def delete_product(store, product_id: str, acting_user: Optional[str] = None) -> bool:
    return store.delete_product(product_id, acting_user=acting_user)


# Collections


def collection_lookup(store) -> Dict[str, str]:
    """Map lower-cased collection name and handle to collection id."""
    lookup: Dict[str, str] = {}
    for c in store.get_collections():
        if c.name:
            lookup[c.name.lower()] = c.id
        if c.handle:
            lookup[c.handle.lower()] = c.id
    return lookup


def collection_names(store) -> Dict[str, str]:
    """Map collection id to display name (handle when the name is empty)."""
    return {c.id: c.name or c.handle for c in store.get_collections()}


# Stock management

LOW_STOCK_THRESHOLD = 10


def stock_status(stock: int) -> str:
    if stock == 0:
        return "Out of Stock"
    if stock < LOW_STOCK_THRESHOLD:
        return "Low Stock"
    return "In Stock"


def low_stock_products(store, threshold: int = LOW_STOCK_THRESHOLD) -> List:
    """In-stock products below `threshold` units, lowest first."""
    items = [p for p in store.get_products() if 0 < p.stock < threshold]
    return sorted(items, key=lambda p: (p.stock, p.name))


def out_of_stock_products(store) -> List:
    return [p for p in store.get_products() if p.stock == 0]


def adjust_stock(store, product_id: str, delta: int, acting_user: Optional[str] = None):
    """Add `delta` units, clamping the result at zero."""
    product = store.get_product(product_id)
    if product is None:
        raise KeyError(product_id)
    return store.update_stock(product_id, max(0, product.stock + delta), acting_user=acting_user)
