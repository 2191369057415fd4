"""Catalog data model and configuration.

The SQLite store lives in `storefront.persistence.sqlite`; this package only
holds the dataclasses, schema and settings shared by every layer.
"""

from .models import (  # re-export
    CatalogItem,
    Collection,
    ImportRow,
    PRODUCT_TYPES,
    PRODUCT_MATERIALS,
    PRODUCT_OCCASIONS,
)
from .config import DatabaseConfig  # re-export

__all__ = [
    "CatalogItem",
    "Collection",
    "ImportRow",
    "PRODUCT_TYPES",
    "PRODUCT_MATERIALS",
    "PRODUCT_OCCASIONS",
    "DatabaseConfig",
]
