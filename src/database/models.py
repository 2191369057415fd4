"""
Data models for the jewelry catalog.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any


PRODUCT_TYPES = ["ring", "necklace", "earring", "bracelet", "bangle"]
PRODUCT_MATERIALS = ["gold", "diamond", "platinum", "rose-gold"]
PRODUCT_OCCASIONS = ["bridal", "festive", "daily-wear", "gift"]


@dataclass
class Collection:
    """Collection model."""

    id: Optional[str] = None
    name: str = ""
    handle: str = ""
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "handle": self.handle,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class CatalogItem:
    """Product model."""

    id: Optional[str] = None
    name: str = ""
    slug: str = ""
    description: Optional[str] = None
    images: List[str] = field(default_factory=list)
    type: str = "ring"
    material: str = "gold"
    occasion: Optional[str] = None
    collection_id: Optional[str] = None
    stock: int = 0
    featured: bool = False
    most_loved: bool = False
    new_arrival: bool = False
    sku: Optional[str] = None
    sizes: List[str] = field(default_factory=list)
    price_range: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_deleted: bool = False
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        """Raise ValueError if the item breaks the catalog invariants."""
        try:
            whole = self.stock == int(self.stock)
        except (TypeError, ValueError):
            whole = False
        if not whole:
            raise ValueError(f"Stock must be a whole number for {self.name!r}")
        if self.stock < 0:
            raise ValueError(f"Stock cannot be negative for {self.name!r}")
        if self.is_deleted:
            return
        if self.type not in PRODUCT_TYPES:
            raise ValueError(f"Invalid type {self.type!r} for {self.name!r}")
        if self.material not in PRODUCT_MATERIALS:
            raise ValueError(f"Invalid material {self.material!r} for {self.name!r}")
        if self.occasion is not None and self.occasion not in PRODUCT_OCCASIONS:
            raise ValueError(f"Invalid occasion {self.occasion!r} for {self.name!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "images": list(self.images),
            "type": self.type,
            "material": self.material,
            "occasion": self.occasion,
            "collection_id": self.collection_id,
            "stock": self.stock,
            "featured": self.featured,
            "most_loved": self.most_loved,
            "new_arrival": self.new_arrival,
            "sku": self.sku,
            "sizes": list(self.sizes),
            "price_range": self.price_range,
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "is_deleted": self.is_deleted,
            "created_by": self.created_by,
            "updated_by": self.updated_by,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


# Columns sent to the catalog-create collaborator for an imported row
PRODUCT_PAYLOAD_FIELDS = [
    "name",
    "description",
    "sku",
    "type",
    "material",
    "occasion",
    "stock",
    "featured",
    "most_loved",
    "new_arrival",
    "sizes",
    "meta_title",
    "meta_description",
    "slug",
    "collection_id",
    "price_range",
]


@dataclass
class ImportRow:
    """One parsed spreadsheet row during a bulk import (never persisted)."""

    row_index: int
    fields: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    images: List[Any] = field(default_factory=list)  # ImageFile handles
    image_urls: List[str] = field(default_factory=list)
    requested_filenames: List[str] = field(default_factory=list)
    partial_images: bool = False

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def name(self) -> str:
        return self.fields.get("name") or ""

    @property
    def slug(self) -> str:
        return self.fields.get("slug") or ""

    @property
    def sku(self) -> str:
        return self.fields.get("sku") or ""

    def to_payload(self, image_urls: Optional[List[str]] = None) -> Dict[str, Any]:
        """Row data without transient import fields, ready for creation."""
        payload: Dict[str, Any] = {}
        for key in PRODUCT_PAYLOAD_FIELDS:
            value = self.fields.get(key)
            if value == "":
                value = None
            payload[key] = value
        payload["sizes"] = list(self.fields.get("sizes") or [])
        payload["images"] = list(image_urls if image_urls is not None else self.image_urls)
        return payload


# SQL Table Creation Queries
CREATE_TABLES_SQL = """
-- Collections table
CREATE TABLE IF NOT EXISTS collections (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    handle TEXT NOT NULL UNIQUE,
    description TEXT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Products table
CREATE TABLE IF NOT EXISTS products (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    slug TEXT NOT NULL UNIQUE,
    description TEXT NULL,
    images TEXT NOT NULL DEFAULT '[]',
    type TEXT NOT NULL CHECK (type IN ('ring','necklace','earring','bracelet','bangle')),
    material TEXT NOT NULL CHECK (material IN ('gold','diamond','platinum','rose-gold')),
    occasion TEXT NULL CHECK (occasion IS NULL OR occasion IN ('bridal','festive','daily-wear','gift')),
    collection_id TEXT NULL,
    stock INTEGER NOT NULL DEFAULT 0 CHECK (stock >= 0),
    featured BOOLEAN DEFAULT 0,
    most_loved BOOLEAN DEFAULT 0,
    new_arrival BOOLEAN DEFAULT 0,
    sku TEXT NULL,
    sizes TEXT NOT NULL DEFAULT '[]',
    price_range TEXT NULL,
    meta_title TEXT NULL,
    meta_description TEXT NULL,
    is_deleted BOOLEAN DEFAULT 0,
    created_by TEXT NULL,
    updated_by TEXT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (collection_id) REFERENCES collections (id) ON DELETE SET NULL
);

-- Indexes for performance
CREATE INDEX IF NOT EXISTS idx_products_slug ON products(slug);
CREATE INDEX IF NOT EXISTS idx_products_type ON products(type);
CREATE INDEX IF NOT EXISTS idx_products_material ON products(material);
CREATE INDEX IF NOT EXISTS idx_products_collection_id ON products(collection_id);
CREATE INDEX IF NOT EXISTS idx_products_is_deleted ON products(is_deleted);
CREATE INDEX IF NOT EXISTS idx_collections_handle ON collections(handle);
"""
