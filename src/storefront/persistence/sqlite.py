"""SQLite catalog store (local stand-in for the hosted catalog backend)."""

from __future__ import annotations
import json
import sqlite3, logging
import uuid
from datetime import datetime
from contextlib import contextmanager
from typing import Optional, List, Dict, Any, Iterable, Set

from database.config import DatabaseConfig
from database.models import CatalogItem, Collection, CREATE_TABLES_SQL
from storefront.errors import CatalogCreateError, DuplicateSlugError
from utils import generate_slug

UPDATABLE_FIELDS = {
    "name",
    "description",
    "images",
    "type",
    "material",
    "occasion",
    "collection_id",
    "stock",
    "featured",
    "most_loved",
    "new_arrival",
    "sku",
    "sizes",
    "price_range",
    "meta_title",
    "meta_description",
}
JSON_FIELDS = {"images", "sizes"}


def _parse_ts(value) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


class CatalogStore:
    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self.logger = logging.getLogger(__name__)
        self._init_sqlite()

    def _init_sqlite(self):
        with self._get_connection() as conn:
            conn.executescript(CREATE_TABLES_SQL)
            conn.commit()
        self.logger.info(f"SQLite catalog initialized at {self.config.sqlite_path}")

    @contextmanager
    def _get_connection(self):
        if self.config.database_type != "sqlite":
            raise ValueError("SQLite requested but database_type != sqlite")
        conn = sqlite3.connect(self.config.sqlite_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def _row_to_item(self, r: sqlite3.Row) -> CatalogItem:
        return CatalogItem(
            id=r["id"],
            name=r["name"],
            slug=r["slug"],
            description=r["description"],
            images=json.loads(r["images"] or "[]"),
            type=r["type"],
            material=r["material"],
            occasion=r["occasion"],
            collection_id=r["collection_id"],
            stock=r["stock"],
            featured=bool(r["featured"]),
            most_loved=bool(r["most_loved"]),
            new_arrival=bool(r["new_arrival"]),
            sku=r["sku"],
            sizes=json.loads(r["sizes"] or "[]"),
            price_range=r["price_range"],
            meta_title=r["meta_title"],
            meta_description=r["meta_description"],
            is_deleted=bool(r["is_deleted"]),
            created_by=r["created_by"],
            updated_by=r["updated_by"],
            created_at=_parse_ts(r["created_at"]),
            updated_at=_parse_ts(r["updated_at"]),
        )

    # --- product queries --- #
    def get_products(self, include_deleted: bool = False) -> List[CatalogItem]:
        q = "SELECT * FROM products"
        if not include_deleted:
            q += " WHERE is_deleted = 0"
        q += " ORDER BY created_at DESC, name"
        with self._get_connection() as conn:
            rows = conn.execute(q).fetchall()
            return [self._row_to_item(r) for r in rows]

    def get_product(self, product_id: str) -> Optional[CatalogItem]:
        with self._get_connection() as conn:
            row = conn.execute("SELECT * FROM products WHERE id=?", (product_id,)).fetchone()
            return self._row_to_item(row) if row else None

    def get_product_by_slug(self, slug: str) -> Optional[CatalogItem]:
        with self._get_connection() as conn:
            row = conn.execute("SELECT * FROM products WHERE slug=?", (slug,)).fetchone()
            return self._row_to_item(row) if row else None

    def existing_slugs(self, slugs: Iterable[str]) -> Set[str]:
        wanted = [s for s in set(slugs) if s]
        if not wanted:
            return set()
        placeholders = ",".join("?" for _ in wanted)
        with self._get_connection() as conn:
            rows = conn.execute(
                f"SELECT slug FROM products WHERE slug IN ({placeholders})", wanted
            ).fetchall()
            return {r["slug"] for r in rows}

    # --- product writes --- #
    def create_product(
        self, payload: Dict[str, Any], acting_user: Optional[str] = None
    ) -> CatalogItem:
        item = CatalogItem(
            id=str(uuid.uuid4()),
            name=payload.get("name") or "",
            slug=payload.get("slug") or generate_slug(payload.get("name")),
            description=payload.get("description"),
            images=list(payload.get("images") or []),
            type=payload.get("type") or "",
            material=payload.get("material") or "",
            occasion=payload.get("occasion") or None,
            collection_id=payload.get("collection_id") or None,
            stock=payload.get("stock") or 0,
            featured=bool(payload.get("featured")),
            most_loved=bool(payload.get("most_loved")),
            new_arrival=bool(payload.get("new_arrival")),
            sku=payload.get("sku") or None,
            sizes=list(payload.get("sizes") or []),
            price_range=payload.get("price_range") or None,
            meta_title=payload.get("meta_title") or None,
            meta_description=payload.get("meta_description") or None,
            created_by=acting_user,
            updated_by=acting_user,
        )
        try:
            item.validate()
        except ValueError as e:
            raise CatalogCreateError(str(e)) from e
        item.stock = int(item.stock)

        now = datetime.now().isoformat(sep=" ", timespec="seconds")
        with self._get_connection() as conn:
            try:
                conn.execute(
                    """INSERT INTO products
                    (id, name, slug, description, images, type, material, occasion, collection_id,
                     stock, featured, most_loved, new_arrival, sku, sizes, price_range,
                     meta_title, meta_description, created_by, updated_by, created_at, updated_at)
                    VALUES (?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?)""",
                    (
                        item.id,
                        item.name,
                        item.slug,
                        item.description,
                        json.dumps(item.images),
                        item.type,
                        item.material,
                        item.occasion,
                        item.collection_id,
                        item.stock,
                        item.featured,
                        item.most_loved,
                        item.new_arrival,
                        item.sku,
                        json.dumps(item.sizes),
                        item.price_range,
                        item.meta_title,
                        item.meta_description,
                        acting_user,
                        acting_user,
                        now,
                        now,
                    ),
                )
            except sqlite3.IntegrityError as e:
                if "products.slug" in str(e):
                    raise DuplicateSlugError(item.slug) from e
                raise CatalogCreateError(str(e)) from e
            conn.commit()
        item.created_at = item.updated_at = datetime.fromisoformat(now)
        self.logger.info(f"Created product '{item.name}' ({item.slug})")
        return item

    def update_product(
        self, product_id: str, updates: Dict[str, Any], acting_user: Optional[str] = None
    ) -> CatalogItem:
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        current = self.get_product(product_id)
        if current is None:
            raise KeyError(product_id)
        for key, value in updates.items():
            setattr(current, key, value)
        current.validate()

        columns = []
        values: List[Any] = []
        for key, value in updates.items():
            columns.append(f"{key}=?")
            values.append(json.dumps(list(value)) if key in JSON_FIELDS else value)
        columns += ["updated_by=?", "updated_at=?"]
        values += [acting_user, datetime.now().isoformat(sep=" ", timespec="seconds")]
        values.append(product_id)
        with self._get_connection() as conn:
            conn.execute(f"UPDATE products SET {', '.join(columns)} WHERE id=?", values)
            conn.commit()
        return self.get_product(product_id)  # type: ignore[return-value]

    def update_stock(
        self, product_id: str, new_stock: int, acting_user: Optional[str] = None
    ) -> CatalogItem:
        if new_stock < 0:
            raise ValueError("Stock cannot be negative")
        item = self.update_product(product_id, {"stock": int(new_stock)}, acting_user)
        self.logger.info(f"Stock for '{item.name}' set to {item.stock}")
        return item

    def delete_product(self, product_id: str, acting_user: Optional[str] = None) -> bool:
        """Soft delete: flag the row, keep it in storage."""
        with self._get_connection() as conn:
            res = conn.execute(
                "UPDATE products SET is_deleted=1, updated_by=?, updated_at=? WHERE id=? AND is_deleted=0",
                (acting_user, datetime.now().isoformat(sep=" ", timespec="seconds"), product_id),
            )
            if res.rowcount:
                conn.commit()
                self.logger.info(f"Soft-deleted product {product_id}")
                return True
            return False

    # --- collections --- #
    def create_collection(
        self, name: str, handle: Optional[str] = None, description: Optional[str] = None
    ) -> Collection:
        collection = Collection(
            id=str(uuid.uuid4()),
            name=name,
            handle=handle or generate_slug(name),
            description=description,
        )
        with self._get_connection() as conn:
            conn.execute(
                "INSERT INTO collections (id, name, handle, description) VALUES (?,?,?,?)",
                (collection.id, collection.name, collection.handle, collection.description),
            )
            conn.commit()
        return collection

    def get_collections(self) -> List[Collection]:
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT id, name, handle, description, created_at FROM collections ORDER BY name"
            ).fetchall()
            return [
                Collection(
                    id=r["id"],
                    name=r["name"],
                    handle=r["handle"],
                    description=r["description"],
                    created_at=_parse_ts(r["created_at"]),
                )
                for r in rows
            ]
