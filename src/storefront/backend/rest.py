"""REST client for the hosted catalog tables (PostgREST-style API)."""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any, Iterable, Set

import requests

from database.config import DatabaseConfig
from database.models import CatalogItem, Collection
from storefront.errors import CatalogCreateError, DuplicateSlugError
from utils import generate_slug

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


def _parse_ts(value) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def item_from_record(record: Dict[str, Any]) -> CatalogItem:
    return CatalogItem(
        id=record.get("id"),
        name=record.get("name") or "",
        slug=record.get("slug") or "",
        description=record.get("description"),
        images=list(record.get("images") or []),
        type=record.get("type") or "",
        material=record.get("material") or "",
        occasion=record.get("occasion"),
        collection_id=record.get("collection_id"),
        stock=int(record.get("stock") or 0),
        featured=bool(record.get("featured")),
        most_loved=bool(record.get("most_loved")),
        new_arrival=bool(record.get("new_arrival")),
        sku=record.get("sku"),
        sizes=list(record.get("sizes") or []),
        price_range=record.get("price_range"),
        meta_title=record.get("meta_title"),
        meta_description=record.get("meta_description"),
        is_deleted=bool(record.get("is_deleted")),
        created_by=record.get("created_by"),
        updated_by=record.get("updated_by"),
        created_at=_parse_ts(record.get("created_at")),
        updated_at=_parse_ts(record.get("updated_at")),
    )


def collection_from_record(record: Dict[str, Any]) -> Collection:
    return Collection(
        id=record.get("id"),
        name=record.get("name") or "",
        handle=record.get("handle") or "",
        description=record.get("description"),
        created_at=_parse_ts(record.get("created_at")),
    )


class RestCatalogClient:
    def __init__(self, config: DatabaseConfig, session: Optional[requests.Session] = None):
        if not config.api_url:
            raise ValueError("api_url not provided in config")
        self.config = config
        self.base_url = config.api_url.rstrip("/")
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        if self.config.api_key:
            headers["apikey"] = self.config.api_key
        token = self.config.access_token or self.config.api_key
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, table: str, **kwargs) -> requests.Response:
        return self.session.request(
            method,
            f"{self.base_url}/{table}",
            headers=self._headers(),
            timeout=self.config.http_timeout,
            **kwargs,
        )

    def _get(self, table: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        resp = self._request("GET", table, params=params)
        resp.raise_for_status()
        return resp.json()

    # --- product queries --- #
    def get_products(self, include_deleted: bool = False) -> List[CatalogItem]:
        params = {"select": "*", "order": "created_at.desc"}
        if not include_deleted:
            params["is_deleted"] = "eq.false"
        return [item_from_record(r) for r in self._get("products", params)]

    def get_product(self, product_id: str) -> Optional[CatalogItem]:
        rows = self._get("products", {"select": "*", "id": f"eq.{product_id}"})
        return item_from_record(rows[0]) if rows else None

    def existing_slugs(self, slugs: Iterable[str]) -> Set[str]:
        wanted = sorted({s for s in slugs if s})
        if not wanted:
            return set()
        quoted = ",".join(f'"{s}"' for s in wanted)
        rows = self._get("products", {"select": "slug", "slug": f"in.({quoted})"})
        return {r["slug"] for r in rows}

    def get_collections(self) -> List[Collection]:
        rows = self._get("collections", {"select": "id,name,handle,description,created_at"})
        return [collection_from_record(r) for r in rows]

    def create_collection(
        self, name: str, handle: Optional[str] = None, description: Optional[str] = None
    ) -> Collection:
        body = {"name": name, "handle": handle or generate_slug(name), "description": description}
        resp = self._request("POST", "collections", json=[body])
        resp.raise_for_status()
        rows = resp.json()
        collection = collection_from_record(rows[0] if isinstance(rows, list) else rows)
        self.logger.info(f"Created collection '{collection.name}' ({collection.handle})")
        return collection

    # --- product writes --- #
    def create_product(
        self, payload: Dict[str, Any], acting_user: Optional[str] = None
    ) -> CatalogItem:
        body = dict(payload, created_by=acting_user, updated_by=acting_user)
        try:
            resp = self._request("POST", "products", json=[body])
        except requests.exceptions.RequestException as e:
            raise CatalogCreateError(str(e)) from e
        if not resp.ok:
            try:
                error = resp.json()
            except ValueError:
                error = {"message": resp.text}
            if resp.status_code == 409 or error.get("code") == UNIQUE_VIOLATION:
                raise DuplicateSlugError(payload.get("slug") or "")
            raise CatalogCreateError(error.get("message") or resp.text)
        rows = resp.json()
        item = item_from_record(rows[0] if isinstance(rows, list) else rows)
        self.logger.info(f"Created product '{item.name}' ({item.slug})")
        return item

    def _patch(self, product_id: str, updates: Dict[str, Any]) -> List[Dict[str, Any]]:
        resp = self._request("PATCH", "products", params={"id": f"eq.{product_id}"}, json=updates)
        resp.raise_for_status()
        return resp.json()

    def update_stock(
        self, product_id: str, new_stock: int, acting_user: Optional[str] = None
    ) -> CatalogItem:
        if new_stock < 0:
            raise ValueError("Stock cannot be negative")
        rows = self._patch(
            product_id,
            {
                "stock": int(new_stock),
                "updated_by": acting_user,
                "updated_at": datetime.now().isoformat(),
            },
        )
        if not rows:
            raise KeyError(product_id)
        return item_from_record(rows[0])

    def delete_product(self, product_id: str, acting_user: Optional[str] = None) -> bool:
        rows = self._patch(product_id, {"is_deleted": True, "updated_by": acting_user})
        return bool(rows)
