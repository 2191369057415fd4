"""Validation for bulk-import spreadsheet rows.

Validation never raises: each row collects every applicable error in one
pass, and a row with any error is left out of the import.
"""

from __future__ import annotations
import math
import re
from collections import Counter
from typing import List, Dict, Any, Mapping, Optional, Iterable

from database.models import ImportRow, PRODUCT_TYPES, PRODUCT_MATERIALS, PRODUCT_OCCASIONS
from utils import generate_slug

REQUIRED_FIELDS = ["name", "type", "material", "stock", "slug"]
BOOLEAN_FIELDS = ["featured", "most_loved", "new_arrival"]
TEXT_FIELDS = [
    "name",
    "description",
    "sku",
    "type",
    "material",
    "occasion",
    "collection",
    "price_range",
    "meta_title",
    "meta_description",
    "slug",
]
# spreadsheet headers used by older templates
COLUMN_ALIASES = {"priceRange": "price_range"}

RE_IMAGE_NAME = re.compile(r"\.(jpg|jpeg|png|webp)$", re.IGNORECASE)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def _parse_number(text: str) -> Optional[float]:
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_bool(value: Any) -> bool:
    return _text(value).lower() == "true"


def parse_sizes(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [str(s).strip() for s in value if str(s).strip()]
    return [s.strip() for s in _text(value).split(",") if s.strip()]


def parse_requested_filenames(value: Any) -> List[str]:
    names = [n.strip().lower() for n in _text(value).split("|")]
    return [n for n in names if n and RE_IMAGE_NAME.search(n)]


def _enum_error(field: str, allowed: List[str]) -> str:
    return f"Invalid {field}. Must be one of: {', '.join(allowed)}"


def validate_row(raw: Mapping[str, Any], row_index: int) -> ImportRow:
    """Normalise one raw row and collect its validation errors."""
    data = {COLUMN_ALIASES.get(k, k): v for k, v in raw.items()}
    errors: List[str] = []
    fields: Dict[str, Any] = {key: _text(data.get(key)) for key in TEXT_FIELDS}

    stock_text = _text(data.get("stock"))
    for field in REQUIRED_FIELDS:
        value = stock_text if field == "stock" else fields[field]
        if not value:
            errors.append(f"{field} is required")

    # derived for image matching and duplicate checks only
    if not fields["slug"] and fields["name"]:
        fields["slug"] = generate_slug(fields["name"])

    if fields["type"] and fields["type"] not in PRODUCT_TYPES:
        errors.append(_enum_error("type", PRODUCT_TYPES))
    if fields["material"] and fields["material"] not in PRODUCT_MATERIALS:
        errors.append(_enum_error("material", PRODUCT_MATERIALS))
    if fields["occasion"] and fields["occasion"] not in PRODUCT_OCCASIONS:
        errors.append(_enum_error("occasion", PRODUCT_OCCASIONS))

    stock: Any = None
    if stock_text:
        number = _parse_number(stock_text)
        if number is None:
            errors.append("Stock must be a valid number")
            stock = stock_text
        elif not number.is_integer():
            errors.append("Stock must be a whole number")
            stock = number
        else:
            stock = int(number)
            if number < 0:
                errors.append("Stock cannot be negative")
    fields["stock"] = stock

    for field in BOOLEAN_FIELDS:
        fields[field] = parse_bool(data.get(field))
    fields["sizes"] = parse_sizes(data.get("sizes"))
    fields["collection_id"] = None

    return ImportRow(
        row_index=row_index,
        fields=fields,
        errors=errors,
        requested_filenames=parse_requested_filenames(data.get("image_filenames")),
    )


def flag_duplicate_slugs(rows: List[ImportRow]) -> None:
    counts = Counter(r.slug for r in rows if r.slug)
    for r in rows:
        if r.slug and counts[r.slug] > 1:
            r.errors.append("Duplicate slug in file")


def flag_existing_slugs(rows: List[ImportRow], existing: Iterable[str]) -> None:
    taken = set(existing)
    for r in rows:
        if r.slug and r.slug in taken:
            r.errors.append("Slug already exists in database")


def resolve_collections(rows: List[ImportRow], lookup: Mapping[str, str]) -> None:
    """Attach collection ids by case-insensitive name/handle; misses are warnings."""
    for r in rows:
        name = r.fields.get("collection") or ""
        if not name:
            r.fields["collection_id"] = None
            r.warnings.append("No collection specified.")
            continue
        collection_id = lookup.get(name.lower())
        r.fields["collection_id"] = collection_id
        if collection_id is None:
            r.warnings.append(f"Collection '{name}' not found. Will assign no collection.")


def validate_rows(raw_rows: Iterable[Mapping[str, Any]]) -> List[ImportRow]:
    """Validate every row (1-based indices) and flag slugs repeated in the file."""
    rows = [validate_row(raw, idx) for idx, raw in enumerate(raw_rows, start=1)]
    flag_duplicate_slugs(rows)
    return rows


__all__ = [
    "validate_row",
    "validate_rows",
    "flag_duplicate_slugs",
    "flag_existing_slugs",
    "resolve_collections",
]
