"""
Display labels and price parsing for catalog products shown in the browser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from database.models import CatalogItem
from utils import parse_price_range

# stored enum value -> sidebar label
MATERIAL_LABELS = {
    "gold": "Gold",
    "diamond": "Diamond",
    "platinum": "Platinum",
    "rose-gold": "Rose Gold",
}
TYPE_LABELS = {
    "ring": "Rings",
    "necklace": "Necklaces",
    "earring": "Earrings",
    "bracelet": "Bracelets",
    "bangle": "Bangles",
}
OCCASION_LABELS = {
    "bridal": "Bridal",
    "festive": "Festive",
    "daily-wear": "Daily Wear",
    "gift": "Gift Ideas",
}

PLACEHOLDER_IMAGE = "/placeholder.svg"


@dataclass(frozen=True)
class BrowseItem:
    id: Union[int, str, None]
    name: str
    collection: str
    material: str
    type: str
    occasion: str
    price_min: float = 0
    price_max: float = 0
    price_range: str = "Price on request"
    is_new: bool = False
    featured: bool = False
    popular: bool = False
    sku: str = "N/A"
    description: str = ""
    image: str = PLACEHOLDER_IMAGE


def display_label(value: Optional[str], labels: Mapping[str, str], default: str) -> str:
    if not value:
        return default
    if value in labels:
        return labels[value]
    words = str(value).replace("_", " ").replace("-", " ").split()
    return " ".join(w[:1].upper() + w[1:] for w in words) or default


def product_to_browse_item(
    item: CatalogItem, collection_names: Optional[Mapping[str, str]] = None
) -> BrowseItem:
    """Map a stored product to its browsing representation.

    Products without a parseable price range are priced at 0 - 0 so they stay
    visible under the default price filter.
    """
    names = collection_names or {}
    prices = parse_price_range(item.price_range)
    price_min, price_max = prices if prices else (0, 0)
    return BrowseItem(
        id=item.id,
        name=item.name or "Product",
        collection=names.get(item.collection_id or "", "General"),
        material=display_label(item.material, MATERIAL_LABELS, "Gold"),
        type=display_label(item.type, TYPE_LABELS, "Rings"),
        occasion=display_label(item.occasion, OCCASION_LABELS, "Daily Wear"),
        price_min=price_min,
        price_max=price_max,
        price_range=item.price_range or "Price on request",
        is_new=item.new_arrival,
        featured=item.featured,
        popular=item.most_loved,
        sku=item.sku or "N/A",
        description=item.description or "Beautiful handcrafted jewelry piece",
        image=item.images[0] if item.images else PLACEHOLDER_IMAGE,
    )
