"""Downloadable sample spreadsheet showing the expected import columns."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)

SAMPLE_COLUMNS = [
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
    "collection",
    "price_range",
    "image_filenames",
]

SAMPLE_ROWS = [
    {
        "name": "Diamond Engagement Ring",
        "description": "Beautiful solitaire diamond ring",
        "sku": "DR-001",
        "type": "ring",
        "material": "diamond",
        "occasion": "bridal",
        "stock": 10,
        "featured": "false",
        "most_loved": "true",
        "new_arrival": "false",
        "sizes": "S,M,L",
        "meta_title": "Diamond Engagement Ring - Premium Collection",
        "meta_description": "Stunning solitaire diamond engagement ring crafted with precision",
        "slug": "diamond-engagement-ring",
        "collection": "bridal",
        "price_range": "₹50,000 - ₹75,000",
        "image_filenames": "diamond-engagement-ring-1.jpg|diamond-engagement-ring-2.jpg",
    },
    {
        "name": "Gold Necklace Set",
        "description": "Traditional gold necklace with matching earrings",
        "sku": "GN-002",
        "type": "necklace",
        "material": "gold",
        "occasion": "festive",
        "stock": 5,
        "featured": "true",
        "most_loved": "false",
        "new_arrival": "true",
        "sizes": "",
        "meta_title": "Traditional Gold Necklace Set",
        "meta_description": "Elegant traditional gold necklace perfect for festivities",
        "slug": "gold-necklace-set",
        "collection": "festive",
        "price_range": "₹30,000 - ₹45,000",
        "image_filenames": "gold-necklace-set.png",
    },
]


def sample_frame() -> pd.DataFrame:
    return pd.DataFrame(SAMPLE_ROWS, columns=SAMPLE_COLUMNS)


def sample_csv() -> str:
    return sample_frame().to_csv(index=False)


def write_sample_csv(path: Union[str, Path] = "sample-products.csv") -> Path:
    p = Path(path)
    sample_frame().to_csv(p, index=False, encoding="utf-8")
    logger.info(f"Created sample CSV template: {p}")
    return p
