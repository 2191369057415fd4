# Utils package
import logging
import re
from typing import Optional, Tuple


RE_SLUG_STRIP = re.compile(r"[^a-z0-9\s-]")
RE_WHITESPACE = re.compile(r"\s+")


def generate_slug(name):
    """Lower-case, drop anything but letters/digits/spaces/hyphens, hyphenate spaces.

    Edge hyphens are kept: "Ring !" gives "ring-".
    """
    if not name:
        return ""
    slug = RE_SLUG_STRIP.sub("", str(name).lower())
    return RE_WHITESPACE.sub("-", slug)


def hyphenate_name(name):
    """Name as it tends to appear in image filenames: lower-cased, spaces -> hyphens."""
    return RE_WHITESPACE.sub("-", str(name or "").lower())


def clean_price(raw):
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        return float(raw)

    # Indian grouping ("1,20,000") and western grouping both use commas as
    # thousands separators in catalog price text
    price = str(raw).replace("₹", "").replace("Rs.", "").replace("Rs", "")
    price = price.replace(",", "").replace(" ", "").strip()

    try:
        return float(price)
    except (ValueError, TypeError):
        return None


def parse_price_range(text) -> Optional[Tuple[float, float]]:
    """Parse "₹50,000 - ₹75,000" into (50000.0, 75000.0).

    A single price gives (p, p). Returns None when nothing parses.
    """
    if text is None:
        return None
    parts = [p for p in re.split(r"\s*[-–]\s*", str(text).strip()) if p]
    prices = [clean_price(p) for p in parts]
    prices = [p for p in prices if p is not None]
    if not prices:
        return None
    low, high = min(prices), max(prices)
    return low, high


def setup_logging(log_file):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
